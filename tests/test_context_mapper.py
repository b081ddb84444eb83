"""Tests for classifier label → church phrase mapping."""

from __future__ import annotations

from alttext.context_mapper import map_label
from church_contexts import CONTEXT_RULES


class TestMapLabel:
    def test_building_rule(self):
        assert map_label("church", 0) == "church building"
        assert map_label("church", 1) == "sanctuary"

    def test_reference_wraps_around_candidates(self):
        assert map_label("church", 4) == map_label("church", 0)
        assert map_label("church", 7) == "worship center"

    def test_case_insensitive(self):
        assert map_label("Grand PIANO", 2) == "hymn accompaniment"

    def test_first_rule_in_order_wins(self):
        # "crowd" (group rule) is listed before "church" (building rule)
        assert map_label("church crowd", 0) == "church gathering"
        # "comic book" contains "mic", and the microphone rule precedes the book rule
        assert map_label("comic book", 0) == "worship service"

    def test_unmatched_label_returned_unchanged(self):
        assert map_label("tabby cat", 3) == "tabby cat"

    def test_custom_rules(self):
        rules = ((("dove",), ("peace dove",)),)
        assert map_label("white dove", 99, rules) == "peace dove"
        assert map_label("church", 0, rules) == "church"

    def test_every_rule_has_candidates(self):
        for triggers, candidates in CONTEXT_RULES:
            assert triggers
            assert candidates
