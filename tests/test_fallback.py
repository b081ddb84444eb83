"""Tests for the filename/size fallback heuristic."""

from __future__ import annotations

import pytest

from alttext.fallback import fallback_keyword, fallback_phrase, fallback_suffix, to_base36
from church_contexts import GATHERING_PHRASES
from models import ImageAttributes


def attrs(name: str, size: int) -> ImageAttributes:
    return ImageAttributes(name=name, size_bytes=size)


class TestFallbackPhrase:
    def test_marker_gives_fixed_phrase(self, baptism_photo):
        assert fallback_phrase(baptism_photo, 0) == "baptism ceremony"
        assert fallback_phrase(baptism_photo, 123456789) == "baptism ceremony"

    def test_marker_is_case_insensitive(self):
        assert fallback_phrase(attrs("Choir_Easter.JPG", 10), 0) == "choir performance"

    def test_markers_checked_in_priority_order(self):
        assert fallback_phrase(attrs("youth_choir.jpg", 10), 0) == "youth ministry"
        # "service" outranks "baptism" and picks from the pool by size only
        assert fallback_phrase(attrs("service_baptism.jpg", 10), 0) == "church gathering"
        assert fallback_phrase(attrs("service_baptism.jpg", 10), 999) == "church gathering"

    def test_no_marker_mixes_clock_and_size(self):
        photo = attrs("IMG_0001.jpg", 5)
        assert fallback_phrase(photo, 3) == "worship celebration"
        assert fallback_phrase(photo, 4) == "worship service"

    @pytest.mark.parametrize("now_ms", [0, 1, 17, 1_700_000_000_000])
    def test_always_non_empty(self, now_ms):
        phrase = fallback_phrase(attrs("", 0), now_ms)
        assert phrase in GATHERING_PHRASES


class TestSuffixAndKeyword:
    def test_base36(self):
        assert to_base36(0) == "0"
        assert to_base36(35) == "z"
        assert to_base36(36) == "10"
        assert to_base36(800) == "m8"

    def test_suffix_uses_size_mod_1000(self, baptism_photo):
        assert fallback_suffix(baptism_photo) == "m8"

    def test_keyword_index_uses_size_and_name_length(self):
        photo = attrs("a.jpg", 1)
        assert fallback_keyword(photo, ["first", "second"]) == "first"
        assert fallback_keyword(attrs("a.jpg", 2), ["first", "second"]) == "second"

    def test_no_keywords(self):
        assert fallback_keyword(attrs("a.jpg", 1), []) is None
