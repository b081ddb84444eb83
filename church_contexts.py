# ─────────────────────────────────────────────────────────────────────────────
#  Church context registry
#
#  Tables used by the alt-text engine to turn raw classifier labels and file
#  names into church-domain phrases. Order matters everywhere in this file:
#  rules are tried top to bottom and the first match wins.
#
#  CONTEXT_RULES entries:
#    triggers    — substrings looked up in the lowercased classifier label
#    candidates  — phrases to pick from (index = reference number mod length)
#
#  FALLBACK_MARKERS entries (checked against the lowercased file name):
#    marker      — literal substring
#    phrase      — fixed phrase, or None to pick from GATHERING_PHRASES by size
#
#  GATHERING_PHRASES — generic pool used when no marker is present
#  KEYWORD_DEFAULTS  — stand-ins used by templates when no keyword was given
# ─────────────────────────────────────────────────────────────────────────────

CONTEXT_RULES: tuple[tuple[tuple[str, ...], tuple[str, ...]], ...] = (
    (("person", "people", "man", "woman"),
     ("congregation member", "church member", "worshipper", "parishioner")),

    (("group", "crowd", "gathering"),
     ("church gathering", "congregation", "fellowship", "community")),

    (("stage", "platform"),
     ("church altar", "sanctuary", "worship stage")),

    (("microphone", "mic"),
     ("worship service", "sermon", "church service")),

    (("piano", "keyboard"),
     ("church piano", "worship music", "hymn accompaniment")),

    (("guitar",),
     ("worship guitar", "praise music", "contemporary worship")),

    (("book", "bible"),
     ("Bible study", "scripture reading", "hymnal")),

    (("candle",),
     ("prayer candle", "worship candle", "candlelight service")),

    (("cross", "crucifix"),
     ("church cross", "sanctuary cross", "altar cross")),

    (("building", "church"),
     ("church building", "sanctuary", "chapel", "worship center")),
)

GATHERING_PHRASES: tuple[str, ...] = (
    "worship service",
    "church gathering",
    "community fellowship",
    "spiritual worship",
    "church service",
    "congregation meeting",
    "faith gathering",
    "church community",
    "worship celebration",
)

FALLBACK_MARKERS: tuple[tuple[str, str | None], ...] = (
    ("service", None),
    ("baptism", "baptism ceremony"),
    ("youth",   "youth ministry"),
    ("choir",   "choir performance"),
)

KEYWORD_DEFAULTS = {
    "during": "worship",
    "lead":   "Church",
}
