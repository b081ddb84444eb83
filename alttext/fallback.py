"""
Fallback heuristic used when no classification is available.
Derives an activity phrase from file name markers and file size only.
"""
from church_contexts import FALLBACK_MARKERS, GATHERING_PHRASES
from models import ImageAttributes


def fallback_phrase(attributes: ImageAttributes, now_ms: int) -> str:
    name = attributes.name.lower()
    size = attributes.size_bytes

    for marker, phrase in FALLBACK_MARKERS:
        if marker in name:
            if phrase is None:
                # size alone → same file always gets the same phrase
                return GATHERING_PHRASES[size % len(GATHERING_PHRASES)]
            return phrase

    return GATHERING_PHRASES[(size + now_ms) % len(GATHERING_PHRASES)]


def to_base36(value: int) -> str:
    digits = "0123456789abcdefghijklmnopqrstuvwxyz"
    if value == 0:
        return "0"
    out = ""
    while value:
        value, rem = divmod(value, 36)
        out = digits[rem] + out
    return out


def fallback_suffix(attributes: ImageAttributes) -> str:
    return to_base36(attributes.size_bytes % 1000)


def fallback_keyword(attributes: ImageAttributes, keywords: list[str]) -> str | None:
    if not keywords:
        return None
    return keywords[(attributes.size_bytes + len(attributes.name)) % len(keywords)]
