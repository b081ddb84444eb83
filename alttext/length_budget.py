"""
Length budget for alt text.

Every string leaving the engine is at most MAX_LENGTH characters. Optional
additions (one more keyword, a short disambiguation suffix) are only appended
when they fit; anything still too long is cut to MAX_LENGTH - len(ELLIPSIS)
characters and ends with ELLIPSIS.
"""
from models import ImageAttributes

MAX_LENGTH        = 105
ELLIPSIS          = "..."
KEYWORD_THRESHOLD = 80   # only add a keyword to text shorter than this
SUFFIX_THRESHOLD  = 95   # only add the file suffix to text shorter than this


def truncate(text: str, max_length: int = MAX_LENGTH) -> str:
    if len(text) <= max_length:
        return text
    return text[:max_length - len(ELLIPSIS)] + ELLIPSIS


def append_if_fits(text: str, addition: str, max_length: int = MAX_LENGTH) -> str:
    if len(text) + len(addition) <= max_length:
        return text + addition
    return text


def disambiguation_suffix(attributes: ImageAttributes) -> str:
    """First three characters of the file name plus size mod 100."""
    return f"{attributes.name[:3]}{attributes.size_bytes % 100}"


def apply_budget(text: str, keywords: list[str], attributes: ImageAttributes) -> str:
    """Enrich a composed sentence within the budget, then enforce the limit.

    keywords: the keywords that took part in template selection.
    """
    if keywords and len(text) < KEYWORD_THRESHOLD:
        unused = [k for k in keywords if k not in text]
        if unused:
            text = append_if_fits(text, f" - {unused[0]}")

    if len(text) < SUFFIX_THRESHOLD:
        text = append_if_fits(text, f" {disambiguation_suffix(attributes)}")

    return truncate(text)
