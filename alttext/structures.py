"""
Template selector.

Fixed, ordered sentence structures combining an activity phrase, a location
and up to two keywords. Index = reference number mod template count.
"""
from church_contexts import KEYWORD_DEFAULTS

MAX_TEMPLATE_KEYWORDS = 2


def _at(activity: str, location: str, keywords: list[str]) -> str:
    return f"{activity} at {location}"


def _location_first(activity: str, location: str, keywords: list[str]) -> str:
    return f"{location} {activity}"


def _during(activity: str, location: str, keywords: list[str]) -> str:
    keyword = keywords[0] if keywords else KEYWORD_DEFAULTS["during"]
    return f"{activity} during {keyword} at {location}"


def _keyword_lead(activity: str, location: str, keywords: list[str]) -> str:
    keyword = keywords[0] if keywords else KEYWORD_DEFAULTS["lead"]
    return f"{keyword} {activity} at {location}"


def _keyword_list(activity: str, location: str, keywords: list[str]) -> str:
    if not keywords:
        return _at(activity, location, keywords)
    return f"{activity} - {', '.join(keywords)} at {location}"


TEMPLATES = (_at, _location_first, _during, _keyword_lead, _keyword_list)


def select_keywords(keywords: list[str]) -> list[str]:
    return keywords[:MAX_TEMPLATE_KEYWORDS]


def compose(activity: str, location: str, keywords: list[str], reference: int) -> str:
    """Build the sentence for one image. Empty location → activity verbatim."""
    if not location:
        return activity
    template = TEMPLATES[reference % len(TEMPLATES)]
    return template(activity, location, select_keywords(keywords))
