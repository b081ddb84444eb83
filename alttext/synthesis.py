"""
Alt-text synthesis.

Two branches, chosen once per call and never retried:
  classifier — pick a top-ranked label, map it to a church phrase, fill a
               template, apply the length budget
  fallback   — derive a phrase from the file name/size, compose
               "<phrase> at <location>", apply the length budget

The only non-input used is the clock reading (milliseconds), which callers
may pass explicitly as now_ms to get reproducible output.
"""
import time

from pydantic import ValidationError

from models import AltTextResult, GenerationContext, ImageAttributes, Prediction
from alttext.context_mapper import map_label
from alttext.fallback import fallback_keyword, fallback_phrase, fallback_suffix
from alttext.length_budget import append_if_fits, apply_budget, truncate
from alttext.structures import compose, select_keywords

TOP_K = 3


def now_millis() -> int:
    return time.time_ns() // 1_000_000


def _top_label(predictions: list[Prediction], reference: int) -> str | None:
    top = predictions[:TOP_K]
    if not top:
        return None
    label = top[reference % len(top)].label.strip()
    return label or None


def _coerce(classification) -> list[Prediction] | None:
    if not classification:
        return None
    if isinstance(classification, (dict, Prediction)):
        classification = [classification]
    try:
        return [p if isinstance(p, Prediction) else Prediction.model_validate(p)
                for p in classification]
    except (ValidationError, TypeError):
        return None


def _classified(
    label: str,
    attributes: ImageAttributes,
    context: GenerationContext,
    now_ms: int,
) -> str:
    reference = now_ms + attributes.size_bytes
    activity  = map_label(label, reference)
    location  = context.location.strip()
    if not location:
        return truncate(activity)

    keywords = context.keyword_list()
    sentence = compose(activity, location, keywords, reference + len(attributes.name))
    return apply_budget(sentence, select_keywords(keywords), attributes)


def _fallback(attributes: ImageAttributes, context: GenerationContext, now_ms: int) -> str:
    phrase   = fallback_phrase(attributes, now_ms)
    location = context.location.strip()
    if not location:
        return truncate(phrase)

    text    = f"{phrase} at {location}"
    keyword = fallback_keyword(attributes, context.keyword_list())
    if keyword:
        text = append_if_fits(text, f" - {keyword}")
    text = append_if_fits(text, f" {fallback_suffix(attributes)}")
    return truncate(text)


def synthesize(
    attributes: ImageAttributes,
    classification,
    location: str = "",
    keywords: str = "",
    now_ms: int | None = None,
) -> AltTextResult:
    """Produce alt text for one image and report which branch made it.

    classification: predictions ordered by descending score (Prediction
    objects or {label, score} dicts), or None when the classifier failed.
    """
    if now_ms is None:
        now_ms = now_millis()
    context     = GenerationContext(location=location or "", keywords=keywords or "")
    predictions = _coerce(classification)

    if predictions:
        label = _top_label(predictions, now_ms + attributes.size_bytes)
        if label:
            return AltTextResult(
                text=_classified(label, attributes, context, now_ms),
                source="classifier",
                label=label,
            )

    return AltTextResult(text=_fallback(attributes, context, now_ms), source="fallback")


def generate_alt_text(
    attributes: ImageAttributes,
    classification,
    location: str = "",
    keywords: str = "",
    now_ms: int | None = None,
) -> str:
    return synthesize(attributes, classification, location, keywords, now_ms).text
