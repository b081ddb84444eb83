"""
Batch runner: generates alt text for every uploaded photo, one at a time.

A failed classification only degrades that photo's text (fallback phrase);
an unreadable file is reported as failed. Neither aborts the batch.
"""
from typing import Callable

from alttext.synthesis import synthesize
from classifier import ClassifierUnavailable, classify_image
from error_log import log_error
from image_processor import allowed, image_attributes, run_preprocessors, verify_image
from models import BatchReport, PhotoOutcome, PhotoUpload, Prediction


class LocationRequired(ValueError):
    """A batch was started without a church location."""


def _classify(upload: PhotoUpload, classify: Callable[[str], list[Prediction]]):
    try:
        return classify(upload.path)
    except Exception as e:
        log_error(f"classify file={upload.filename}", e)
        return None


def run_batch(
    uploads: list[PhotoUpload],
    location: str,
    keywords: str = "",
    classify: Callable[[str], list[Prediction]] | None = None,
    seed: int | None = None,
    on_progress: Callable[[int, int], None] | None = None,
) -> BatchReport:
    """Generate alt text for each upload in order.

    classify: defaults to the backend selected by CLASSIFIER_BACKEND.
    seed: when given, photo i uses clock reading seed + i, which makes the
    whole batch reproducible. Otherwise the wall clock is used.
    on_progress: called with (done, total) after every photo.
    """
    if not location or not location.strip():
        raise LocationRequired("Please enter your church location before processing photos.")

    classify = classify or classify_image
    report   = BatchReport()
    total    = len(uploads)

    for i, upload in enumerate(uploads):
        if not allowed(upload.filename):
            report.failed += 1
            report.outcomes.append(PhotoOutcome(
                filename=upload.filename,
                error="Unsupported file type. Please upload a JPG, PNG, WEBP or GIF image.",
            ))
        else:
            try:
                verify_image(upload.path)
                attributes = image_attributes(upload.filename, upload.path)
                run_preprocessors(upload.path)
            except Exception as e:
                log_error(f"intake file={upload.filename}", e)
                report.failed += 1
                report.outcomes.append(PhotoOutcome(
                    filename=upload.filename,
                    error="The uploaded file does not appear to be a valid image.",
                ))
            else:
                predictions = _classify(upload, classify)
                now_ms = seed + i if seed is not None else None
                result = synthesize(attributes, predictions, location, keywords, now_ms)
                if result.source == "classifier":
                    report.classified += 1
                else:
                    report.fallback += 1
                report.outcomes.append(PhotoOutcome(
                    filename=upload.filename,
                    alt_tag=result.text,
                    source=result.source,
                ))

        if on_progress:
            on_progress(i + 1, total)

    return report
