"""
Classifier dispatcher.
Selects the active backend based on the CLASSIFIER_BACKEND environment
variable and delegates all calls to it.

Supported backends (classifier_backends/<name>.py, each must expose classify()):
  gemini_api  — Google Gemini via google-genai SDK (default, enforced JSON schema)
  offline     — no model; every call reports the classifier as unavailable

To add a new backend:
  1. Create classifier_backends/my_model.py with a classify() function matching the signature below.
  2. Set CLASSIFIER_BACKEND=my_model in .env.
"""
import os
import importlib

from dotenv import load_dotenv

from models import Prediction

load_dotenv()


class ClassifierUnavailable(RuntimeError):
    """The classification model could not be loaded or run for an image."""


def classify_image(image_path: str) -> list[Prediction]:
    """Classify an image with the active backend.

    Args:
        image_path: Local path to the image file.

    Returns:
        Predictions ordered by descending score (at least one entry).

    Raises:
        ClassifierUnavailable: on any backend failure. No partial results.
    """
    load_dotenv(override=True)  # re-read .env so changes apply without server restart
    provider = os.environ.get("CLASSIFIER_BACKEND", "gemini_api")
    try:
        backend = importlib.import_module(f"classifier_backends.{provider}")
    except ModuleNotFoundError as e:
        if e.name != f"classifier_backends.{provider}":
            raise ClassifierUnavailable(f"Classifier '{provider}' could not be loaded: {e}") from e
        raise ClassifierUnavailable(
            f"Classifier backend '{provider}' not found. "
            f"Create classifier_backends/{provider}.py or change CLASSIFIER_BACKEND in .env."
        )
    except Exception as e:
        raise ClassifierUnavailable(f"Classifier '{provider}' could not be loaded: {e}") from e

    try:
        predictions = backend.classify(image_path)
    except ClassifierUnavailable:
        raise
    except Exception as e:
        raise ClassifierUnavailable(f"Classifier '{provider}' failed: {e}") from e

    if not predictions:
        raise ClassifierUnavailable(f"Classifier '{provider}' returned no labels.")
    return predictions
