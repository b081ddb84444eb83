"""
Classifier backend: Google Gemini
Asks Gemini for ranked image-classification labels with structured JSON output.
Requires GEMINI_API_KEY in environment; GEMINI_MODEL overrides the model.
"""
import os
import json

from google import genai
from google.genai import types
from pydantic import BaseModel

from classifier import ClassifierUnavailable
from models import Prediction

DEFAULT_MODEL = "gemini-2.5-flash-lite"
MAX_LABELS    = 5

MIME_TYPES = {
    "jpg":  "image/jpeg",
    "jpeg": "image/jpeg",
    "png":  "image/png",
    "webp": "image/webp",
    "gif":  "image/gif",
}


class AiResponse(BaseModel):
    predictions: list[Prediction]


PROMPT = (
    "Classify the main content of this photo.\n\n"
    f"Return up to {MAX_LABELS} predictions ordered from most to least likely.\n"
    "For each prediction provide:\n"
    "- label: short lowercase class name in English, like an ImageNet label "
    "(e.g. \"church\", \"grand piano\", \"microphone\", \"crowd\")\n"
    "- score: confidence as float 0.0 to 1.0\n"
)


def _parse(response) -> dict:
    # Prefer response.parsed (SDK-parsed Pydantic object); fall back to the JSON text.
    parsed = getattr(response, "parsed", None)
    if parsed is not None:
        return parsed.model_dump()
    raw_text = response.text or ""
    try:
        return json.loads(raw_text)
    except json.JSONDecodeError:
        try:
            start = raw_text.index("{")
            end   = raw_text.rindex("}") + 1
            return json.loads(raw_text[start:end])
        except ValueError as e:
            snippet = raw_text[:500] if raw_text else "(empty)"
            raise ClassifierUnavailable(
                f"Gemini returned a response that could not be parsed as JSON. "
                f"(Detail: {e}) Raw: {snippet}"
            )


def classify(image_path: str) -> list[Prediction]:
    """Send an image to Gemini and return predictions sorted by descending score."""
    api_key = os.environ.get("GEMINI_API_KEY")
    if not api_key:
        raise ClassifierUnavailable(
            "GEMINI_API_KEY is not set. Copy .env.example to .env and add your key."
        )
    model = os.environ.get("GEMINI_MODEL", DEFAULT_MODEL)

    ext       = image_path.rsplit(".", 1)[-1].lower()
    mime_type = MIME_TYPES.get(ext, "image/jpeg")

    with open(image_path, "rb") as f:
        image_bytes = f.read()

    client = genai.Client(api_key=api_key)

    try:
        response = client.models.generate_content(
            model=model,
            contents=[
                types.Part.from_bytes(data=image_bytes, mime_type=mime_type),
                PROMPT,
            ],
            config=types.GenerateContentConfig(
                response_mime_type="application/json",
                response_schema=AiResponse,
            ),
        )
    except Exception as e:
        msg = str(e)
        if "429" in msg or "RESOURCE_EXHAUSTED" in msg:
            raise ClassifierUnavailable(
                "Gemini API quota exceeded — free tier limit reached."
            ) from e
        raise

    result = AiResponse.model_validate(_parse(response))
    predictions = [p for p in result.predictions if p.label.strip()]
    return sorted(predictions, key=lambda p: p.score, reverse=True)
