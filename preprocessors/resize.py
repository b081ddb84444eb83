"""
Preprocessor: Resize

Shrinks photos before they are sent to the classifier. Church photos straight
from a camera are often 20+ MB; the classifier only needs a preview that fits
MAX_WIDTH × MAX_HEIGHT. Smaller images are returned unchanged (no upscaling).
"""
from PIL import Image

MAX_WIDTH  = 800
MAX_HEIGHT = 600


def process(image: Image.Image) -> Image.Image:
    if image.width <= MAX_WIDTH and image.height <= MAX_HEIGHT:
        return image

    preview = image.copy()
    preview.thumbnail((MAX_WIDTH, MAX_HEIGHT), Image.LANCZOS)
    return preview
