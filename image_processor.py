"""Upload intake helpers: validation, preprocessing and image attributes."""
import os
import importlib

from PIL import Image, ImageOps

from models import ImageAttributes

ALLOWED_EXTENSIONS = {"jpg", "jpeg", "png", "webp", "gif"}
PREPROCESSORS      = ["resize"]


def allowed(filename: str) -> bool:
    return "." in filename and filename.rsplit(".", 1)[1].lower() in ALLOWED_EXTENSIONS


def open_image(path: str) -> Image.Image:
    image = Image.open(path)
    image = ImageOps.exif_transpose(image)
    return image.convert("RGB")


def save_image(image: Image.Image, path: str) -> None:
    image.save(path)


def verify_image(path: str) -> None:
    """Raise if the file is not a decodable image."""
    with Image.open(path) as img:
        img.verify()


def run_preprocessors(image_path: str, preprocessor_names: list | None = None) -> None:
    """Run image through preprocessor pipeline in-place (save result to same path)."""
    if preprocessor_names is None:
        preprocessor_names = PREPROCESSORS
    if not preprocessor_names:
        return
    image = open_image(image_path)
    for name in preprocessor_names:
        mod   = importlib.import_module(f"preprocessors.{name}")
        image = mod.process(image)
    save_image(image, image_path)


def image_attributes(filename: str, path: str) -> ImageAttributes:
    """Attributes of the upload as the user sent it (before preprocessing)."""
    return ImageAttributes(name=filename, size_bytes=os.path.getsize(path))
