"""
Data models shared by the engine, the batch runner and the HTTP layer.
All inputs are ephemeral per call; nothing here is persisted.
"""
from typing import Literal

from pydantic import BaseModel, Field


class Prediction(BaseModel):
    label: str
    score: float


class ImageAttributes(BaseModel):
    """Identifying, non-secret metadata of an upload. Used only for variation."""
    name:       str
    size_bytes: int = Field(ge=0)


class GenerationContext(BaseModel):
    location: str = ""
    keywords: str = ""   # comma-separated, as typed by the user

    def keyword_list(self) -> list[str]:
        """Ordered, trimmed, non-empty keywords."""
        return [k.strip() for k in self.keywords.split(",") if k.strip()]


class AltTextResult(BaseModel):
    text:   str
    source: Literal["classifier", "fallback"]
    label:  str | None = None   # classifier label the phrase came from


class PhotoRecord(BaseModel):
    filename: str
    alt_tag:  str | None = None
    approved: bool = False

    def edit(self, text: str) -> None:
        self.alt_tag = text

    def approve(self) -> None:
        self.approved = True


class PhotoUpload(BaseModel):
    filename: str   # name as uploaded by the user
    path:     str   # local copy the classifier reads


class PhotoOutcome(BaseModel):
    filename: str
    alt_tag:  str | None = None
    source:   Literal["classifier", "fallback"] | None = None
    error:    str | None = None


class BatchReport(BaseModel):
    outcomes:   list[PhotoOutcome] = Field(default_factory=list)
    classified: int = 0
    fallback:   int = 0
    failed:     int = 0

    @property
    def generated(self) -> int:
        return self.classified + self.fallback
