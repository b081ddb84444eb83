"""
Export of approved alt tags.

Produces church-alt-tags-<YYYY-MM-DD>.json: a UTF-8 JSON array with 2-space
indentation holding {"filename", "altTag"} for approved photos, in upload order.
"""
import json
from datetime import date, datetime, timezone

from models import PhotoRecord


def build_export(records: list[PhotoRecord]) -> list[dict]:
    return [
        {"filename": r.filename, "altTag": r.alt_tag}
        for r in records
        if r.approved
    ]


def export_filename(day: date | None = None) -> str:
    day = day or datetime.now(timezone.utc).date()
    return f"church-alt-tags-{day.isoformat()}.json"


def dumps_export(records: list[PhotoRecord]) -> bytes:
    return json.dumps(build_export(records), indent=2, ensure_ascii=False).encode("utf-8")
