import os
import uuid
import tempfile

from flask import Flask, request, jsonify, Response
from dotenv import load_dotenv
from pydantic import ValidationError
from werkzeug.utils import secure_filename

from alttext.length_budget import MAX_LENGTH
from batch import LocationRequired, run_batch
from error_log import log_error
from export import dumps_export, export_filename
from image_processor import ALLOWED_EXTENSIONS
from models import PhotoRecord, PhotoUpload

load_dotenv()

app = Flask(__name__)
app.config["MAX_CONTENT_LENGTH"] = 16 * 1024 * 1024  # 16 MB


def _error(message: str, status: int):
    return jsonify({"error": message}), status


def _local_name(filename: str) -> str:
    """Collision-free name for the temp copy, keeping the extension."""
    safe = secure_filename(filename) or "upload"
    return f"{uuid.uuid4().hex[:12]}_{safe}"


# ── Routes ────────────────────────────────────────────────────────────────────

@app.route("/robots.txt")
def robots_txt():
    return Response("User-agent: *\nDisallow: /\n", mimetype="text/plain")


@app.route("/")
def index():
    return jsonify({
        "service":            "Church Photo Alt-Tag Generator",
        "max_length":         MAX_LENGTH,
        "allowed_extensions": sorted(ALLOWED_EXTENSIONS),
        "classifier":         os.environ.get("CLASSIFIER_BACKEND", "gemini_api"),
    })


@app.route("/generate", methods=["POST"])
def generate():
    files = [f for f in request.files.getlist("photos") if f and f.filename]
    if not files:
        return _error("No photos received.", 400)

    location = request.form.get("location", "")
    keywords = request.form.get("keywords", "")
    seed     = request.form.get("seed", type=int)

    # Process inside a temporary directory — nothing is kept on disk afterwards
    with tempfile.TemporaryDirectory() as tmpdir:
        uploads = []
        for f in files:
            path = os.path.join(tmpdir, _local_name(f.filename))
            f.save(path)
            uploads.append(PhotoUpload(filename=f.filename, path=path))

        try:
            report = run_batch(uploads, location, keywords, seed=seed)
        except LocationRequired as e:
            return _error(str(e), 400)
        except Exception as e:
            log_error("generate", e)
            return _error(f"Processing failed: {e}", 500)

    return jsonify({
        "results":    [o.model_dump() for o in report.outcomes],
        "generated":  report.generated,
        "classified": report.classified,
        "fallback":   report.fallback,
        "failed":     report.failed,
    })


@app.route("/export", methods=["POST"])
def export():
    payload = request.get_json(silent=True) or {}
    try:
        records = [
            PhotoRecord(
                filename=p.get("filename", ""),
                alt_tag=p.get("altTag"),
                approved=p.get("approved", False),
            )
            for p in payload.get("photos", [])
        ]
    except (AttributeError, TypeError, ValidationError):
        return _error("Expected {\"photos\": [{filename, altTag, approved}]}.", 400)

    return Response(
        dumps_export(records),
        mimetype="application/json",
        headers={"Content-Disposition": f"attachment; filename={export_filename()}"},
    )


if __name__ == "__main__":
    print("Starting on http://localhost:5000")
    app.run(debug=True, port=5000)
