import os
import uuid

from flask import Blueprint, current_app, jsonify, request, send_from_directory
from werkzeug.utils import secure_filename

from ohs.errors import ValidationError

# photos, signed forms, law files
ALLOWED_EXTENSIONS = {
    "png", "jpg", "jpeg", "gif", "webp",
    "pdf", "doc", "docx", "xls", "xlsx",
}

upload_api_bp = Blueprint("upload_api", __name__, url_prefix="/api")
uploads_bp = Blueprint("uploads", __name__, url_prefix="/uploads")


def _allowed(filename: str) -> bool:
    return "." in filename and filename.rsplit(".", 1)[1].lower() in ALLOWED_EXTENSIONS


@upload_api_bp.post("/upload")
def upload_file():
    f = request.files.get("file")
    if f is None or not f.filename:
        raise ValidationError("File is required")

    filename = secure_filename(f.filename)
    if not filename or not _allowed(filename):
        raise ValidationError("File type not allowed")

    folder = current_app.config["UPLOAD_FOLDER"]
    os.makedirs(folder, exist_ok=True)
    stored = f"{uuid.uuid4().hex[:12]}_{filename}"
    f.save(os.path.join(folder, stored))
    current_app.logger.info("Stored upload %s", stored)

    return jsonify({"fileUrl": f"/uploads/{stored}"})


@uploads_bp.get("/<path:filename>")
def serve_upload(filename):
    return send_from_directory(current_app.config["UPLOAD_FOLDER"], filename)
