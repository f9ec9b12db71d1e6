# ohs/routes_root.py
from flask import Blueprint, current_app, jsonify, redirect
from sqlalchemy import text

from .extensions import db

root_bp = Blueprint("root_bp", __name__)


@root_bp.get("/")
def root():
    # canonical landing page: the API index
    return redirect("/api", code=302)


@root_bp.get("/api")
def api_index():
    resources = []
    for bp in current_app.blueprints.values():
        for res in getattr(bp, "resources", []):
            resources.append({"name": res.name, "label": res.label, "path": f"{bp.url_prefix}/{res.path}"})
    return jsonify(resources=sorted(resources, key=lambda r: r["path"]))


# Lightweight DB health
@root_bp.get("/api/health/db")
def health_db():
    db.session.execute(text("SELECT 1")).scalar()
    return jsonify(ok=True, dialect=db.engine.dialect.name)
