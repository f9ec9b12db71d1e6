# ohs/__init__.py
import os

from dotenv import load_dotenv
from flask import Flask
from sqlalchemy import event

from .extensions import db, migrate  # shared instances

load_dotenv(override=False)


def create_app(test_config=None):
    app = Flask(__name__)

    # ---- DB config ----
    if test_config is None or "SQLALCHEMY_DATABASE_URI" not in test_config:
        db_url = os.getenv("DATABASE_URL", "").strip()
        if not db_url:
            raise RuntimeError("DATABASE_URL is not set")
        app.config["SQLALCHEMY_DATABASE_URI"] = db_url
    app.config["SQLALCHEMY_TRACK_MODIFICATIONS"] = False
    app.config.setdefault("SQLALCHEMY_ENGINE_OPTIONS", {"pool_pre_ping": True})

    # ---- uploads / request limits ----
    app.config["UPLOAD_FOLDER"] = os.getenv(
        "UPLOAD_FOLDER", os.path.join(app.instance_path, "uploads")
    )
    app.config["MAX_CONTENT_LENGTH"] = int(
        os.getenv("MAX_CONTENT_LENGTH", 10 * 1024 * 1024)
    )
    app.config["DB_SCHEMA"] = os.getenv("DB_SCHEMA", "").strip() or None
    app.config["LOG_LEVEL"] = os.getenv("LOG_LEVEL", "INFO").upper()

    if test_config:
        app.config.update(test_config)

    app.logger.setLevel(app.config["LOG_LEVEL"])

    db.init_app(app)
    migrate.init_app(app, db)

    with app.app_context():
        _install_connection_hooks(app)

    from .errors import register_error_handlers
    register_error_handlers(app)

    # ---- Blueprints (register ONLY inside the factory) ----
    from ohs.registers import api_blueprints, uploads_bp

    for bp in api_blueprints:
        app.register_blueprint(bp)
    app.register_blueprint(uploads_bp)

    from .routes_root import root_bp
    app.register_blueprint(root_bp)

    return app


def _install_connection_hooks(app):
    engine = db.engine

    if engine.dialect.name == "sqlite":
        # SQLite ignores FK constraints (and ON DELETE rules) unless asked
        def _enable_foreign_keys(dbapi_conn, _rec):
            cur = dbapi_conn.cursor()
            cur.execute("PRAGMA foreign_keys=ON")
            cur.close()
        event.listen(engine, "connect", _enable_foreign_keys)

    schema = app.config.get("DB_SCHEMA")
    if schema and engine.dialect.name == "postgresql":
        def _set_search_path(dbapi_conn, _rec):
            cur = dbapi_conn.cursor()
            cur.execute(f'SET search_path TO "{schema}", public')
            cur.close()
        event.listen(engine, "connect", _set_search_path)
        app.logger.info("Using search_path %s, public", schema)
