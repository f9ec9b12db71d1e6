# create_tables.py
# Run this once to create any missing tables for the configured DATABASE_URL

from sqlalchemy import inspect, text

from ohs import create_app, db
import ohs.registers  # noqa: F401  (registers every model)

app = create_app()

with app.app_context():
    schema = app.config.get("DB_SCHEMA")
    if schema and db.engine.dialect.name == "postgresql":
        db.session.execute(text(f'create schema if not exists "{schema}"'))
        db.session.commit()

    db.create_all()
    tables = sorted(inspect(db.engine).get_table_names())
    print("Tables in DB:", tables)
    expected = sorted(db.metadata.tables)
    missing = [t for t in expected if t not in tables]
    if missing:
        print("Missing tables:", missing)
    else:
        print(f"All {len(expected)} register tables are present.")
