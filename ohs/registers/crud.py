# ohs/registers/crud.py
"""
Generic register endpoints.

A ``Resource`` binds a model, its ``FieldMap`` and its relations to the five
routes every register exposes (list, get, create, update, delete) plus an
export route. Relations come in two shapes:

* ``BelongsTo`` - a foreign key, sent as ``{"id": ...}`` (or a bare id) and
  returned as a small nested object.
* ``HasMany`` - a many-to-many set, sent as a list of ``{"id": ...}`` and
  replaced wholesale on update.

All writes for one request go through a single session commit, so clearing a
relation set and reconnecting it either both land or neither does.
"""
from __future__ import annotations

from typing import Callable, Optional

from flask import current_app, jsonify, request
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import selectinload

from ohs.errors import NotFound, ValidationError
from ohs.extensions import db

from .fields import FieldMap, is_blank


def named(obj):
    """Default nested shape for reference records."""
    return {"id": obj.id, "name": obj.name}


def ref_id(value):
    if isinstance(value, dict):
        value = value.get("id")
    if value is None or isinstance(value, (list, dict, bool)):
        return None
    value = str(value).strip()
    return value or None


class BelongsTo:
    def __init__(self, wire, attr, model, label, required=False, nested: Callable = named):
        self.wire = wire
        self.attr = attr
        self.model = model
        self.label = label
        self.required = required
        self.nested = nested

    def missing(self, payload) -> bool:
        return self.required and ref_id(payload.get(self.wire)) is None

    def load(self, payload):
        rid = ref_id(payload.get(self.wire))
        if rid is None:
            return None
        obj = db.session.get(self.model, rid)
        if obj is None:
            raise NotFound(f"{self.label} not found with ID: {rid}")
        return obj

    def apply(self, record, payload, replace=False):
        setattr(record, self.attr, self.load(payload))

    def detach(self, record):
        # the foreign key lives on the row being deleted
        pass

    def dump(self, record):
        related = getattr(record, self.attr)
        return self.nested(related) if related is not None else None


class HasMany:
    def __init__(self, wire, attr, model, label, nested: Callable = named):
        self.wire = wire
        self.attr = attr
        self.model = model
        self.label = label
        self.nested = nested

    def missing(self, payload) -> bool:
        return False

    def ids(self, payload) -> list[str]:
        raw = payload.get(self.wire) or []
        if not isinstance(raw, list):
            raise ValidationError(f"{self.wire} must be a list")
        seen = []
        for item in raw:
            rid = ref_id(item)
            if rid is None:
                raise ValidationError(f"Every entry in {self.wire} needs an id")
            if rid not in seen:
                seen.append(rid)
        return seen

    def load(self, payload):
        items = []
        for rid in self.ids(payload):
            obj = db.session.get(self.model, rid)
            if obj is None:
                raise NotFound(f"{self.label} with ID {rid} not found")
            items.append(obj)
        return items

    def apply(self, record, payload, replace=False):
        items = self.load(payload)
        collection = getattr(record, self.attr)
        if replace:
            collection.clear()
        collection.extend(items)

    def detach(self, record):
        getattr(record, self.attr).clear()

    def dump(self, record):
        return [self.nested(obj) for obj in getattr(record, self.attr)]


class Resource:
    def __init__(
        self,
        name: str,
        path: str,
        model,
        fields: FieldMap,
        label: str,
        relations=(),
        unique: Optional[str] = None,
        filters: Optional[Callable] = None,
        check: Optional[Callable] = None,
        order_by=None,
    ):
        self.name = name
        self.path = path.strip("/")
        self.model = model
        self.fields = fields.bind(model)
        self.label = label
        self.relations = list(relations)
        self.unique = unique
        self.filters = filters
        self.check = check
        self.order_by = order_by if order_by is not None else model.created_at.desc()

    def __repr__(self):
        return f"<Resource {self.name} /{self.path}>"

    # ------------------------------------------------------------ shape

    @property
    def columns(self):
        return ["id"] + self.fields.wire_names + [r.wire for r in self.relations] + ["created_at", "updated_at"]

    def dump(self, record) -> dict:
        out = {"id": record.id}
        out.update(self.fields.dump(record))
        for rel in self.relations:
            out[rel.wire] = rel.dump(record)
        out.update(record.timestamps())
        return out

    # ------------------------------------------------------------ reads

    def select(self, args=None):
        stmt = db.select(self.model)
        for rel in self.relations:
            stmt = stmt.options(selectinload(getattr(self.model, rel.attr)))
        if self.filters and args is not None:
            stmt = self.filters(stmt, args)
        return stmt.order_by(self.order_by)

    def all(self, args=None):
        return db.session.execute(self.select(args)).scalars().all()

    def get_or_404(self, record_id):
        record = db.session.get(self.model, record_id)
        if record is None:
            raise NotFound(f"{self.label} not found")
        return record

    # ----------------------------------------------------------- writes

    def validate(self, payload):
        if not isinstance(payload, dict):
            raise ValidationError("Request body must be a JSON object")
        missing = self.fields.missing(payload)
        missing += [rel.wire for rel in self.relations if rel.missing(payload)]
        if missing:
            raise ValidationError("Missing required fields", missing=missing)
        if self.check:
            self.check(payload)

    def ensure_unique(self, value, record_id=None):
        if not self.unique:
            return
        column = getattr(self.model, self.unique)
        stmt = db.select(self.model.id).where(column == value)
        if record_id is not None:
            stmt = stmt.where(self.model.id != record_id)
        if db.session.execute(stmt).first():
            raise ValidationError(
                f"A {self.label.lower()} with this {self.unique} already exists"
            )

    def commit(self, values, record_id=None):
        """Commit, reporting a unique-number race lost to another writer as a 400."""
        try:
            db.session.commit()
        except IntegrityError:
            db.session.rollback()
            if self.unique:
                self.ensure_unique(values.get(self.unique), record_id)
            raise

    def create(self, payload):
        self.validate(payload)
        values = self.fields.load(payload)
        if self.unique:
            self.ensure_unique(values[self.unique])
        record = self.model(**values)
        for rel in self.relations:
            rel.apply(record, payload)
        db.session.add(record)
        self.commit(values)
        current_app.logger.info("Created %s %s", self.label, record.id)
        return record

    def update(self, record_id, payload):
        record = self.get_or_404(record_id)
        self.validate(payload)
        values = self.fields.load(payload, updating=True)
        if self.unique:
            self.ensure_unique(values[self.unique], record.id)
        for attr, value in values.items():
            setattr(record, attr, value)
        for rel in self.relations:
            rel.apply(record, payload, replace=True)
        self.commit(values, record.id)
        current_app.logger.info("Updated %s %s", self.label, record.id)
        return record

    def delete(self, record_id):
        record = self.get_or_404(record_id)
        for rel in self.relations:
            rel.detach(record)
        db.session.flush()
        db.session.delete(record)
        db.session.commit()
        current_app.logger.info("Deleted %s %s", self.label, record_id)

    # ------------------------------------------------------------ views

    def list_view(self):
        return jsonify([self.dump(r) for r in self.all(request.args)])

    def detail_view(self, record_id):
        return jsonify(self.dump(self.get_or_404(record_id)))

    def create_view(self):
        record = self.create(request.get_json(force=True))
        return jsonify(self.dump(record)), 201

    def update_view(self, record_id):
        record = self.update(record_id, request.get_json(force=True))
        return jsonify(self.dump(record))

    def delete_view(self, record_id):
        self.delete(record_id)
        return jsonify(success=True)

    def export_view(self):
        from .export import export_response
        fmt = (request.args.get("format") or "csv").lower()
        records = self.all(request.args)
        return export_response(self, records, fmt)

    def register(self, bp):
        base = f"/{self.path}"
        item = f"{base}/<string:record_id>"
        bp.add_url_rule(base, f"{self.name}_list", self.list_view, methods=["GET"])
        bp.add_url_rule(base, f"{self.name}_create", self.create_view, methods=["POST"])
        bp.add_url_rule(f"{base}/export", f"{self.name}_export", self.export_view, methods=["GET"])
        bp.add_url_rule(item, f"{self.name}_detail", self.detail_view, methods=["GET"])
        bp.add_url_rule(item, f"{self.name}_update", self.update_view, methods=["PUT"])
        bp.add_url_rule(item, f"{self.name}_delete", self.delete_view, methods=["DELETE"])
        return self


def register_all(bp, resources):
    for res in resources:
        res.register(bp)
    bp.resources = list(resources)
    return bp


def blank_fields(payload, *wires):
    return [w for w in wires if is_blank(payload.get(w))]
