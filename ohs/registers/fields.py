# ohs/registers/fields.py
"""
Wire <-> model field mapping.

API bodies use snake_case keys that do not always match the model attribute
names, and most values need a type conversion on the way in (ISO dates,
numbers, enumerations) and on the way out. Each register declares its scalar
fields once as a ``FieldMap``; the CRUD layer uses it for required-field
checks, payload loading and response dumping.
"""
from __future__ import annotations

from datetime import datetime, time, timezone
from decimal import Decimal, InvalidOperation

from ohs.errors import ValidationError


def is_blank(value) -> bool:
    """Falsy test used for required fields (None, "", 0, False, [], {})."""
    return not value


# ---------------------------------------------------------------- kinds

class Kind:
    name = "text"

    def load(self, wire: str, value):
        return value

    def dump(self, value):
        return value


class Text(Kind):
    name = "text"

    def load(self, wire, value):
        if value is None:
            return None
        if isinstance(value, (dict, list)):
            raise ValidationError(f"Invalid value for {wire}")
        return str(value).strip()


class Integer(Kind):
    name = "integer"

    def load(self, wire, value):
        if value is None or value == "":
            return None
        if isinstance(value, bool):
            raise ValidationError(f"Invalid integer for {wire}")
        try:
            return int(str(value).strip())
        except ValueError:
            raise ValidationError(f"Invalid integer for {wire}")


class Number(Kind):
    name = "decimal"

    def load(self, wire, value):
        if value is None or value == "":
            return None
        if isinstance(value, bool):
            raise ValidationError(f"Invalid number for {wire}")
        try:
            number = Decimal(str(value).strip())
        except InvalidOperation:
            raise ValidationError(f"Invalid number for {wire}")
        # NaN / Infinity have no JSON form
        if not number.is_finite():
            raise ValidationError(f"Invalid number for {wire}")
        return number

    def dump(self, value):
        return float(value) if value is not None else None


def parse_iso_datetime(value: str) -> datetime:
    s = value.strip()
    if s.endswith("Z"):
        s = s[:-1] + "+00:00"
    parsed = datetime.fromisoformat(s)
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


class DateTime(Kind):
    name = "datetime"

    def load(self, wire, value):
        if value is None or value == "":
            return None
        if isinstance(value, datetime):
            return value
        try:
            return parse_iso_datetime(str(value))
        except ValueError:
            raise ValidationError(f"Invalid date for {wire}")

    def dump(self, value):
        return value.isoformat() if value is not None else None


class TimeOfDay(Kind):
    name = "time"

    def load(self, wire, value):
        if value is None or value == "":
            return None
        s = str(value).strip()
        try:
            if "T" in s:
                return parse_iso_datetime(s).time().replace(tzinfo=None)
            return time.fromisoformat(s)
        except ValueError:
            raise ValidationError(f"Invalid time for {wire}")

    def dump(self, value):
        return value.strftime("%H:%M:%S") if value is not None else None


class Choice(Kind):
    name = "choice"

    def __init__(self, *values, fallback=None, lower=False):
        self.values = tuple(v.upper() for v in values)
        self.fallback = fallback
        self.lower = lower

    def load(self, wire, value):
        if value is None or value == "":
            return None
        candidate = str(value).strip().upper()
        if candidate in self.values:
            return candidate
        if self.fallback is not None:
            return self.fallback
        allowed = ", ".join(self.values)
        raise ValidationError(f"Invalid value for {wire}: expected one of {allowed}")

    def dump(self, value):
        if value is None:
            return None
        return value.lower() if self.lower else value


text = Text()
integer = Integer()
decimal = Number()
date_time = DateTime()
time_of_day = TimeOfDay()
yes_no = Choice("YES", "NO")


# --------------------------------------------------------------- fields

class Field:
    """One wire key.

    ``keep_on_update`` marks fields whose default belongs to the moment of
    creation (a registration date, say): when an update leaves them blank the
    stored value stays. ``max_length`` is filled from the column by
    ``FieldMap.bind``.
    """

    def __init__(self, wire, attr=None, kind=text, required=False, default=None,
                 keep_on_update=False, max_length=None):
        self.wire = wire
        self.attr = attr or wire
        self.kind = kind
        self.required = required
        self.default = default
        self.keep_on_update = keep_on_update
        self.max_length = max_length

    def __repr__(self):
        flag = "*" if self.required else ""
        return f"<Field {self.wire}{flag} -> {self.attr} ({self.kind.name})>"

    def load(self, payload: dict):
        value = self.kind.load(self.wire, payload.get(self.wire))
        if value is None or value == "":
            default = self.default() if callable(self.default) else self.default
            if default is not None:
                return default
        if self.max_length and isinstance(value, str) and len(value) > self.max_length:
            raise ValidationError(f"{self.wire} must be at most {self.max_length} characters")
        return value

    def dump(self, obj):
        return self.kind.dump(getattr(obj, self.attr))


class FieldMap:
    def __init__(self, *fields: Field):
        self.fields = list(fields)

    def __iter__(self):
        return iter(self.fields)

    def bind(self, model):
        """Pick up String(n) limits from the model's columns."""
        for f in self.fields:
            column = model.__table__.c.get(f.attr)
            length = getattr(column.type, "length", None) if column is not None else None
            if f.max_length is None and length:
                f.max_length = length
        return self

    @property
    def wire_names(self):
        return [f.wire for f in self.fields]

    def missing(self, payload: dict) -> list[str]:
        return [f.wire for f in self.fields if f.required and is_blank(payload.get(f.wire))]

    def load(self, payload: dict, updating=False) -> dict:
        values = {}
        for f in self.fields:
            if updating and f.keep_on_update and is_blank(payload.get(f.wire)):
                continue
            values[f.attr] = f.load(payload)
        return values

    def dump(self, obj) -> dict:
        return {f.wire: f.dump(obj) for f in self.fields}
