from datetime import time, timezone
from decimal import Decimal
from types import SimpleNamespace

import pytest

from ohs.errors import ValidationError
from ohs.registers.fields import (
    Choice, Field, FieldMap, date_time, decimal, integer, time_of_day,
)


def test_missing_uses_falsy_check():
    fm = FieldMap(Field("name", required=True), Field("age", kind=integer, required=True), Field("note"))
    assert fm.missing({"name": "", "age": 0}) == ["name", "age"]
    assert fm.missing({"name": "x", "age": 3}) == []


def test_load_maps_wire_to_attribute_and_applies_defaults():
    fm = FieldMap(
        Field("claim_status", attr="status", default="PENDING"),
        Field("observation", default=""),
    )
    assert fm.load({}) == {"status": "PENDING", "observation": ""}
    assert fm.load({"claim_status": "DONE"})["status"] == "DONE"


def test_callable_default():
    f = Field("stamp", default=lambda: "now")
    assert f.load({}) == "now"


def test_dump_uses_wire_names():
    fm = FieldMap(Field("claim_status", attr="status"), Field("cost", kind=decimal))
    obj = SimpleNamespace(status="PENDING", cost=Decimal("10.25"))
    assert fm.dump(obj) == {"claim_status": "PENDING", "cost": 10.25}


def test_datetime_accepts_zulu_and_naive():
    z = date_time.load("d", "2025-04-01T08:00:00Z")
    naive = date_time.load("d", "2025-04-01T08:00:00")
    assert z == naive
    assert z.tzinfo == timezone.utc
    assert date_time.load("d", "2025-04-01").hour == 0


def test_datetime_invalid():
    with pytest.raises(ValidationError):
        date_time.load("closing_date", "soon")


def test_time_of_day_forms():
    assert time_of_day.load("t", "14:30") == time(14, 30)
    assert time_of_day.load("t", "1970-01-01T07:15:00Z") == time(7, 15)
    assert time_of_day.dump(time(9, 5)) == "09:05:00"
    with pytest.raises(ValidationError):
        time_of_day.load("t", "25:99")


def test_integer_rejects_bool_and_text():
    assert integer.load("n", "12") == 12
    with pytest.raises(ValidationError):
        integer.load("n", True)
    with pytest.raises(ValidationError):
        integer.load("n", "twelve")


def test_choice_fallback_and_lower():
    status = Choice("ACTIVE", "REVOKED", fallback="ACTIVE", lower=True)
    assert status.load("s", "revoked") == "REVOKED"
    assert status.load("s", "weird") == "ACTIVE"
    assert status.dump("REVOKED") == "revoked"

    strict = Choice("YES", "NO")
    with pytest.raises(ValidationError) as exc:
        strict.load("answer", "maybe")
    assert exc.value.status_code == 400


def test_non_finite_decimal():
    assert decimal.load("cost", "12.50") == Decimal("12.50")
    for raw in ("NaN", "Infinity", "-Infinity", "sNaN"):
        with pytest.raises(ValidationError):
            decimal.load("cost", raw)


def test_keep_on_update_skips_blank_values():
    fm = FieldMap(
        Field("registered_date", kind=date_time, default=lambda: "now", keep_on_update=True),
        Field("status", default="PENDING"),
    )
    assert fm.load({}) == {"registered_date": "now", "status": "PENDING"}
    assert fm.load({}, updating=True) == {"status": "PENDING"}
    loaded = fm.load({"registered_date": "2020-01-01"}, updating=True)
    assert loaded["registered_date"].year == 2020


def test_max_length():
    f = Field("name", max_length=5)
    assert f.load({"name": " abcde "}) == "abcde"
    with pytest.raises(ValidationError):
        f.load({"name": "abcdef"})
