from flask import Blueprint

from ohs.errors import ValidationError

from .compliance_models import LegalRequirement, TrainingPlan
from .crud import Resource, register_all
from .fields import Choice, Field, FieldMap, date_time, integer

bp = Blueprint("compliance_api", __name__, url_prefix="/api")


legal_requirements = Resource(
    "legal_requirements", "risks/legal-requirements", LegalRequirement,
    label="Legal requirement",
    order_by=LegalRequirement.number.asc(),
    fields=FieldMap(
        Field("number", required=True),
        Field("document_title", required=True),
        Field("effective_date", kind=date_time, required=True),
        Field("description", required=True),
        # unknown statuses are filed as ACTIVE
        Field("status", kind=Choice("ACTIVE", "REVOKED", "AMENDED", fallback="ACTIVE", lower=True),
              required=True),
        Field("amended_description"),
        Field("observation"),
        Field("law_file"),
    ),
)


def training_plan_filters(stmt, args):
    """?year=2024&training_area=fire"""
    year = (args.get("year") or "").strip()
    if year:
        if not year.isdigit():
            raise ValidationError("year must be a number")
        stmt = stmt.where(TrainingPlan.year == int(year))
    area = (args.get("training_area") or "").strip()
    if area:
        stmt = stmt.where(TrainingPlan.training_area.ilike(f"%{area}%"))
    return stmt


training_plans = Resource(
    "training_plans", "training-plans", TrainingPlan, label="Training plan",
    fields=FieldMap(
        Field("updated_by", required=True),
        Field("date", kind=date_time, required=True),
        Field("year", kind=integer, required=True),
        Field("training_area", required=True),
        Field("training_title", required=True),
        Field("training_objective", required=True),
        Field("training_type", required=True),
        Field("training_entity", required=True),
        Field("duration", required=True),
        Field("number_of_trainees", kind=integer, required=True),
        Field("training_recipients", required=True),
        Field("training_month", required=True),
        Field("training_status", required=True),
        Field("observations", default=""),
    ),
    filters=training_plan_filters,
)

register_all(bp, [legal_requirements, training_plans])
