from flask import Blueprint

from .crud import Resource, register_all
from .fields import Field, FieldMap, decimal
from .reference_models import (
    AcceptanceConfirmation, Department, EnvironmentalFactor, Position,
    RisksAndImpact, Subproject, ToolboxTalk,
)

bp = Blueprint("reference_api", __name__, url_prefix="/api")

departments = Resource(
    "departments", "departments", Department, label="Department",
    fields=FieldMap(
        Field("name", required=True),
        Field("description", required=True),
    ),
)

positions = Resource(
    "positions", "positions", Position, label="Position",
    fields=FieldMap(Field("name", required=True)),
)

subprojects = Resource(
    "subprojects", "subprojects", Subproject, label="Subproject",
    fields=FieldMap(
        Field("name", required=True),
        Field("contract_reference"),
        Field("contractor_name"),
        Field("estimated_cost", kind=decimal),
        Field("location", required=True),
        Field("geographic_coordinates"),
        Field("type", required=True),
        Field("approximate_area", required=True),
    ),
)

toolbox_talks = Resource(
    "toolbox_talks", "toolbox-talks", ToolboxTalk, label="Toolbox talk",
    fields=FieldMap(Field("name", required=True)),
)

environmental_factors = Resource(
    "environmental_factors", "environmental-factors", EnvironmentalFactor,
    label="Environmental factor",
    fields=FieldMap(Field("description", required=True)),
)

risks_and_impacts = Resource(
    "risks_and_impacts", "risks-and-impacts", RisksAndImpact,
    label="Risk and impact",
    fields=FieldMap(Field("description", required=True)),
)

acceptance_confirmations = Resource(
    "acceptance_confirmations", "acceptance-confirmations", AcceptanceConfirmation,
    label="Acceptance confirmation",
    fields=FieldMap(Field("description", required=True)),
)

register_all(bp, [
    departments, positions, subprojects, toolbox_talks,
    environmental_factors, risks_and_impacts, acceptance_confirmations,
])
