from flask import Blueprint

from .crud import BelongsTo, HasMany, Resource, named, register_all
from .fields import Field, FieldMap, date_time, time_of_day
from .incident_models import (
    CorrectiveAction, IncidentReport, InvestigationParticipant, InvolvedPerson,
)
from .reference_models import Department, Subproject

bp = Blueprint("incident_api", __name__, url_prefix="/api")


def person_nested(p):
    return {
        "id": p.id,
        "name": p.name,
        "department": named(p.department) if p.department else None,
        "other_information": p.other_information,
    }


def participant_nested(p):
    return {
        "id": p.id,
        "name": p.name,
        "company": p.company,
        "activity": p.activity,
        "signature": p.signature,
        "date": p.date.isoformat() if p.date else None,
    }


def action_nested(a):
    return {
        "id": a.id,
        "action": a.action,
        "description": a.description,
        "responsible": a.responsible,
        "date": a.date.isoformat() if a.date else None,
        "signature": a.signature,
    }


involved_persons = Resource(
    "involved_persons", "involved-persons", InvolvedPerson, label="Involved person",
    fields=FieldMap(
        Field("name", required=True),
        Field("other_information", required=True),
    ),
    relations=[
        BelongsTo("department", "department", Department, "Department", required=True),
    ],
)

investigation_participants = Resource(
    "investigation_participants", "investigation-participants", InvestigationParticipant,
    label="Investigation participant",
    fields=FieldMap(
        Field("name", required=True),
        Field("company", required=True),
        Field("activity", required=True),
        Field("signature", required=True),
        Field("date", kind=date_time, required=True),
    ),
)

corrective_actions = Resource(
    "corrective_actions", "corrective-actions", CorrectiveAction,
    label="Corrective action",
    fields=FieldMap(
        Field("action", required=True),
        Field("description", required=True),
        Field("responsible", required=True),
        Field("date", kind=date_time, required=True),
        Field("signature", required=True),
    ),
)

incident_reports = Resource(
    "incident_reports", "incident-reports", IncidentReport, label="Incident report",
    fields=FieldMap(
        Field("name", required=True),
        Field("role", required=True),
        Field("date", kind=date_time, required=True),
        Field("time", kind=time_of_day, required=True),
        Field("location", required=True),
        Field("activity_in_progress", required=True),
        Field("accident_description", required=True),
        Field("incident_type", required=True),
        Field("equipment_involved", required=True),
        Field("observation"),
        Field("worker_previous_accident"),
        Field("risk_assessment_done_before"),
        Field("procedure_exists_for_activity"),
        Field("worker_received_training"),
        Field("involves_contractor"),
        Field("contractor_trade_name"),
        Field("nature_and_extent"),
        Field("cause_methodology"),
        Field("cause_equipment"),
        Field("cause_material"),
        Field("cause_workers"),
        Field("cause_environment_and_safety"),
        Field("cause_measurements"),
        Field("photo_front"),
        Field("photo_back"),
        Field("photo_right_side"),
        Field("photo_left_side"),
        Field("photo_best_angle"),
        Field("photo"),
    ),
    relations=[
        BelongsTo("department", "department", Department, "Department"),
        BelongsTo("subproject", "subproject", Subproject, "Subproject"),
        BelongsTo("involved_person", "involved_person", InvolvedPerson, "Involved person",
                  required=True, nested=person_nested),
        HasMany("investigation_participants", "investigation_participants",
                InvestigationParticipant, "Investigation participant", nested=participant_nested),
        HasMany("corrective_actions", "corrective_actions",
                CorrectiveAction, "Corrective action", nested=action_nested),
    ],
)

register_all(bp, [involved_persons, investigation_participants, corrective_actions, incident_reports])
