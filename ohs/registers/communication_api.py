from flask import Blueprint

from ohs.errors import ValidationError
from ohs.models import utcnow

from .communication_models import (
    ClaimComplainControl, ComplaintAndClaimRecord, NonComplianceControl,
    PhotoDocumentProof,
)
from .crud import BelongsTo, HasMany, Resource, blank_fields, register_all
from .fields import Choice, Field, FieldMap, date_time, decimal, integer, yes_no
from .reference_models import Department, Subproject

bp = Blueprint("communication_api", __name__, url_prefix="/api")

progress_status = Choice("PENDING", "IN_PROGRESS", "COMPLETED")


def proof_nested(doc):
    return {
        "id": doc.id,
        "photo": doc.photo,
        "document": doc.document,
        "created_by": doc.created_by,
        **doc.timestamps(),
    }


def _needs_photo_or_document(payload):
    if len(blank_fields(payload, "photo", "document")) == 2:
        raise ValidationError("At least one file URL (photo or document) is required")


photo_documents = Resource(
    "photo_documents", "photo-documents", PhotoDocumentProof,
    label="Photo document",
    fields=FieldMap(
        Field("photo"),
        Field("document"),
        Field("created_by", required=True),
    ),
    check=_needs_photo_or_document,
)

complaints = Resource(
    "complaints", "complaints-registration", ComplaintAndClaimRecord,
    label="Complaint and claim record",
    unique="number",
    fields=FieldMap(
        Field("number", required=True),
        Field("date_occurred", kind=date_time, required=True),
        Field("local_occurrence", required=True),
        Field("how_occurred", required=True),
        Field("who_involved", required=True),
        Field("report_and_explanation", required=True),
        Field("registered_date", kind=date_time, default=utcnow, keep_on_update=True),
        Field("claim_local_occurrence", required=True),
        Field("complaintant_gender", kind=Choice("MALE", "FEMALE"), required=True),
        Field("complaintant_age", kind=integer, required=True),
        Field("anonymous_complaint", kind=yes_no, required=True),
        Field("telephone", required=True),
        Field("email"),
        Field("complaintant_address", required=True),
        Field("complaintant_accepted", kind=yes_no, required=True),
        Field("action_taken", required=True),
        Field("complaintant_notified", kind=yes_no),
        Field("notification_method", required=True),
        Field("closing_date", kind=date_time, required=True),
        Field("claim_category", required=True),
        Field("other_claim_category", default=""),
        Field("inspection_date", kind=date_time, required=True),
        Field("collected_information", required=True),
        Field("resolution_type", required=True),
        Field("resolution_date", kind=date_time, required=True),
        Field("resolution_submitted", kind=yes_no, required=True),
        Field("corrective_action_taken", required=True),
        Field("involved_in_resolution", required=True),
        Field("complaintant_satisfaction", kind=Choice("SATISFIED", "NOT_SATISFIED"), required=True),
        Field("resources_spent", kind=decimal, default=0),
        Field("number_of_days_since_received_to_closure", kind=integer, required=True),
        Field("monitoring_after_closure", kind=yes_no, required=True),
        Field("monitoring_method_and_frequency", required=True),
        Field("follow_up", required=True),
        Field("involved_institutions"),
        Field("suggested_preventive_actions", required=True),
    ),
    relations=[
        HasMany("photos_and_documents_proving_closure", "photos_and_documents_proving_closure",
                PhotoDocumentProof, "Photo document", nested=proof_nested),
    ],
)

claim_control = Resource(
    "claim_control", "claim-control", ClaimComplainControl,
    label="Claim complain control record",
    unique="number",
    fields=FieldMap(
        Field("number", required=True),
        Field("claim_complain_submitted_by", required=True),
        Field("claim_complain_reception_date", kind=date_time, required=True),
        Field("claim_complain_description", required=True),
        Field("treatment_action", required=True),
        Field("claim_complain_responsible_person", required=True),
        Field("claim_complain_deadline", kind=date_time, required=True),
        Field("claim_complain_status", kind=progress_status, default="PENDING"),
        Field("closure_date", kind=date_time, required=True),
        Field("observation", default=""),
    ),
)

non_compliance = Resource(
    "non_compliance", "non-compliance", NonComplianceControl,
    label="Non-compliance record",
    unique="number",
    fields=FieldMap(
        Field("number", required=True),
        Field("non_compliance_description", required=True),
        Field("identified_causes", required=True),
        Field("corrective_actions", required=True),
        Field("responsible_person", required=True),
        Field("deadline", kind=date_time, required=True),
        Field("status", kind=progress_status, default="PENDING"),
        Field("effectiveness_evaluation", kind=Choice("EFFECTIVE", "NOT_EFFECTIVE"),
              default="NOT_EFFECTIVE"),
        Field("responsible_person_evaluation", required=True),
        Field("observation", default=""),
    ),
    relations=[
        BelongsTo("department", "department", Department, "Department"),
        BelongsTo("subproject", "subproject", Subproject, "Subproject"),
    ],
)

register_all(bp, [photo_documents, complaints, claim_control, non_compliance])
