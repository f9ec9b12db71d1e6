from ohs.extensions import db
from ohs.models import RecordMixin, utcnow


complaint_closure_proof = db.Table(
    "complaint_closure_proof",
    db.Column("complaint_id", db.String(36),
              db.ForeignKey("complaint_and_claim_record.id", ondelete="CASCADE"), primary_key=True),
    db.Column("proof_id", db.String(36),
              db.ForeignKey("photo_document_proof.id", ondelete="CASCADE"), primary_key=True),
)


# ==========================
# PHOTO / DOCUMENT PROVING CLOSURE
# ==========================
class PhotoDocumentProof(RecordMixin, db.Model):
    __tablename__ = "photo_document_proof"
    photo = db.Column(db.String(1024))
    document = db.Column(db.String(1024))
    created_by = db.Column(db.String(255), nullable=False)


# ==========================
# COMPLAINTS & CLAIMS REGISTRATION
# ==========================
class ComplaintAndClaimRecord(RecordMixin, db.Model):
    __tablename__ = "complaint_and_claim_record"
    number = db.Column(db.String(50), unique=True, nullable=False)

    # occurrence
    date_occurred = db.Column(db.DateTime(timezone=True), nullable=False)
    local_occurrence = db.Column(db.String(255), nullable=False)
    how_occurred = db.Column(db.Text, nullable=False)
    who_involved = db.Column(db.Text, nullable=False)
    report_and_explanation = db.Column(db.Text, nullable=False)
    registered_date = db.Column(db.DateTime(timezone=True), default=utcnow, nullable=False)
    claim_local_occurrence = db.Column(db.String(255), nullable=False)

    # complainant
    complaintant_gender = db.Column(db.String(10), nullable=False)
    complaintant_age = db.Column(db.Integer, nullable=False)
    anonymous_complaint = db.Column(db.String(3), nullable=False)
    telephone = db.Column(db.String(50), nullable=False)
    email = db.Column(db.String(255))
    complaintant_address = db.Column(db.Text, nullable=False)
    complaintant_accepted = db.Column(db.String(3), nullable=False)
    action_taken = db.Column(db.Text, nullable=False)
    complaintant_notified = db.Column(db.String(3))
    notification_method = db.Column(db.String(120), nullable=False)
    closing_date = db.Column(db.DateTime(timezone=True), nullable=False)

    # classification & resolution
    claim_category = db.Column(db.String(120), nullable=False)
    other_claim_category = db.Column(db.String(255), default="")
    inspection_date = db.Column(db.DateTime(timezone=True), nullable=False)
    collected_information = db.Column(db.String(255), nullable=False)
    resolution_type = db.Column(db.String(120), nullable=False)
    resolution_date = db.Column(db.DateTime(timezone=True), nullable=False)
    resolution_submitted = db.Column(db.String(3), nullable=False)
    corrective_action_taken = db.Column(db.Text, nullable=False)
    involved_in_resolution = db.Column(db.Text, nullable=False)
    complaintant_satisfaction = db.Column(db.String(20), nullable=False)
    resources_spent = db.Column(db.Numeric(14, 2), default=0)
    number_of_days_since_received_to_closure = db.Column(db.Integer, nullable=False)

    # follow-up
    monitoring_after_closure = db.Column(db.String(3), nullable=False)
    monitoring_method_and_frequency = db.Column(db.Text, nullable=False)
    follow_up = db.Column(db.Text, nullable=False)
    involved_institutions = db.Column(db.Text)
    suggested_preventive_actions = db.Column(db.Text, nullable=False)

    photos_and_documents_proving_closure = db.relationship(
        "PhotoDocumentProof", secondary=complaint_closure_proof, lazy="selectin",
    )


# ==========================
# CLAIM / COMPLAINT CONTROL
# ==========================
class ClaimComplainControl(RecordMixin, db.Model):
    __tablename__ = "claim_complain_control"
    number = db.Column(db.String(50), unique=True, nullable=False)
    claim_complain_submitted_by = db.Column(db.String(255), nullable=False)
    claim_complain_reception_date = db.Column(db.DateTime(timezone=True), nullable=False)
    claim_complain_description = db.Column(db.Text, nullable=False)
    treatment_action = db.Column(db.Text, nullable=False)
    claim_complain_responsible_person = db.Column(db.String(255), nullable=False)
    claim_complain_deadline = db.Column(db.DateTime(timezone=True), nullable=False)
    claim_complain_status = db.Column(db.String(20), nullable=False, default="PENDING")
    closure_date = db.Column(db.DateTime(timezone=True), nullable=False)
    observation = db.Column(db.Text, default="")


# ==========================
# NON-COMPLIANCE CONTROL
# ==========================
class NonComplianceControl(RecordMixin, db.Model):
    __tablename__ = "non_compliance_control"
    number = db.Column(db.String(50), unique=True, nullable=False)
    department_id = db.Column(db.String(36), db.ForeignKey("department.id", ondelete="SET NULL"))
    subproject_id = db.Column(db.String(36), db.ForeignKey("subproject.id", ondelete="SET NULL"))
    non_compliance_description = db.Column(db.Text, nullable=False)
    identified_causes = db.Column(db.Text, nullable=False)
    corrective_actions = db.Column(db.Text, nullable=False)
    responsible_person = db.Column(db.String(255), nullable=False)
    deadline = db.Column(db.DateTime(timezone=True), nullable=False)
    status = db.Column(db.String(20), nullable=False, default="PENDING")
    effectiveness_evaluation = db.Column(db.String(20), nullable=False, default="NOT_EFFECTIVE")
    responsible_person_evaluation = db.Column(db.Text, nullable=False)
    observation = db.Column(db.Text, default="")

    department = db.relationship("Department")
    subproject = db.relationship("Subproject")
