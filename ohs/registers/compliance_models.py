from ohs.extensions import db
from ohs.models import RecordMixin


# ==========================
# LEGAL REQUIREMENTS REGISTER
# ==========================
class LegalRequirement(RecordMixin, db.Model):
    __tablename__ = "legal_requirement"
    number = db.Column(db.String(50), nullable=False, index=True)
    document_title = db.Column(db.String(255), nullable=False)
    effective_date = db.Column(db.DateTime(timezone=True), nullable=False)
    description = db.Column(db.Text, nullable=False)
    status = db.Column(db.String(20), nullable=False, default="ACTIVE")  # ACTIVE, REVOKED, AMENDED
    amended_description = db.Column(db.Text)
    observation = db.Column(db.Text)
    law_file = db.Column(db.String(1024))


# ==========================
# TRAINING PLAN
# ==========================
class TrainingPlan(RecordMixin, db.Model):
    __tablename__ = "training_plan"
    updated_by = db.Column(db.String(255), nullable=False)
    date = db.Column(db.DateTime(timezone=True), nullable=False)
    year = db.Column(db.Integer, nullable=False, index=True)
    training_area = db.Column(db.String(255), nullable=False)
    training_title = db.Column(db.String(255), nullable=False)
    training_objective = db.Column(db.Text, nullable=False)
    training_type = db.Column(db.String(120), nullable=False)
    training_entity = db.Column(db.String(255), nullable=False)
    duration = db.Column(db.String(120), nullable=False)
    number_of_trainees = db.Column(db.Integer, nullable=False)
    training_recipients = db.Column(db.Text, nullable=False)
    training_month = db.Column(db.String(20), nullable=False)
    training_status = db.Column(db.String(50), nullable=False)
    observations = db.Column(db.Text, default="")
