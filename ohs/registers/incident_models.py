from ohs.extensions import db
from ohs.models import RecordMixin


incident_investigators = db.Table(
    "incident_report_investigator",
    db.Column("incident_report_id", db.String(36),
              db.ForeignKey("incident_report.id", ondelete="CASCADE"), primary_key=True),
    db.Column("participant_id", db.String(36),
              db.ForeignKey("investigation_participant.id", ondelete="CASCADE"), primary_key=True),
)

incident_corrective_actions = db.Table(
    "incident_report_corrective_action",
    db.Column("incident_report_id", db.String(36),
              db.ForeignKey("incident_report.id", ondelete="CASCADE"), primary_key=True),
    db.Column("corrective_action_id", db.String(36),
              db.ForeignKey("corrective_action.id", ondelete="CASCADE"), primary_key=True),
)


# ==========================
# PERSON INVOLVED IN THE INCIDENT
# ==========================
class InvolvedPerson(RecordMixin, db.Model):
    __tablename__ = "involved_person"
    name = db.Column(db.String(255), nullable=False)
    department_id = db.Column(db.String(36), db.ForeignKey("department.id"), nullable=False)
    other_information = db.Column(db.Text, nullable=False)

    department = db.relationship("Department")


# ==========================
# INVESTIGATION TEAM
# ==========================
class InvestigationParticipant(RecordMixin, db.Model):
    __tablename__ = "investigation_participant"
    name = db.Column(db.String(255), nullable=False)
    company = db.Column(db.String(255), nullable=False)
    activity = db.Column(db.String(255), nullable=False)
    signature = db.Column(db.String(255), nullable=False)
    date = db.Column(db.DateTime(timezone=True), nullable=False)


# ==========================
# IMMEDIATE & CORRECTIVE ACTIONS
# ==========================
class CorrectiveAction(RecordMixin, db.Model):
    __tablename__ = "corrective_action"
    action = db.Column(db.String(255), nullable=False)
    description = db.Column(db.Text, nullable=False)
    responsible = db.Column(db.String(255), nullable=False)
    date = db.Column(db.DateTime(timezone=True), nullable=False)
    signature = db.Column(db.String(255), nullable=False)


# ==========================
# ACCIDENT / INCIDENT REPORT
# ==========================
class IncidentReport(RecordMixin, db.Model):
    __tablename__ = "incident_report"

    # reporter
    name = db.Column(db.String(255), nullable=False)
    role = db.Column(db.String(255), nullable=False)
    department_id = db.Column(db.String(36), db.ForeignKey("department.id", ondelete="SET NULL"))
    subproject_id = db.Column(db.String(36), db.ForeignKey("subproject.id", ondelete="SET NULL"))

    # what happened
    date = db.Column(db.DateTime(timezone=True), nullable=False)
    time = db.Column(db.Time, nullable=False)
    location = db.Column(db.String(255), nullable=False)
    activity_in_progress = db.Column(db.Text, nullable=False)
    accident_description = db.Column(db.Text, nullable=False)
    incident_type = db.Column(db.String(120), nullable=False)
    equipment_involved = db.Column(db.Text, nullable=False)
    observation = db.Column(db.Text)

    # prior conditions (yes/no answers)
    worker_previous_accident = db.Column(db.String(20))
    risk_assessment_done_before = db.Column(db.String(20))
    procedure_exists_for_activity = db.Column(db.String(20))
    worker_received_training = db.Column(db.String(20))
    involves_contractor = db.Column(db.String(20))
    contractor_trade_name = db.Column(db.String(255))
    nature_and_extent = db.Column(db.String(255))

    # possible causes
    cause_methodology = db.Column(db.String(255))
    cause_equipment = db.Column(db.String(255))
    cause_material = db.Column(db.String(255))
    cause_workers = db.Column(db.String(255))
    cause_environment_and_safety = db.Column(db.String(255))
    cause_measurements = db.Column(db.String(255))

    involved_person_id = db.Column(db.String(36), db.ForeignKey("involved_person.id"), nullable=False)

    # photo URLs (opaque)
    photo_front = db.Column(db.String(1024))
    photo_back = db.Column(db.String(1024))
    photo_right_side = db.Column(db.String(1024))
    photo_left_side = db.Column(db.String(1024))
    photo_best_angle = db.Column(db.String(1024))
    photo = db.Column(db.String(1024))

    department = db.relationship("Department")
    subproject = db.relationship("Subproject")
    involved_person = db.relationship("InvolvedPerson")
    investigation_participants = db.relationship(
        "InvestigationParticipant", secondary=incident_investigators, lazy="selectin",
    )
    corrective_actions = db.relationship(
        "CorrectiveAction", secondary=incident_corrective_actions, lazy="selectin",
    )
