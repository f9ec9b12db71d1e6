from ohs.extensions import db
from ohs.models import RecordMixin


# ==========================
# DEPARTMENT
# ==========================
class Department(RecordMixin, db.Model):
    __tablename__ = "department"
    name = db.Column(db.String(120), nullable=False)
    description = db.Column(db.Text, nullable=False)


# ==========================
# POSITION
# ==========================
class Position(RecordMixin, db.Model):
    __tablename__ = "position"
    name = db.Column(db.String(120), nullable=False)  # not unique


# ==========================
# SUBPROJECT (work package)
# ==========================
class Subproject(RecordMixin, db.Model):
    __tablename__ = "subproject"
    name = db.Column(db.String(255), nullable=False)
    contract_reference = db.Column(db.String(120))
    contractor_name = db.Column(db.String(255))
    estimated_cost = db.Column(db.Numeric(14, 2))
    location = db.Column(db.String(255), nullable=False)
    geographic_coordinates = db.Column(db.String(255))
    type = db.Column(db.String(120), nullable=False)
    approximate_area = db.Column(db.String(120), nullable=False)


# ==========================
# TOOLBOX TALKS
# ==========================
class ToolboxTalk(RecordMixin, db.Model):
    __tablename__ = "toolbox_talk"
    name = db.Column(db.String(255), nullable=False)


# ==========================
# ENVIRONMENTAL FACTORS / RISKS & IMPACTS
# ==========================
class EnvironmentalFactor(RecordMixin, db.Model):
    __tablename__ = "environmental_factor"
    description = db.Column(db.Text, nullable=False)


class RisksAndImpact(RecordMixin, db.Model):
    __tablename__ = "risks_and_impact"
    description = db.Column(db.Text, nullable=False)


# ==========================
# ACCEPTANCE CONFIRMATION
# ==========================
class AcceptanceConfirmation(RecordMixin, db.Model):
    __tablename__ = "acceptance_confirmation"
    description = db.Column(db.Text, nullable=False)
