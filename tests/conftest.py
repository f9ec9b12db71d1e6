"""
OHS registers - test infrastructure (conftest.py)
=================================================
Provides:
  - a fresh app per test on an in-memory SQLite database
  - a Flask test client
  - factory fixtures that create records through the API
"""

import os
import sys

import pytest

# Ensure project root is on path
ROOT_DIR = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
sys.path.insert(0, ROOT_DIR)

from ohs import create_app  # noqa: E402
from ohs.extensions import db  # noqa: E402


# ============================================================================
# App / client
# ============================================================================

@pytest.fixture
def app(tmp_path):
    app = create_app({
        "TESTING": True,
        "SQLALCHEMY_DATABASE_URI": "sqlite:///:memory:",
        "UPLOAD_FOLDER": str(tmp_path / "uploads"),
        "LOG_LEVEL": "WARNING",
    })
    with app.app_context():
        db.create_all()
    yield app
    with app.app_context():
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


def created(resp):
    assert resp.status_code == 201, resp.get_json()
    return resp.get_json()


# ============================================================================
# Payloads
# ============================================================================

def complaint_payload(**over):
    data = {
        "number": "CR-001",
        "date_occurred": "2025-03-01T08:00:00Z",
        "local_occurrence": "Km 12 camp",
        "how_occurred": "Dust from haul trucks",
        "who_involved": "Haul truck drivers",
        "report_and_explanation": "Residents reported heavy dust",
        "claim_local_occurrence": "Village A",
        "complaintant_gender": "FEMALE",
        "complaintant_age": 42,
        "anonymous_complaint": "NO",
        "telephone": "+258 84 000 0000",
        "email": "resident@example.org",
        "complaintant_address": "Village A, house 3",
        "complaintant_accepted": "YES",
        "action_taken": "Road watering twice a day",
        "complaintant_notified": "YES",
        "notification_method": "Phone call",
        "closing_date": "2025-03-15",
        "claim_category": "Odor",
        "inspection_date": "2025-03-03",
        "collected_information": "Photos",
        "resolution_type": "Internal resolution",
        "resolution_date": "2025-03-10",
        "resolution_submitted": "YES",
        "corrective_action_taken": "Watering schedule enforced",
        "involved_in_resolution": "HSE team",
        "complaintant_satisfaction": "SATISFIED",
        "resources_spent": 1500.5,
        "number_of_days_since_received_to_closure": 14,
        "monitoring_after_closure": "YES",
        "monitoring_method_and_frequency": "Weekly visit",
        "follow_up": "None required",
        "suggested_preventive_actions": "Speed limits for trucks",
    }
    data.update(over)
    return data


# ============================================================================
# Factories (everything goes through the API)
# ============================================================================

@pytest.fixture
def make_department(client):
    def _make(name="HSE", description="Health, safety and environment"):
        return created(client.post("/api/departments", json={"name": name, "description": description}))
    return _make


@pytest.fixture
def make_subproject(client):
    def _make(name="Road Lot 1"):
        return created(client.post("/api/subprojects", json={
            "name": name,
            "location": "District 1",
            "type": "Road rehabilitation",
            "approximate_area": "12 km",
            "estimated_cost": "125000.50",
        }))
    return _make


@pytest.fixture
def make_person(client, make_department):
    def _make(name="Joao Tembe", department=None):
        department = department or make_department()
        return created(client.post("/api/involved-persons", json={
            "name": name,
            "department": {"id": department["id"]},
            "other_information": "Excavator operator",
        }))
    return _make


@pytest.fixture
def make_participant(client):
    def _make(name="Ana Mucavele"):
        return created(client.post("/api/investigation-participants", json={
            "name": name,
            "company": "Demo Construction",
            "activity": "HSE Manager",
            "signature": name[:1],
            "date": "2025-04-02T09:00:00Z",
        }))
    return _make


@pytest.fixture
def make_action(client):
    def _make(action="Barricade trench"):
        return created(client.post("/api/corrective-actions", json={
            "action": action,
            "description": "Install hard barriers",
            "responsible": "Site Supervisor",
            "date": "2025-04-02",
            "signature": "S.S.",
        }))
    return _make


@pytest.fixture
def incident_payload(make_person):
    def _payload(person=None, **over):
        person = person or make_person()
        data = {
            "name": "Carlos Sitoe",
            "role": "Site Supervisor",
            "date": "2025-04-01T00:00:00Z",
            "time": "14:30",
            "location": "Km 12 trench",
            "activity_in_progress": "Excavation",
            "accident_description": "Worker slipped into trench",
            "incident_type": "Human",
            "equipment_involved": "Excavator",
            "involved_person": {"id": person["id"]},
        }
        data.update(over)
        return data
    return _payload


@pytest.fixture
def make_photo_document(client):
    def _make(photo="/uploads/closure.jpg", created_by="HSE Officer"):
        return created(client.post("/api/photo-documents", json={"photo": photo, "created_by": created_by}))
    return _make
