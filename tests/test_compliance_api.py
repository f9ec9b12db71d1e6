"""
Legal requirements register and training plans.
"""


def legal_payload(**over):
    data = {
        "number": "LR-001",
        "document_title": "Labour Law",
        "effective_date": "2024-01-01",
        "description": "General labour safety duties",
        "status": "ACTIVE",
    }
    data.update(over)
    return data


class TestLegalRequirements:

    def test_status_is_returned_lower_case(self, client):
        resp = client.post("/api/risks/legal-requirements", json=legal_payload(status="amended"))
        assert resp.status_code == 201
        assert resp.get_json()["status"] == "amended"

    def test_unknown_status_falls_back_to_active(self, client):
        body = client.post("/api/risks/legal-requirements",
                           json=legal_payload(status="SUPERSEDED")).get_json()
        assert body["status"] == "active"

    def test_status_required(self, client):
        resp = client.post("/api/risks/legal-requirements", json=legal_payload(status=""))
        assert resp.status_code == 400
        assert resp.get_json()["missing"] == ["status"]

    def test_number_may_repeat(self, client):
        client.post("/api/risks/legal-requirements", json=legal_payload())
        second = client.post("/api/risks/legal-requirements", json=legal_payload(status="REVOKED"))
        assert second.status_code == 201
        assert len(client.get("/api/risks/legal-requirements").get_json()) == 2

    def test_update(self, client):
        rec = client.post("/api/risks/legal-requirements", json=legal_payload()).get_json()
        resp = client.put(f"/api/risks/legal-requirements/{rec['id']}", json=legal_payload(
            status="REVOKED", observation="Replaced by Decree 12", law_file="/uploads/law.pdf",
        ))
        body = resp.get_json()
        assert body["status"] == "revoked"
        assert body["observation"] == "Replaced by Decree 12"
        assert body["law_file"] == "/uploads/law.pdf"

    def test_missing(self, client):
        resp = client.get("/api/risks/legal-requirements/unknown")
        assert resp.status_code == 404
        assert resp.get_json()["error"] == "Legal requirement not found"


def plan_payload(**over):
    data = {
        "updated_by": "HR",
        "date": "2025-01-10",
        "year": 2025,
        "training_area": "Fire safety",
        "training_title": "Extinguisher use",
        "training_objective": "Operate extinguishers",
        "training_type": "Practical",
        "training_entity": "Fire Brigade",
        "duration": "4h",
        "number_of_trainees": 20,
        "training_recipients": "Site crews",
        "training_month": "March",
        "training_status": "Planned",
    }
    data.update(over)
    return data


class TestTrainingPlans:

    def test_create(self, client):
        resp = client.post("/api/training-plans", json=plan_payload(year="2025"))
        assert resp.status_code == 201
        body = resp.get_json()
        assert body["year"] == 2025
        assert body["number_of_trainees"] == 20
        assert body["observations"] == ""

    def test_invalid_year(self, client):
        resp = client.post("/api/training-plans", json=plan_payload(year="next"))
        assert resp.status_code == 400
        assert resp.get_json()["error"] == "Invalid integer for year"

    def test_filters(self, client):
        client.post("/api/training-plans", json=plan_payload())
        client.post("/api/training-plans", json=plan_payload(year=2024))
        client.post("/api/training-plans", json=plan_payload(training_area="First aid"))

        by_year = client.get("/api/training-plans?year=2024").get_json()
        assert [p["year"] for p in by_year] == [2024]

        by_area = client.get("/api/training-plans?training_area=FIRE").get_json()
        assert len(by_area) == 2

        both = client.get("/api/training-plans?year=2025&training_area=aid").get_json()
        assert [p["training_area"] for p in both] == ["First aid"]

    def test_bad_year_filter(self, client):
        resp = client.get("/api/training-plans?year=abc")
        assert resp.status_code == 400
        assert resp.get_json()["error"] == "year must be a number"


def test_legal_requirements_listed_by_number(client):
    for number in ("LR-003", "LR-001", "LR-002"):
        client.post("/api/risks/legal-requirements", json=legal_payload(number=number))
    listed = [r["number"] for r in client.get("/api/risks/legal-requirements").get_json()]
    assert listed == ["LR-001", "LR-002", "LR-003"]
