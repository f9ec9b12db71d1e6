# seed_data.py

from datetime import datetime, timezone

from ohs import create_app, db
from ohs.registers.reference_models import (
    AcceptanceConfirmation, Department, EnvironmentalFactor, Position,
    RisksAndImpact, Subproject, ToolboxTalk,
)
from ohs.registers.incident_models import (
    CorrectiveAction, InvestigationParticipant, InvolvedPerson,
)
from ohs.registers.compliance_models import LegalRequirement

app = create_app()

with app.app_context():
    db.drop_all()
    db.create_all()

    hse = Department(name="HSE", description="Health, safety and environment")
    works = Department(name="Civil Works", description="Site construction teams")
    db.session.add_all([hse, works])

    db.session.add_all([
        Position(name="Safety Officer"),
        Position(name="Site Supervisor"),
        Position(name="Environmental Specialist"),
    ])

    for i in range(1, 4):
        db.session.add(Subproject(
            name=f"Rural Road Lot {i}",
            contract_reference=f"CT-2025-00{i}",
            contractor_name="Demo Construction Lda",
            estimated_cost=1_250_000 * i,
            location=f"District {i}",
            geographic_coordinates="-25.9655, 32.5832",
            type="Road rehabilitation",
            approximate_area=f"{12 * i} km",
        ))

    db.session.add_all([ToolboxTalk(name=n) for n in (
        "Working at height", "Manual handling", "Heat stress", "Traffic management",
    )])
    db.session.add_all([EnvironmentalFactor(description=d) for d in (
        "Dust emissions", "Noise", "Waste generation", "Water consumption",
    )])
    db.session.add_all([RisksAndImpact(description=d) for d in (
        "Soil erosion", "Community health and safety", "Loss of vegetation",
    )])
    db.session.add(AcceptanceConfirmation(description="Screening reviewed and accepted"))
    db.session.flush()  # ids for the people below

    now = datetime.now(timezone.utc)
    db.session.add_all([
        InvolvedPerson(name="Joao Tembe", department_id=works.id,
                       other_information="Excavator operator, 4 years on site"),
        InvestigationParticipant(name="Ana Mucavele", company="Demo Construction Lda",
                                 activity="HSE Manager", signature="A.M.", date=now),
        CorrectiveAction(action="Barricade trench", description="Install hard barriers around open trench",
                         responsible="Site Supervisor", date=now, signature="S.S."),
        LegalRequirement(number="LR-001", document_title="Labour Law",
                         effective_date=now, description="General labour safety duties",
                         status="ACTIVE"),
    ])

    db.session.commit()
    print("Demo reference data seeded successfully.")
