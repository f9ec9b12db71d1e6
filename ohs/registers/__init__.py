# ohs/registers/__init__.py
from .communication_api import bp as communication_api_bp
from .compliance_api import bp as compliance_api_bp
from .incident_api import bp as incident_api_bp
from .reference_api import bp as reference_api_bp
from .upload_api import upload_api_bp, uploads_bp

api_blueprints = [
    reference_api_bp,
    incident_api_bp,
    communication_api_bp,
    compliance_api_bp,
    upload_api_bp,
]

__all__ = ["api_blueprints", "uploads_bp"]
