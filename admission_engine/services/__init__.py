from admission_engine.services.admission_service import AdmissionService, parse_profile

__all__ = ["AdmissionService", "parse_profile"]
