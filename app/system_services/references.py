# app/system_services/references.py
from sqlalchemy.ext.asyncio import AsyncSession

from app.shared.exceptions import InvalidReferenceError
from app.system_models.doctor_model.doctor_model import Doctor
from app.system_models.patient_model.patient_model import Patient


async def ensure_references(db: AsyncSession, patient_id: int, doctor_id: int) -> None:
    """Raise InvalidReferenceError unless both foreign keys point at existing rows."""
    if await db.get(Patient, patient_id) is None:
        raise InvalidReferenceError("patient_id", patient_id)
    if await db.get(Doctor, doctor_id) is None:
        raise InvalidReferenceError("doctor_id", doctor_id)
