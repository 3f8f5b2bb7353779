# app/system_services/doctor_services.py
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.shared.exceptions import NotFoundError
from app.system_models.doctor_model.doctor_model import Doctor


async def list_doctors(db: AsyncSession) -> list[Doctor]:
    """Doctors are reference data, sorted by name."""
    result = await db.execute(
        select(Doctor).order_by(Doctor.last_name, Doctor.first_name, Doctor.doctor_id)
    )
    return list(result.scalars().all())


async def get_doctor(db: AsyncSession, doctor_id: int) -> Doctor:
    doctor = await db.get(Doctor, doctor_id)
    if doctor is None:
        raise NotFoundError("Doctor", doctor_id)
    return doctor
