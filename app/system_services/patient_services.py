# app/system_services/patient_services.py
import logging

from sqlalchemy import delete, func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from app.helpers.time import today
from app.shared.exceptions import DependentRecordsError, NotFoundError
from app.system_models.appointment_model.appointment_model import Appointment
from app.system_models.medical_record_model.medical_record_model import MedicalRecord
from app.system_models.patient_model.patient_model import Patient
from app.system_models.patient_model.patient_schemas import PatientCreate, PatientUpdate

logger = logging.getLogger(__name__)


# ============================================================
# ✅ LIST PATIENTS
# ============================================================
async def list_patients(db: AsyncSession) -> list[Patient]:
    result = await db.execute(
        select(Patient).order_by(Patient.last_name, Patient.first_name, Patient.patient_id)
    )
    return list(result.scalars().all())


# ============================================================
# ✅ GET PATIENT
# ============================================================
async def get_patient(db: AsyncSession, patient_id: int) -> Patient:
    patient = await db.get(Patient, patient_id)
    if patient is None:
        raise NotFoundError("Patient", patient_id)
    return patient


# ============================================================
# ✅ CREATE PATIENT
# ============================================================
async def create_patient(db: AsyncSession, patient: PatientCreate) -> Patient:
    """Create a new patient. registration_date is always today."""
    db_patient = Patient(**patient.model_dump(), registration_date=today())
    db.add(db_patient)
    await db.commit()
    await db.refresh(db_patient)
    logger.info(f"Patient {db_patient.patient_id} registered")
    return db_patient


# ============================================================
# ✅ UPDATE PATIENT (full replacement)
# ============================================================
async def update_patient(db: AsyncSession, patient_id: int, patient: PatientUpdate) -> Patient:
    db_patient = await get_patient(db, patient_id)

    # Every mutable field is overwritten, omitted optionals included
    for field, value in patient.model_dump().items():
        setattr(db_patient, field, value)

    await db.commit()
    await db.refresh(db_patient)
    logger.info(f"Patient {patient_id} updated")
    return db_patient


# ============================================================
# ✅ COUNT DEPENDENT ROWS
# ============================================================
async def count_dependents(db: AsyncSession, patient_id: int) -> tuple[int, int]:
    appointment_count = await db.scalar(
        select(func.count()).select_from(Appointment).where(Appointment.patient_id == patient_id)
    )
    record_count = await db.scalar(
        select(func.count()).select_from(MedicalRecord).where(MedicalRecord.patient_id == patient_id)
    )
    return appointment_count or 0, record_count or 0


# ============================================================
# ✅ DELETE PATIENT
# ============================================================
async def delete_patient(db: AsyncSession, patient_id: int) -> None:
    """
    Delete a patient that has no appointments or medical records.

    The row lock, dependent count and delete share one transaction. The
    RESTRICT foreign keys on appointments/medical_records reject the delete
    if a dependent still slips in, which is reported as the same conflict.
    """
    result = await db.execute(
        select(Patient.patient_id).where(Patient.patient_id == patient_id).with_for_update()
    )
    if result.scalar_one_or_none() is None:
        await db.rollback()
        raise NotFoundError("Patient", patient_id)

    appointment_count, record_count = await count_dependents(db, patient_id)
    if appointment_count or record_count:
        await db.rollback()
        logger.warning(
            f"Refused to delete patient {patient_id}: "
            f"{appointment_count} appointments, {record_count} medical records"
        )
        raise DependentRecordsError(
            patient_id=patient_id,
            appointment_count=appointment_count,
            record_count=record_count,
        )

    try:
        await db.execute(delete(Patient).where(Patient.patient_id == patient_id))
        await db.commit()
    except IntegrityError:
        await db.rollback()
        appointment_count, record_count = await count_dependents(db, patient_id)
        await db.rollback()
        logger.warning(f"Delete of patient {patient_id} blocked by foreign key")
        raise DependentRecordsError(
            patient_id=patient_id,
            appointment_count=appointment_count,
            record_count=record_count,
        )

    logger.info(f"Patient {patient_id} deleted")
