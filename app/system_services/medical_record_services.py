# app/system_services/medical_record_services.py
import logging

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import aliased

from app.system_models.doctor_model.doctor_model import Doctor
from app.system_models.medical_record_model.medical_record_model import MedicalRecord
from app.system_models.medical_record_model.medical_record_schemas import MedicalRecordCreate
from app.system_models.patient_model.patient_model import Patient
from app.system_services.references import ensure_references

logger = logging.getLogger(__name__)


async def list_medical_records(db: AsyncSession) -> list[dict]:
    """Medical records joined with patient/doctor names, latest visit first."""
    patient = aliased(Patient)
    doctor = aliased(Doctor)
    result = await db.execute(
        select(
            MedicalRecord,
            patient.first_name.label("patient_first_name"),
            patient.last_name.label("patient_last_name"),
            doctor.first_name.label("doctor_first_name"),
            doctor.last_name.label("doctor_last_name"),
        )
        .join(patient, MedicalRecord.patient_id == patient.patient_id)
        .join(doctor, MedicalRecord.doctor_id == doctor.doctor_id)
        .order_by(MedicalRecord.visit_date.desc(), MedicalRecord.record_id.desc())
    )
    return [
        {
            "record_id": row.MedicalRecord.record_id,
            "patient_id": row.MedicalRecord.patient_id,
            "doctor_id": row.MedicalRecord.doctor_id,
            "visit_date": row.MedicalRecord.visit_date,
            "diagnosis": row.MedicalRecord.diagnosis,
            "treatment": row.MedicalRecord.treatment,
            "notes": row.MedicalRecord.notes,
            "patient_first_name": row.patient_first_name,
            "patient_last_name": row.patient_last_name,
            "doctor_first_name": row.doctor_first_name,
            "doctor_last_name": row.doctor_last_name,
        }
        for row in result.all()
    ]


async def add_medical_record(db: AsyncSession, record: MedicalRecordCreate) -> MedicalRecord:
    """Append a medical record. Records are never updated or deleted."""
    await ensure_references(db, record.patient_id, record.doctor_id)

    db_record = MedicalRecord(**record.model_dump())
    db.add(db_record)
    try:
        await db.commit()
    except IntegrityError:
        await db.rollback()
        await ensure_references(db, record.patient_id, record.doctor_id)
        raise
    await db.refresh(db_record)
    logger.info(f"Medical record {db_record.record_id} added for patient {record.patient_id}")
    return db_record
