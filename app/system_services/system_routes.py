# app/system_services/system_routes.py
import logging
from typing import Annotated, List

from fastapi import APIRouter, Depends, Path, Request, status
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.database.connection import MAX_INTEGER_ID, get_db
from app.system_models.appointment_model.appointment_schemas import (
    AppointmentCreate,
    AppointmentCreateResponse,
    AppointmentListItem,
)
from app.system_models.doctor_model.doctor_schemas import DoctorResponse
from app.system_models.medical_record_model.medical_record_schemas import (
    MedicalRecordCreate,
    MedicalRecordCreateResponse,
    MedicalRecordListItem,
)
from app.system_models.patient_model.patient_schemas import (
    PatientCreate,
    PatientCreateResponse,
    PatientResponse,
    PatientUpdate,
)
from app.system_services import (
    appointment_services,
    doctor_services,
    medical_record_services,
    patient_services,
)
from config.appconfig import AppSettings

logger = logging.getLogger(__name__)

router = APIRouter()

PatientIdPath = Annotated[int, Path(ge=1, le=MAX_INTEGER_ID)]


def get_settings(request: Request) -> AppSettings:
    return request.app.state.settings


# ============================================================
# ✅ PATIENTS
# ============================================================
@router.get("/patients", response_model=List[PatientResponse], tags=["Patients"])
async def list_patients_endpoint(db: AsyncSession = Depends(get_db)):
    """All patients sorted by last name, then first name."""
    return await patient_services.list_patients(db)


@router.get("/patients/{patient_id}", response_model=PatientResponse, tags=["Patients"])
async def get_patient_endpoint(patient_id: PatientIdPath, db: AsyncSession = Depends(get_db)):
    return await patient_services.get_patient(db, patient_id)


@router.post(
    "/patients",
    response_model=PatientCreateResponse,
    status_code=status.HTTP_201_CREATED,
    tags=["Patients"],
)
async def create_patient_endpoint(patient: PatientCreate, db: AsyncSession = Depends(get_db)):
    """Create a new patient."""
    db_patient = await patient_services.create_patient(db, patient)
    return PatientCreateResponse(patient_id=db_patient.patient_id)


@router.put("/patients/{patient_id}", tags=["Patients"])
async def update_patient_endpoint(
    patient_id: PatientIdPath, patient: PatientUpdate, db: AsyncSession = Depends(get_db)
):
    """Replace every mutable field of a patient."""
    await patient_services.update_patient(db, patient_id, patient)
    return {"message": "Patient updated successfully"}


@router.delete("/patients/{patient_id}", tags=["Patients"])
async def delete_patient_endpoint(patient_id: PatientIdPath, db: AsyncSession = Depends(get_db)):
    """Delete a patient with no appointments or medical records."""
    await patient_services.delete_patient(db, patient_id)
    return {"message": "Patient deleted successfully"}


# ============================================================
# ✅ DOCTORS (read-only)
# ============================================================
@router.get("/doctors", response_model=List[DoctorResponse], tags=["Doctors"])
async def list_doctors_endpoint(db: AsyncSession = Depends(get_db)):
    return await doctor_services.list_doctors(db)


# ============================================================
# ✅ APPOINTMENTS
# ============================================================
@router.get("/appointments", response_model=List[AppointmentListItem], tags=["Appointments"])
async def list_appointments_endpoint(db: AsyncSession = Depends(get_db)):
    return await appointment_services.list_appointments(db)


@router.post(
    "/appointments",
    response_model=AppointmentCreateResponse,
    status_code=status.HTTP_201_CREATED,
    tags=["Appointments"],
)
async def schedule_appointment_endpoint(
    appointment: AppointmentCreate,
    db: AsyncSession = Depends(get_db),
    settings: AppSettings = Depends(get_settings),
):
    """Schedule an appointment. Status always starts as "Scheduled"."""
    db_appointment = await appointment_services.schedule_appointment(
        db, appointment, check_conflicts=settings.APPOINTMENT_CONFLICT_CHECK
    )
    return AppointmentCreateResponse(appointment_id=db_appointment.appointment_id)


# ============================================================
# ✅ MEDICAL RECORDS (append-only)
# ============================================================
@router.get("/medical-records", response_model=List[MedicalRecordListItem], tags=["Medical Records"])
async def list_medical_records_endpoint(db: AsyncSession = Depends(get_db)):
    return await medical_record_services.list_medical_records(db)


@router.post(
    "/medical-records",
    response_model=MedicalRecordCreateResponse,
    status_code=status.HTTP_201_CREATED,
    tags=["Medical Records"],
)
async def add_medical_record_endpoint(record: MedicalRecordCreate, db: AsyncSession = Depends(get_db)):
    db_record = await medical_record_services.add_medical_record(db, record)
    return MedicalRecordCreateResponse(record_id=db_record.record_id)


# ============================================================
# ✅ HEALTH
# ============================================================
@router.get("/health", tags=["Health"])
async def health_endpoint(request: Request):
    try:
        db_ok = await request.app.state.database.ping()
        return {"ok": True, "db": db_ok}
    except (SQLAlchemyError, OSError) as e:
        logger.error(f"❌ Health check failed: {e}")
        return JSONResponse(status_code=500, content={"ok": False, "db": False})
