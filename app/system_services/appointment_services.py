# app/system_services/appointment_services.py
import logging

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import aliased

from app.shared.exceptions import AppointmentConflictError
from app.system_models.appointment_model.appointment_model import Appointment
from app.system_models.appointment_model.appointment_schemas import AppointmentCreate
from app.system_models.doctor_model.doctor_model import Doctor
from app.system_models.patient_model.patient_model import Patient
from app.system_services.references import ensure_references

logger = logging.getLogger(__name__)

DEFAULT_STATUS = "Scheduled"


# ============================================================
# ✅ LIST APPOINTMENTS (most recent first)
# ============================================================
async def list_appointments(db: AsyncSession) -> list[dict]:
    patient = aliased(Patient)
    doctor = aliased(Doctor)
    result = await db.execute(
        select(
            Appointment,
            patient.first_name.label("patient_first_name"),
            patient.last_name.label("patient_last_name"),
            doctor.first_name.label("doctor_first_name"),
            doctor.last_name.label("doctor_last_name"),
        )
        .join(patient, Appointment.patient_id == patient.patient_id)
        .join(doctor, Appointment.doctor_id == doctor.doctor_id)
        .order_by(
            Appointment.appointment_date.desc(),
            Appointment.appointment_time.desc(),
            Appointment.appointment_id.desc(),
        )
    )
    return [
        {
            "appointment_id": row.Appointment.appointment_id,
            "patient_id": row.Appointment.patient_id,
            "doctor_id": row.Appointment.doctor_id,
            "appointment_date": row.Appointment.appointment_date,
            "appointment_time": row.Appointment.appointment_time,
            "reason": row.Appointment.reason,
            "status": row.Appointment.status,
            "patient_first_name": row.patient_first_name,
            "patient_last_name": row.patient_last_name,
            "doctor_first_name": row.doctor_first_name,
            "doctor_last_name": row.doctor_last_name,
        }
        for row in result.all()
    ]


async def find_slot_conflict(
    db: AsyncSession, appointment: AppointmentCreate, exclude_id: int | None = None
) -> Appointment | None:
    query = select(Appointment).where(
        Appointment.doctor_id == appointment.doctor_id,
        Appointment.appointment_date == appointment.appointment_date,
        Appointment.appointment_time == appointment.appointment_time,
        Appointment.status == DEFAULT_STATUS,
    )
    if exclude_id is not None:
        query = query.where(Appointment.appointment_id != exclude_id)
    result = await db.execute(query.order_by(Appointment.appointment_id).limit(1))
    return result.scalars().first()


# ============================================================
# ✅ SCHEDULE APPOINTMENT
# ============================================================
async def schedule_appointment(
    db: AsyncSession,
    appointment: AppointmentCreate,
    *,
    check_conflicts: bool = False,
) -> Appointment:
    """
    Insert a new appointment with status "Scheduled".

    Double-booking is allowed unless ``check_conflicts`` is set. Then the
    doctor row is locked, the new row is flushed and the slot is checked
    inside the same transaction, so two concurrent requests for one slot
    cannot both commit. The later one raises AppointmentConflictError.
    """
    await ensure_references(db, appointment.patient_id, appointment.doctor_id)

    db_appointment = Appointment(**appointment.model_dump(), status=DEFAULT_STATUS)
    try:
        if check_conflicts:
            # FOR UPDATE on PostgreSQL; on SQLite the INSERT's write lock serialises writers
            await db.execute(
                select(Doctor.doctor_id).where(Doctor.doctor_id == appointment.doctor_id).with_for_update()
            )
        db.add(db_appointment)
        await db.flush()

        if check_conflicts:
            existing = await find_slot_conflict(db, appointment, exclude_id=db_appointment.appointment_id)
            if existing is not None:
                existing_id = existing.appointment_id
                await db.rollback()
                logger.warning(
                    f"Slot conflict for doctor {appointment.doctor_id} on "
                    f"{appointment.appointment_date} {appointment.appointment_time}"
                )
                raise AppointmentConflictError(
                    doctor_id=appointment.doctor_id,
                    appointment_date=appointment.appointment_date.isoformat(),
                    appointment_time=appointment.appointment_time.isoformat(),
                    existing_id=existing_id,
                )

        await db.commit()
    except IntegrityError:
        # A referenced row vanished between the check and the insert
        await db.rollback()
        await ensure_references(db, appointment.patient_id, appointment.doctor_id)
        raise
    await db.refresh(db_appointment)
    logger.info(
        f"Appointment {db_appointment.appointment_id} scheduled for patient {appointment.patient_id} "
        f"with doctor {appointment.doctor_id}"
    )
    return db_appointment
