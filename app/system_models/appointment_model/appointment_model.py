# app/system_models/appointment_model/appointment_model.py
from sqlalchemy import Column, Integer, String, Date, Time, Text, ForeignKey, CheckConstraint
from sqlalchemy.orm import relationship
from app.database.connection import Base

APPOINTMENT_STATUSES = ("Scheduled", "Completed", "Cancelled")

class Appointment(Base):
    __tablename__ = "appointments"

    appointment_id = Column(Integer, primary_key=True, index=True)
    patient_id = Column(Integer, ForeignKey("patients.patient_id", ondelete="RESTRICT"), nullable=False, index=True)
    doctor_id = Column(Integer, ForeignKey("doctors.doctor_id", ondelete="RESTRICT"), nullable=False, index=True)
    appointment_date = Column(Date, nullable=False)
    appointment_time = Column(Time, nullable=False)
    reason = Column(Text, nullable=True)
    status = Column(String(20), nullable=False)

    __table_args__ = (
        CheckConstraint(
            "status IN ('Scheduled', 'Completed', 'Cancelled')", name="check_appointment_status_values"
        ),
    )

    patient = relationship("Patient", back_populates="appointments")
    doctor = relationship("Doctor", back_populates="appointments")

    def __repr__(self):
        return f"<Appointment {self.appointment_id}: patient={self.patient_id} doctor={self.doctor_id} {self.appointment_date} {self.appointment_time}>"
