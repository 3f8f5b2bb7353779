# app/system_models/doctor_model/doctor_model.py
from sqlalchemy import Column, Integer, String, CheckConstraint
from sqlalchemy.orm import relationship
from app.database.connection import Base

class Doctor(Base):
    __tablename__ = "doctors"

    doctor_id = Column(Integer, primary_key=True, index=True)

    first_name = Column(String(50), nullable=False)
    last_name = Column(String(50), nullable=False)
    specialization = Column(String(100), nullable=False)
    experience = Column(Integer, nullable=False, default=0)
    contact_number = Column(String(15), nullable=True)
    email = Column(String(100), nullable=True)
    status = Column(String(10), nullable=False, default="Active")

    __table_args__ = (
        CheckConstraint("status IN ('Active', 'Inactive')", name="check_doctor_status_values"),
        CheckConstraint("experience >= 0", name="check_doctor_experience_non_negative"),
    )

    appointments = relationship("Appointment", back_populates="doctor", passive_deletes="all")
    medical_records = relationship("MedicalRecord", back_populates="doctor", passive_deletes="all")

    def __repr__(self):
        return f"<Doctor {self.doctor_id}: {self.first_name} {self.last_name} ({self.specialization})>"
