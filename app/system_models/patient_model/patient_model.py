# app/system_models/patient_model/patient_model.py
from sqlalchemy import Column, Integer, String, Date, Text, CheckConstraint
from sqlalchemy.orm import relationship
from app.database.connection import Base

class Patient(Base):
    __tablename__ = "patients"

    patient_id = Column(Integer, primary_key=True, index=True)

    first_name = Column(String(50), nullable=False)
    last_name = Column(String(50), nullable=False)
    date_of_birth = Column(Date, nullable=False)
    gender = Column(String(10), nullable=False)
    contact_number = Column(String(15), nullable=True)
    email = Column(String(100), nullable=True)
    address = Column(Text, nullable=True)
    blood_type = Column(String(5), nullable=True)

    # Set by the service on creation, never updated
    registration_date = Column(Date, nullable=False)

    __table_args__ = (
        CheckConstraint("gender IN ('M', 'F', 'Other')", name="check_patient_gender_values"),
        CheckConstraint(
            "blood_type IS NULL OR blood_type IN ('A+', 'A-', 'B+', 'B-', 'AB+', 'AB-', 'O+', 'O-')",
            name="check_patient_blood_type_values",
        ),
    )

    # Deletes go through a core DELETE statement; passive_deletes keeps the ORM
    # from nulling foreign keys on dependents.
    appointments = relationship("Appointment", back_populates="patient", passive_deletes="all")
    medical_records = relationship("MedicalRecord", back_populates="patient", passive_deletes="all")

    def __repr__(self):
        return f"<Patient {self.patient_id}: {self.first_name} {self.last_name}>"
