# app/system_models/__init__.py
# Importing the model modules registers every table on Base.metadata
from app.system_models.patient_model.patient_model import Patient
from app.system_models.doctor_model.doctor_model import Doctor
from app.system_models.appointment_model.appointment_model import Appointment
from app.system_models.medical_record_model.medical_record_model import MedicalRecord

__all__ = ["Patient", "Doctor", "Appointment", "MedicalRecord"]
