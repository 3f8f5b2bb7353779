# app/system_models/medical_record_model/medical_record_schemas.py
from typing import Optional
from datetime import date
from pydantic import BaseModel, ConfigDict, field_validator

from app.database.connection import ROW_ID
from app.helpers.time import today


class MedicalRecordCreate(BaseModel):
    patient_id: ROW_ID
    doctor_id: ROW_ID
    visit_date: date
    diagnosis: str
    treatment: str
    notes: Optional[str] = None

    @field_validator("diagnosis", "treatment")
    def narrative_not_blank(cls, v):
        v = v.strip()
        if not v:
            raise ValueError("must not be blank")
        return v

    @field_validator("visit_date")
    def visit_date_not_in_future(cls, v):
        if v > today():
            raise ValueError("visit_date must not be in the future")
        return v


class MedicalRecordResponse(BaseModel):
    record_id: int
    patient_id: int
    doctor_id: int
    visit_date: date
    diagnosis: str
    treatment: str
    notes: Optional[str] = None
    model_config = ConfigDict(from_attributes=True)


class MedicalRecordListItem(MedicalRecordResponse):
    patient_first_name: str
    patient_last_name: str
    doctor_first_name: str
    doctor_last_name: str


class MedicalRecordCreateResponse(BaseModel):
    record_id: int
    message: str = "Medical record added successfully"
