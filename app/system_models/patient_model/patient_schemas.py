# app/system_models/patient_model/patient_schemas.py
from typing import Optional, Literal
from datetime import date
from pydantic import BaseModel, ConfigDict, Field, field_validator

from app.helpers.time import today

GENDER = Literal["M", "F", "Other"]
BLOOD_TYPE = Literal["A+", "A-", "B+", "B-", "AB+", "AB-", "O+", "O-"]


class PatientBase(BaseModel):
    first_name: str = Field(..., min_length=1, max_length=50)
    last_name: str = Field(..., min_length=1, max_length=50)
    date_of_birth: date
    gender: GENDER
    contact_number: Optional[str] = Field(None, max_length=15)
    email: Optional[str] = Field(None, max_length=100)
    address: Optional[str] = None
    blood_type: Optional[BLOOD_TYPE] = None

    @field_validator("first_name", "last_name")
    def strip_names(cls, v):
        v = v.strip()
        if not v:
            raise ValueError("must not be blank")
        return v

    @field_validator("date_of_birth")
    def date_of_birth_not_in_future(cls, v):
        if v > today():
            raise ValueError("date_of_birth must not be in the future")
        return v


class PatientCreate(PatientBase):
    pass


# Full replacement: required fields must be resupplied, omitted optionals are cleared
class PatientUpdate(PatientBase):
    pass


class PatientResponse(PatientBase):
    patient_id: int
    registration_date: date
    model_config = ConfigDict(from_attributes=True)


class PatientCreateResponse(BaseModel):
    patient_id: int
    message: str = "Patient added successfully"
