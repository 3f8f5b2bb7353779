# app/system_models/doctor_model/doctor_schemas.py
from typing import Optional, Literal
from pydantic import BaseModel, ConfigDict

DOCTOR_STATUS = Literal["Active", "Inactive"]

# Doctors are reference data: there is no create/update schema on the API
class DoctorResponse(BaseModel):
    doctor_id: int
    first_name: str
    last_name: str
    specialization: str
    experience: int
    contact_number: Optional[str] = None
    email: Optional[str] = None
    status: DOCTOR_STATUS
    model_config = ConfigDict(from_attributes=True)
