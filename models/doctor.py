from pydantic import BaseModel, Field

class Doctor(BaseModel):
    name: str = Field(..., description="Full name of the doctor")
    hospital: str = Field(..., description="Hospital the doctor works at")
    category: str = Field(..., description="Specialization of the doctor, e.g. surgery")
    availability: str = Field(..., description="Free text availability, e.g. 9.00 a.m - 11.00 a.m")
    fee: float = Field(..., description="Consultation fee")
