"""
Request body schemas.

Every create and status-update endpoint validates its JSON body against one of
these pydantic models before anything reaches the store. Field names are
snake_case in Python and camelCase on the wire.
"""

from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic import ValidationError as PydanticValidationError
from pydantic.alias_generators import to_camel

from donorhub.errors import ValidationError

BloodType = Literal["A+", "A-", "B+", "B-", "AB+", "AB-", "O+", "O-"]
RecordStatus = Literal["pending", "approved", "rejected"]
UrgencyLevel = Literal["critical", "urgent", "normal"]

# Upper bound of the INTEGER columns these fields are stored in
INT_MAX = 2**31 - 1


class _Schema(BaseModel):
    # Unknown keys (id, status, createdAt...) are dropped rather than rejected
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="ignore")


class DonorCreate(_Schema):
    full_name: str
    age: int = Field(..., ge=0, le=INT_MAX)
    gender: str
    blood_type: BloodType
    location: str
    phone: str
    email: str


class HospitalCreate(_Schema):
    name: str
    location: str
    phone: str
    email: str
    address: Optional[str] = None
    contact_person: Optional[str] = None


class BloodRequestCreate(_Schema):
    hospital_name: str
    blood_type: BloodType
    units_needed: int = Field(..., gt=0, le=INT_MAX, description="Units requested (positive)")
    urgency_level: UrgencyLevel
    location: str
    phone: str
    email: str


class StatusUpdate(_Schema):
    status: RecordStatus


class Credentials(_Schema):
    username: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)


def format_errors(exc):
    parts = []
    for err in exc.errors():
        loc = ".".join(str(p) for p in err["loc"])
        parts.append(f'{err["msg"]} at "{loc}"' if loc else err["msg"])
    return "Validation error: " + "; ".join(parts)


def parse(schema, data):
    """Validate ``data`` against ``schema``; raise ValidationError with a readable message."""
    if data is None:
        raise ValidationError("No input data provided")
    try:
        return schema.model_validate(data)
    except PydanticValidationError as exc:
        raise ValidationError(format_errors(exc))
