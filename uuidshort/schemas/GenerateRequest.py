from pydantic import BaseModel, field_validator
from typing import Optional

class GenerateRequest(BaseModel):
    # Random uuid4 when omitted, uuid5 (DNS or URL namespace) otherwise
    name: Optional[str] = None

    @field_validator('name')
    def validate_name(cls, v):
        if v is None:
            return v
        if len(v) > 2048:
            raise ValueError('name must be less than 2048 characters')
        return v
