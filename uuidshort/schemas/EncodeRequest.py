from pydantic import BaseModel, Field
from uuid import UUID

# Request DTOs
class EncodeRequest(BaseModel):
    # identifier is the Python field, 'uuid' is the JSON key
    identifier: UUID = Field(..., alias="uuid")

    class Config:
        populate_by_name = True
