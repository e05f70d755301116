from pydantic import BaseModel, Field
from uuid import UUID
from typing import Optional

from uuidshort.services.identifiers import NamespaceKind

# Response DTOs
class ShortUUIDResponse(BaseModel):
    identifier: UUID = Field(..., alias="uuid")
    short_id: str

    class Config:
        # Allows instantiation using the Python field name 'identifier'
        # even though it has an alias 'uuid'.
        populate_by_name = True


class GeneratedResponse(ShortUUIDResponse):
    namespace: Optional[NamespaceKind] = None


class RandomResponse(BaseModel):
    short_id: str
