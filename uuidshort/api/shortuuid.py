from fastapi import APIRouter, Depends, status, Query
from typing import Optional
import logging

from uuidshort.api.dependencies import get_short_uuid
from uuidshort.schemas import (
    AlphabetInfoResponse,
    EncodeRequest,
    GenerateRequest,
    GeneratedResponse,
    RandomResponse,
    ShortUUIDResponse,
)
from uuidshort.services import identifiers
from uuidshort.services.shortuuid import ShortUUID

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/v1", tags=["short-uuid"])

@router.post("/encode", response_model=ShortUUIDResponse)
def encode_endpoint(request: EncodeRequest, codec: ShortUUID = Depends(get_short_uuid)):
    short_id = codec.encode(request.identifier)
    logger.info(f"API success: Encoded {request.identifier} to {short_id}")
    return ShortUUIDResponse(identifier=request.identifier, short_id=short_id)

@router.get("/decode/{short_id}", response_model=ShortUUIDResponse)
def decode_endpoint(short_id: str, codec: ShortUUID = Depends(get_short_uuid)):
    # UnknownSymbol and IdentifierOutOfRange become 400 in the app-level handler
    identifier = codec.decode(short_id)
    return ShortUUIDResponse(identifier=identifier, short_id=short_id)

@router.post("/generate", response_model=GeneratedResponse, status_code=status.HTTP_201_CREATED)
def generate_endpoint(request: GenerateRequest, codec: ShortUUID = Depends(get_short_uuid)):
    identifier = identifiers.new_identifier(request.name)
    namespace = identifiers.namespace_for(request.name) if request.name is not None else None
    short_id = codec.encode(identifier)
    logger.info("Generated %s (namespace=%s)", short_id, namespace.value if namespace else "random")
    return GeneratedResponse(identifier=identifier, short_id=short_id, namespace=namespace)

@router.get("/random", response_model=RandomResponse)
def random_endpoint(
    length: Optional[int] = Query(None, ge=1, le=1024),
    codec: ShortUUID = Depends(get_short_uuid)
):
    return RandomResponse(short_id=codec.random(length))

@router.get("/alphabet", response_model=AlphabetInfoResponse)
def alphabet_endpoint(codec: ShortUUID = Depends(get_short_uuid)):
    return AlphabetInfoResponse(
        alphabet=codec.get_alphabet(),
        radix=codec.alphabet.radix,
        encoded_length=codec.encoded_length(),
    )
