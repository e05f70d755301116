# re-export common schemas for simpler imports
from .EncodeRequest import EncodeRequest
from .GenerateRequest import GenerateRequest
from .ShortUUIDResponse import ShortUUIDResponse, GeneratedResponse, RandomResponse
from .AlphabetInfoResponse import AlphabetInfoResponse

__all__ = [
    "EncodeRequest",
    "GenerateRequest",
    "ShortUUIDResponse",
    "GeneratedResponse",
    "RandomResponse",
    "AlphabetInfoResponse",
]
