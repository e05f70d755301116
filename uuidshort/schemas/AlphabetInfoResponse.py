from pydantic import BaseModel

class AlphabetInfoResponse(BaseModel):
    alphabet: str
    radix: int
    encoded_length: int
