import logging
import secrets
import uuid
from typing import Iterable, Optional, Union

from uuidshort.services import identifiers
from uuidshort.utils.encoding import DEFAULT_ALPHABET, UUID_BYTES, Alphabet, decode, encode


logger = logging.getLogger(__name__)


class ShortUUID:
    """Encodes UUIDs as short strings over a fixed alphabet and back again."""

    def __init__(self, alphabet: Union[str, Iterable[str], Alphabet, None] = None):
        if alphabet is None:
            alphabet = DEFAULT_ALPHABET
        self._alphabet = alphabet if isinstance(alphabet, Alphabet) else Alphabet(alphabet)
        logger.debug("ShortUUID ready: radix=%d", self._alphabet.radix)

    @property
    def alphabet(self) -> Alphabet:
        return self._alphabet

    def get_alphabet(self) -> str:
        return self._alphabet.get_symbols()

    def encoded_length(self, num_bytes: int = UUID_BYTES) -> int:
        return self._alphabet.encoded_length(num_bytes)

    def encode(self, identifier: uuid.UUID) -> str:
        """Encode a UUID LSB first; short values are padded so every result has the same length."""
        return encode(
            identifiers.to_integer(identifier),
            self._alphabet,
            identifiers.byte_width(identifier),
        )

    def decode(self, short_id: str) -> uuid.UUID:
        """Decode a short id into a UUID.

        Raises UnknownSymbol for characters outside the alphabet and
        IdentifierOutOfRange when the value needs more than 128 bits.
        A string shorter than the encoded length fills the high bits with 0.
        """
        return identifiers.from_integer(decode(short_id, self._alphabet))

    def uuid(self, name: Optional[str] = None) -> str:
        """Generate a short id: random without a name, name-derived (uuid5) otherwise."""
        return self.encode(identifiers.new_identifier(name))

    def random(self, length: Optional[int] = None) -> str:
        """Cryptographically secure random string of alphabet symbols."""
        if length is None:
            length = self.encoded_length()
        if length < 0:
            raise ValueError("length must be non-negative")
        return ''.join(secrets.choice(self._alphabet.symbols) for _ in range(length))
