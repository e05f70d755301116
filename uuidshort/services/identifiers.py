"""Thin wrapper over the standard library ``uuid`` module.

Everything the codec needs from an identifier goes through here: creating one
(random or name-derived), its integer value and byte width, and rebuilding one
from an integer.
"""
import enum
import uuid
from typing import Optional

from uuidshort.core.exceptions import IdentifierOutOfRange
from uuidshort.utils.encoding import UUID_BYTES

UUID_MAX = (1 << (8 * UUID_BYTES)) - 1


class NamespaceKind(str, enum.Enum):
    DNS = "dns"
    URL = "url"


_NAMESPACES = {
    NamespaceKind.DNS: uuid.NAMESPACE_DNS,
    NamespaceKind.URL: uuid.NAMESPACE_URL,
}


def namespace_for(name: str) -> NamespaceKind:
    """Names that mention "http" (any case) are treated as URLs, everything else as DNS names."""
    return NamespaceKind.URL if "http" in name.lower() else NamespaceKind.DNS


def new_random() -> uuid.UUID:
    return uuid.uuid4()


def new_from_name(kind: NamespaceKind, name: str) -> uuid.UUID:
    return uuid.uuid5(_NAMESPACES[kind], name)


def new_identifier(name: Optional[str] = None) -> uuid.UUID:
    if name is None:
        return new_random()
    return new_from_name(namespace_for(name), name)


def to_integer(identifier: uuid.UUID) -> int:
    return identifier.int


def byte_width(identifier: uuid.UUID) -> int:
    return len(identifier.bytes)


def from_integer(value: int) -> uuid.UUID:
    if not 0 <= value <= UUID_MAX:
        raise IdentifierOutOfRange(f"Value does not fit in a {UUID_BYTES}-byte identifier")
    return uuid.UUID(int=value)


def to_hex_string(identifier: uuid.UUID) -> str:
    return str(identifier)
