import re
from typing import Iterable, Sequence, Tuple, Union

from uuidshort.core.exceptions import InvalidAlphabet, UnknownSymbol

# Digits 2-9, uppercase without I/O, lowercase without l (no look-alike symbols)
DEFAULT_ALPHABET = "23456789ABCDEFGHJKLMNPQRSTUVWXYZabcdefghijkmnopqrstuvwxyz"
UUID_BYTES = 16

_DIGIT_RUN = re.compile(r"([0-9]+)")


def natural_key(symbol: str):
    """Sort key comparing ASCII digit runs numerically and everything else by code point."""
    key = []
    for chunk in _DIGIT_RUN.split(symbol):
        if not chunk:
            continue
        if chunk[0].isascii() and chunk[0].isdigit():
            key.append((ord("0"), int(chunk), chunk))
        else:
            key.extend((ord(c), 0, c) for c in chunk)
    return key


class Alphabet:
    """Immutable, canonical set of symbols used as the digits of a positional numeral system.

    Symbols are deduplicated and naturally sorted, so any permutation or
    repetition of the same symbols produces an equal alphabet.
    """

    __slots__ = ("_symbols", "_positions")

    def __init__(self, symbols: Union[str, Iterable[str]] = DEFAULT_ALPHABET):
        if isinstance(symbols, str):
            symbols = list(symbols)
        canonical = tuple(sorted(set(symbols), key=natural_key))
        if len(canonical) < 2:
            raise InvalidAlphabet("Alphabet with more than one unique symbols required.")

        object.__setattr__(self, "_symbols", canonical)
        object.__setattr__(self, "_positions", {s: i for i, s in enumerate(canonical)})

    def __setattr__(self, name, value):
        raise AttributeError("Alphabet is immutable")

    @property
    def symbols(self) -> Tuple[str, ...]:
        return self._symbols

    @property
    def radix(self) -> int:
        return len(self._symbols)

    @property
    def zero(self) -> str:
        return self._symbols[0]

    def get_symbols(self) -> str:
        return "".join(self._symbols)

    def index(self, symbol: str) -> int:
        try:
            return self._positions[symbol]
        except KeyError:
            raise UnknownSymbol(symbol) from None

    def encoded_length(self, byte_width: int = UUID_BYTES) -> int:
        """Number of digits needed for any value of `byte_width` bytes.

        Same as ceil(log(256) / log(radix) * byte_width), without float rounding.
        """
        if byte_width < 0:
            raise ValueError("byte_width must be non-negative")
        capacity = 256 ** byte_width
        length, reach = 0, 1
        while reach < capacity:
            reach *= self.radix
            length += 1
        return length

    def __len__(self):
        return self.radix

    def __contains__(self, symbol):
        return symbol in self._positions

    def __iter__(self):
        return iter(self._symbols)

    def __eq__(self, other):
        if not isinstance(other, Alphabet):
            return NotImplemented
        return self._symbols == other._symbols

    def __hash__(self):
        return hash(self._symbols)

    def __repr__(self):
        return f"Alphabet({self.get_symbols()!r})"


def encode(num: int, alphabet: Alphabet, byte_width: int = UUID_BYTES) -> str:
    """Encode integer LSB first, padded with the zero symbol to the alphabet's encoded length."""
    if not isinstance(num, int) or num < 0:
        raise ValueError("Input must be a non-negative integer.")
    pad_length = alphabet.encoded_length(byte_width)
    out = []
    while num:
        num, rem = divmod(num, alphabet.radix)
        out.append(alphabet.symbols[rem])
    # never truncate: more digits than pad_length are all kept
    out.extend([alphabet.zero] * max(pad_length - len(out), 0))
    return "".join(out)


def decode(s: Union[str, Sequence[str]], alphabet: Alphabet) -> int:
    """Decode an LSB-first string to integer. Raises UnknownSymbol on foreign characters."""
    n = 0
    for ch in reversed(s):
        n = n * alphabet.radix + alphabet.index(ch)
    return n
