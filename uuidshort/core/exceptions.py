class ShortUUIDError(ValueError):
    """Base class for codec errors."""


class InvalidAlphabet(ShortUUIDError):
    pass


class UnknownSymbol(ShortUUIDError):
    def __init__(self, symbol: str):
        self.symbol = symbol
        super().__init__(f"Symbol {symbol!r} is not part of the alphabet")


class IdentifierOutOfRange(ShortUUIDError):
    pass
