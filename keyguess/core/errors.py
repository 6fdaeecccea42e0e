class KeyGuessError(ValueError):
    """
    Base class of every decoding failure raised by keyguess.

    Subclasses ValueError so that callers treating malformed bytes as a
    bad value keep working without importing this module.
    """


class MalformedEncoding(KeyGuessError):
    """Memcomparable input is not a sequence of well-formed 9-byte groups."""


class MalformedVarint(KeyGuessError):
    """Varint is unterminated or longer than a 64-bit value allows."""


class TruncatedInput(KeyGuessError):
    """Fewer bytes are available than a fixed-width field requires."""


class InvalidRecordFormat(KeyGuessError):
    """Row-key structural markers are absent or the key is too short."""


class UnknownWriteType(KeyGuessError):
    """Write-type tag byte is not one of P, D, L, R."""


class TruncatedShortValue(KeyGuessError):
    """Declared short-value length runs past the end of the record."""


class InputParseError(KeyGuessError):
    """Text could not be read as bytes in any supported notation."""
