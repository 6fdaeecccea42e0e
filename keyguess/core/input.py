import binascii
from collections.abc import Callable, Iterable

from keyguess.core.errors import InputParseError


def _strip_brackets(text: str) -> str:
    text = text.strip()
    if text.startswith("["):
        text = text[1:]
    if text.endswith("]"):
        text = text[:-1]
    return text


def _to_bytes(items: Iterable[str], notation: str) -> bytes:
    out = bytearray()
    for item in items:
        if not (item.isascii() and item.isdigit()):
            raise InputParseError(f"{notation}: '{item}' is not a decimal byte")
        value = int(item)
        if value > 0xFF:
            raise InputParseError(f"{notation}: {value} does not fit in a byte")
        out.append(value)
    return bytes(out)


def parse_rust_print(text: str) -> bytes:
    """Parse `{:?}` output of a byte slice, e.g. "[116, 128, 0]"."""
    body = _strip_brackets(text)
    return _to_bytes((item.strip() for item in body.split(",")), "rust")


def parse_go_print(text: str) -> bytes:
    """Parse `fmt.Print` output of a byte slice, e.g. "[116 128 0]"."""
    body = _strip_brackets(text)
    return _to_bytes(body.split(" "), "go")


def parse_hex(text: str) -> bytes:
    body = text.strip()
    if body[:2].lower() == "0x":
        body = body[2:]
    try:
        return binascii.unhexlify(body)
    except (binascii.Error, ValueError) as ex:
        raise InputParseError(f"hex: {ex}") from ex


PARSERS: dict[str, Callable[[str], bytes]] = {
    "rust": parse_rust_print,
    "go": parse_go_print,
    "hex": parse_hex,
}

DEFAULT_ORDER = ("rust", "go", "hex")


def parse_input(text: str, order: Iterable[str] = DEFAULT_ORDER) -> bytes:
    """
    Read `text` as bytes using the first notation that accepts it.

    A single decimal such as "12" is valid in every notation, which is
    why the order matters.
    """
    failures = []
    for name in order:
        try:
            parser = PARSERS[name]
        except KeyError:
            raise ValueError(f"unknown input notation: {name}") from None
        try:
            return parser(text)
        except InputParseError as ex:
            failures.append(str(ex))

    raise InputParseError("cannot parse input: " + "; ".join(failures))
