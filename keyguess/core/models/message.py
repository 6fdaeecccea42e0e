from dataclasses import dataclass, asdict
from typing import Any


@dataclass
class Message:
    """
    Result of a keyguess command, in native Python form.
    Renderers turn it into YAML, JSON or msgpack for the terminal.
    """
    type: str
    """
    type of message, e.g. "ok", "error"
    """

    data: dict[Any, Any]
    """
    A dictionary of renderable data
    """

    def to_dict(self) -> dict[str, Any]:
        """Return a plain dictionary representation of the message."""
        return asdict(self)

    @classmethod
    def ok(cls, **data: Any) -> "Message":
        return cls(type="ok", data=data)

    @classmethod
    def error(cls, reason: str) -> "Message":
        return cls(type="error", data={"reason": reason})
