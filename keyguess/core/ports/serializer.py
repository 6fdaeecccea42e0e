from typing import Protocol, Any


class Serializer(Protocol):
    """
    Defines the interface for encoding command results into a binary
    form other tools can consume.

    Implementations must be:
    - deterministic
    - pure (no side effects)
    """

    def serialize(self, message: Any) -> bytes:
        """Encode a Python object into bytes."""

    def deserialize(self, data: bytes) -> Any:
        """Decode bytes produced by `serialize` back into a Python object."""
