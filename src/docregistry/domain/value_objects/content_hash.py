"""Content hash of a registered document."""

from dataclasses import dataclass

CONTENT_HASH_SIZE = 32


@dataclass(frozen=True)
class ContentHash:
    """Fixed-size binary digest (32 bytes, e.g. SHA-256)."""

    value: bytes

    def __post_init__(self) -> None:
        if len(self.value) != CONTENT_HASH_SIZE:
            raise ValueError(f"Content hash must be {CONTENT_HASH_SIZE} bytes")

    @classmethod
    def from_hex(cls, text: str) -> "ContentHash":
        """Parse hex digest, optional 0x prefix."""
        if text.startswith(("0x", "0X")):
            text = text[2:]
        try:
            raw = bytes.fromhex(text)
        except ValueError as e:
            raise ValueError(f"Content hash is not valid hex: {text!r}") from e
        return cls(raw)

    def hex(self) -> str:
        return self.value.hex()
