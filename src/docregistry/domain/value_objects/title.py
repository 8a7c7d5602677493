"""Document title token."""

from dataclasses import dataclass

TITLE_MAX_BYTES = 32


@dataclass(frozen=True)
class Title:
    """Bounded title token: 1..32 bytes of UTF-8."""

    value: str

    def __post_init__(self) -> None:
        if not self.value:
            raise ValueError("Title must not be empty")
        if len(self.value.encode("utf-8")) > TITLE_MAX_BYTES:
            raise ValueError(f"Title must be at most {TITLE_MAX_BYTES} bytes (UTF-8)")
