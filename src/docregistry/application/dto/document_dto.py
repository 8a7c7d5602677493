"""Document DTOs."""

from dataclasses import dataclass


@dataclass
class DocumentRegisterInput:
    """Input for registering a document."""

    locator: str
    title: str
    content_hash: bytes
