"""Domain value objects."""

from docregistry.domain.value_objects.content_hash import CONTENT_HASH_SIZE, ContentHash
from docregistry.domain.value_objects.title import TITLE_MAX_BYTES, Title

__all__ = [
    "CONTENT_HASH_SIZE",
    "ContentHash",
    "TITLE_MAX_BYTES",
    "Title",
]
