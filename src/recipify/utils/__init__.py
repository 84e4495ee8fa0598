from .chunk import chunk_children
from .redact import redact, redact_text
from .text_split import split_string

__all__ = [
    "chunk_children",
    "split_string",
    "redact",
    "redact_text",
]
