"""Utility modules for autolinker.

Provides:
- text: escaping, entity decoding and display truncation
- hashing: hash_str for comment placeholders
- logger: get_logger for logging
"""

from autolinker.utils.hashing import hash_str
from autolinker.utils.logger import get_logger
from autolinker.utils.text import decode_entities, escape_attr, escape_text, truncate_display

__all__ = [
    "decode_entities",
    "escape_attr",
    "escape_text",
    "get_logger",
    "hash_str",
    "truncate_display",
]
