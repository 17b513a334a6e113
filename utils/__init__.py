# utils/__init__.py
# This file is part of Seqex - Sequence Expression Matching
#
# Utility module exports

from .token_reader import (
    read_tokens,
    validate_token_file,
    parse_token,
    TokenFormatError,
)

__all__ = [
    "read_tokens",
    "validate_token_file",
    "parse_token",
    "TokenFormatError",
]
