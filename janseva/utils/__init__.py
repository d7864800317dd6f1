"""
Utility functions for the Jan Seva Scheme Finder
"""

from .validators import (
    normalize_text,
    parse_number,
    parse_int,
    parse_bool,
    parse_string_list,
    format_inr,
    validate_program_kind,
    validate_program_payload
)

__all__ = [
    "normalize_text",
    "parse_number",
    "parse_int",
    "parse_bool",
    "parse_string_list",
    "format_inr",
    "validate_program_kind",
    "validate_program_payload"
]
