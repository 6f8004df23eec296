"""
Validation utilities exposed at the package level.
"""

from .errors import ValidationError
from .pipeline import validate_column, validate_table_definition
from .validators import (
    IdentifierValidator,
    RegexValidator,
    TypeKeywordValidator,
    is_bare_identifier,
    validate_identifier,
    validate_type_keyword,
)

__all__ = [
    "ValidationError",
    "validate_column",
    "validate_table_definition",
    "RegexValidator",
    "IdentifierValidator",
    "TypeKeywordValidator",
    "is_bare_identifier",
    "validate_identifier",
    "validate_type_keyword",
]
