"""
Validators for the names and type keywords that end up in DDL text.
"""

from __future__ import annotations

import re
from typing import Any, Protocol

BARE_IDENTIFIER_PATTERN = r"[A-Za-z_][A-Za-z0-9_]*"
TYPE_KEYWORD_PATTERN = (
    r"(?:[A-Za-z_][A-Za-z0-9_]*(?: [A-Za-z_][A-Za-z0-9_]*)*"
    r"(?:\(\s*[+-]?\d+\s*(?:,\s*[+-]?\d+\s*)?\))?)?"
)


class Validator(Protocol):
    def __call__(self, value: Any) -> None: ...


class RegexValidator:
    def __init__(self, pattern: str, message: str | None = None) -> None:
        self.pattern = re.compile(pattern)
        self.message = message or "Value does not match required pattern."

    def __call__(self, value: Any) -> None:
        if not isinstance(value, str):
            raise ValueError("Value must be a string.")
        if not self.pattern.fullmatch(value):
            raise ValueError(self.message)


class IdentifierValidator(RegexValidator):
    """
    Accepts names that can be written into a statement without quoting.
    """

    def __init__(self, message: str | None = None) -> None:
        super().__init__(BARE_IDENTIFIER_PATTERN, message)

    def __call__(self, value: Any) -> None:
        if isinstance(value, str) and not value:
            raise ValueError("Identifier must not be blank.")
        if isinstance(value, str) and not self.pattern.fullmatch(value):
            raise ValueError(f"Identifier {value!r} must match {BARE_IDENTIFIER_PATTERN}.")
        super().__call__(value)


class TypeKeywordValidator(RegexValidator):
    def __init__(self) -> None:
        super().__init__(TYPE_KEYWORD_PATTERN)

    def __call__(self, value: Any) -> None:
        if isinstance(value, str) and not self.pattern.fullmatch(value):
            raise ValueError(f"Type keyword {value!r} is not a recognised type declaration.")
        super().__call__(value)


validate_identifier = IdentifierValidator()
validate_type_keyword = TypeKeywordValidator()


def is_bare_identifier(value: str) -> bool:
    return bool(re.fullmatch(BARE_IDENTIFIER_PATTERN, value))
