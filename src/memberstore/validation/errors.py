"""
Validation error raised for invalid schema definitions.
"""

from __future__ import annotations

from typing import Dict, List, Mapping


class ValidationError(Exception):
    """
    Aggregated validation error mapping each offending element to its messages.
    """

    def __init__(self, errors: Mapping[str, List[str]]) -> None:
        self.errors: Dict[str, List[str]] = {
            key: list(messages) for key, messages in errors.items()
        }
        message = self._format_message()
        super().__init__(message)

    def _format_message(self) -> str:
        segments = []
        for key, messages in self.errors.items():
            prefix = key if key != "__all__" else "definition"
            combined = "; ".join(messages)
            segments.append(f"{prefix}: {combined}")
        return "; ".join(segments)

    @classmethod
    def single(cls, key: str, message: str) -> "ValidationError":
        return cls({key: [message]})

    def messages_for(self, key: str) -> List[str]:
        return list(self.errors.get(key, ()))
