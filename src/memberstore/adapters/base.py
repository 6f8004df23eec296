"""
Adapter protocol definitions and connection configuration for memberstore.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Any, Protocol, Sequence
from urllib.parse import parse_qs, urlparse

from ..dialects.base import Dialect

SQLITE_SCHEME = "sqlite"
DEFAULT_TIMEOUT = 5.0


class AdapterError(RuntimeError):
    """Base error for adapter-related failures."""


class AdapterConfigurationError(AdapterError):
    """Raised when configuration values are invalid."""


class AdapterConnectionError(AdapterError):
    """Raised when opening or using a connection fails."""


class AdapterExecutionError(AdapterError):
    """Raised when the engine rejects a statement."""

    def __init__(self, message: str, *, sql: str | None = None) -> None:
        super().__init__(message)
        self.sql = sql


class AdapterTransactionError(AdapterError):
    """Raised when transaction operations fail."""


class MigrationAbortedError(AdapterTransactionError):
    """Raised when a multi-statement migration was rolled back."""


class UnsupportedSchemaError(AdapterError):
    """Raised when the live catalog holds a structure the schema model cannot describe."""


def _parse_float(value: str, *, key: str) -> float:
    try:
        return float(value)
    except ValueError as exc:
        raise AdapterConfigurationError(f"Invalid float value for '{key}': {value!r}") from exc


def _pop_float(query: dict[str, str], key: str) -> float | None:
    if key not in query:
        return None
    return _parse_float(query.pop(key), key=key)


@dataclass
class ConnectionConfig:
    """
    Normalized connection configuration for a store file.

    ``url`` is either a plain file path or a ``sqlite:///<path>`` DSN.
    """

    url: str
    timeout: float | None = None
    source: str | None = None

    @classmethod
    def from_dsn(cls, dsn: str, **kwargs: Any) -> "ConnectionConfig":
        """
        Build a connection config by parsing the DSN string.
        """

        parsed = urlparse(dsn)
        if parsed.scheme != SQLITE_SCHEME:
            raise AdapterConfigurationError(
                f"Unsupported DSN scheme {parsed.scheme!r}; expected '{SQLITE_SCHEME}'."
            )
        query = {k: v[0] for k, v in parse_qs(parsed.query).items()}

        parsed_timeout = _pop_float(query, "timeout")

        if query:
            unknown = ", ".join(sorted(query))
            raise AdapterConfigurationError(f"Unknown DSN options: {unknown}")

        timeout = kwargs.pop("timeout", parsed_timeout)

        base, _, _ = dsn.partition("?")
        return cls(
            url=base,
            timeout=timeout,
            **kwargs,
        )

    @classmethod
    def from_env(cls, env_var: str, **kwargs: Any) -> "ConnectionConfig":
        """
        Build a config from an environment variable containing a DSN or path.
        """

        value = os.getenv(env_var)
        if not value:
            raise AdapterConfigurationError(f"Environment variable {env_var} is not set")
        if value.startswith(f"{SQLITE_SCHEME}:"):
            return cls.from_dsn(value, source=env_var, **kwargs)
        return cls(url=value, source=env_var, **kwargs)

    @property
    def path(self) -> str:
        prefix = f"{SQLITE_SCHEME}:///"
        if self.url.startswith(prefix):
            return self.url[len(prefix) :]
        return self.url

    @property
    def effective_timeout(self) -> float:
        return self.timeout if self.timeout is not None else DEFAULT_TIMEOUT

    def descriptive_label(self) -> str:
        """
        Describe the config source for diagnostics.
        """

        if self.source:
            return f"{self.source} ({self.path})"
        return self.path


class DatabaseAdapter(Protocol):
    """
    Adapter interface exposing the engine operations used by higher layers.
    """

    dialect: Dialect

    def connect(self, config: ConnectionConfig) -> Any:
        """
        Open (or create) the store described by the configuration.
        """

    def close(self) -> None:
        """
        Close underlying resources. Implementations should be idempotent.
        """

    @property
    def is_open(self) -> bool:
        """
        Whether a connection is currently held.
        """

    def execute(self, sql: str, params: Sequence[Any] | None = None) -> Any:
        """
        Execute a single SQL statement returning a cursor-like object.
        """

    def begin(self) -> None:
        """
        Start a transaction.
        """

    def commit(self) -> None:
        """
        Commit the current transaction.
        """

    def rollback(self) -> None:
        """
        Roll back the current transaction.
        """

    def serialize(self) -> bytes:
        """
        Return the engine's serialization of the main database.
        """
