"""Database settings read from the environment."""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass, field

from sqlalchemy import create_engine
from sqlalchemy.engine import URL, Engine


class ConfigError(RuntimeError):
    """Raised when a required setting is missing or malformed."""


@dataclass(frozen=True)
class DBConfig:
    host: str
    user: str
    password: str = field(repr=False)
    name: str
    port: str

    def connection_string(self) -> str:
        return (
            f"host={self.host} port={self.port} user={self.user} "
            f"password={self.password} dbname={self.name} sslmode=disable"
        )

    def url(self) -> URL:
        try:
            port = int(self.port)
        except ValueError as exc:
            raise ConfigError(f"DB_PORT is not a valid port: {self.port!r}") from exc
        return URL.create(
            "postgresql",
            username=self.user,
            password=self.password,
            host=self.host,
            port=port,
            database=self.name,
            query={"sslmode": "disable"},
        )


_REQUIRED = (
    ("DB_HOST", "host"),
    ("DB_USER", "user"),
    ("DB_PASSWORD", "password"),
    ("DB_NAME", "name"),
    ("DB_PORT", "port"),
)


def get_db_config(environ: Mapping[str, str] | None = None) -> DBConfig:
    """Read the settings, raising ConfigError for the first one unset."""
    env = os.environ if environ is None else environ
    values = {}
    for variable, attribute in _REQUIRED:
        if not env.get(variable):
            raise ConfigError(f"{variable} is not set")
        values[attribute] = env[variable]
    return DBConfig(**values)


def get_db(environ: Mapping[str, str] | None = None) -> Engine:
    return create_engine(get_db_config(environ).url())