"""Trickster CLI configuration.

Typed settings for the scaffolder and the development server launcher.  All
settings use Pydantic v2 models so bad values are rejected at construction
time, and defaults can be overridden from environment variables.
"""

from __future__ import annotations

import os
from typing import Any

from pydantic import BaseModel, Field, ValidationError

from trickster_cli.errors import UsageError

DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT = 5678


class ServerConfig(BaseModel):
    """Network binding and reload behaviour for ``trickster server``."""

    port: int = Field(default=DEFAULT_PORT, ge=1, le=65535)
    host: str = Field(default=DEFAULT_HOST, min_length=1)
    reload: bool = Field(default=False, description="Watch sources and restart on change")

    @property
    def url(self) -> str:
        """Human-facing URL the server will listen on."""
        return f"http://{self.host}:{self.port}"


class Config(BaseModel):
    """Global Trickster configuration.

    Instances are created once by the CLI entry point and passed to the
    command handlers that need them.
    """

    entry_point: str = Field(default="app.py", description="File that marks a project root")
    app_attribute: str = Field(default="app", description="ASGI app variable in the entry point")
    server_program: str = Field(default="uvicorn")
    reload_dirs: list[str] = Field(default_factory=lambda: ["lib", "templates"])
    server: ServerConfig = Field(default_factory=ServerConfig)

    @property
    def app_target(self) -> str:
        """``module:attribute`` import string handed to the server program."""
        module = self.entry_point.rsplit(".", 1)[0]
        return f"{module}:{self.app_attribute}"

    @classmethod
    def from_env(cls) -> "Config":
        """Build a ``Config`` from environment variables.

        Recognised variables (all optional):
            TRICKSTER_HOST, TRICKSTER_PORT, TRICKSTER_SERVER.

        Raises:
            UsageError: If TRICKSTER_PORT is not an integer in 1-65535.
        """
        server_kwargs: dict[str, Any] = {}
        if os.environ.get("TRICKSTER_HOST"):
            server_kwargs["host"] = os.environ["TRICKSTER_HOST"]
        raw_port = os.environ.get("TRICKSTER_PORT")
        if raw_port:
            try:
                server_kwargs["port"] = int(raw_port)
            except ValueError as exc:
                raise UsageError(f"Invalid TRICKSTER_PORT: {raw_port!r} is not an integer") from exc

        try:
            server = ServerConfig(**server_kwargs)
        except ValidationError as exc:
            raise UsageError(f"Invalid TRICKSTER_PORT: {exc.errors()[0]['msg']}") from exc

        kwargs: dict[str, Any] = {"server": server}
        if os.environ.get("TRICKSTER_SERVER"):
            kwargs["server_program"] = os.environ["TRICKSTER_SERVER"]

        return cls(**kwargs)
