"""Trickster -- project scaffolding and dev-server CLI for Starlette apps."""

__version__ = "0.1.0"
