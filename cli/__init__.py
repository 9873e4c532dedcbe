"""Command line interface for station range alerts."""

from importlib import import_module
from types import ModuleType


def __getattr__(name: str) -> ModuleType:
    # ``cli.app`` stays the module; the Typer instance is ``cli.app.app``.
    if name == "app":
        return import_module("cli.app")
    raise AttributeError(name)


__all__ = []
