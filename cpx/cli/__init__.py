"""Command line interface for cpx."""

from .app import app, main


__all__ = ["app", "main"]
