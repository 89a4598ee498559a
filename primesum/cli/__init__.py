"""Command-line interface for primesum."""

from .app import app

__all__ = ["app"]
