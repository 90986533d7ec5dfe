"""Observability module for Sortium."""

from sortium.observability.logging import ContextLogger, setup_logging

__all__ = ["ContextLogger", "setup_logging"]
