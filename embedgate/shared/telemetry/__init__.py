"""Telemetry: logging setup."""

from embedgate.shared.telemetry.logging import setup_logging

__all__ = ["setup_logging"]
