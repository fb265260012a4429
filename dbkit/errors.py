"""Exceptions raised by dbkit."""

from __future__ import annotations


class DbKitError(Exception):
    """Base exception for all dbkit errors."""


class ConfigurationError(DbKitError, ValueError):
    """A configuration value or key layout is malformed.

    Raised synchronously while configuration is being assembled so that
    misconfiguration surfaces before any connection or migration runner
    starts.
    """
