"""Exceptions raised by the swerve telemetry pipeline."""

from __future__ import annotations


class SwerveDashError(Exception):
    """Base class for errors raised by swerve_dash."""


class InvalidConfig(SwerveDashError, ValueError):
    """A normalization bound is not a finite positive number."""


class MalformedPayload(SwerveDashError, ValueError):
    """A value tagged with a recognized shape does not match that shape."""
