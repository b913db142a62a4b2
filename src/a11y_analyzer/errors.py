"""Exception types raised by a11y_analyzer."""

from __future__ import annotations


class A11yError(Exception):
    """Base class for all analyzer errors."""


class ConfigError(A11yError):
    """Settings could not be loaded or name something that does not exist."""


class TreeShapeError(A11yError):
    """A node lacks fields its dialect requires."""
