"""template-a11y: accessibility checks over JSX and template-element trees."""

from __future__ import annotations

__version__ = "0.4.0"
