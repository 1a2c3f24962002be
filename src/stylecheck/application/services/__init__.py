"""Application services."""

from stylecheck.application.services.style_checker import StyleChecker, check

__all__ = ["StyleChecker", "check"]
