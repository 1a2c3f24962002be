"""Ports: extension points implemented outside the domain."""

from stylecheck.domain.ports.reporter import ReporterProtocol

__all__ = ["ReporterProtocol"]
