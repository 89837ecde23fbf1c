"""Argument guards shared by every combinator."""

from switchyard.assertions.guards import require

__all__ = ['require']
