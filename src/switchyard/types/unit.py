"""Unit: the payload of a successful VoidResult."""

from __future__ import annotations

import msgspec

__all__ = ['Unit', 'UnitType']


class UnitType(msgspec.Struct, frozen=True, gc=False):
    """The type with a single value, `Unit`.

    Use the `Unit` constant instead of instantiating directly. All instances
    compare equal.
    """

    def __repr__(self) -> str:
        return 'Unit'


Unit: UnitType = UnitType()
"""Singleton marker for "no value"."""
