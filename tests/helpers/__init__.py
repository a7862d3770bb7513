"""Test helper modules for content cache testing.

- fake_clock: Controllable time source for expiry tests
"""

from .fake_clock import FakeClock

__all__ = ["FakeClock"]
