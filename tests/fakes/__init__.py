"""Shared test doubles: re-export the scripted random source."""

from __future__ import annotations

from testnumbers.randomness import ScriptedRandomSource

# Prefix 1,0,0,0,0,0,0,6 has weighted sum 21 -> remainder 10, no check digit.
UNREACHABLE_PREFIX = [1, 0, 0, 0, 0, 0, 0, 6]
# Prefix 1..8 has weighted sum 156 -> check digit 2.
REACHABLE_PREFIX = [1, 2, 3, 4, 5, 6, 7, 8]

__all__ = ["REACHABLE_PREFIX", "ScriptedRandomSource", "UNREACHABLE_PREFIX"]
