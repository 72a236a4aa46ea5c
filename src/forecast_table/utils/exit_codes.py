"""Centralized exit-code contract for all CLI commands.

Code  Meaning
----  -------
  0   Success — forecast fetched and rendered
  1   Rejected — the city is not one of the selectable cities
  2   Error — usage error, upstream failure, unwritable output
"""

from __future__ import annotations

from enum import IntEnum


class ExitCode(IntEnum):
    SUCCESS = 0
    REJECTED = 1
    ERROR = 2
