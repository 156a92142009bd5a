"""Shared type aliases and constants used across the graph package."""
from __future__ import annotations

import sys
from typing import TypeAlias

VertexIndex: TypeAlias = int
Weight: TypeAlias = int

UNSET: VertexIndex = -1          # predecessor / label not assigned
DEFAULT_WEIGHT: Weight = 1
UNREACHABLE: Weight = sys.maxsize  # reported distance for "no path"
