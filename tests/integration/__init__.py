"""Integration tests.

Integration tests drive the full CLI against real snapshot files in a
temporary directory. They are kept in a separate directory so they can
be excluded from the fast unit-test run with ``pytest tests/unit/``.
"""
from __future__ import annotations
