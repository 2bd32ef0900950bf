"""CLI package.

The ``cli`` sub-package contains the Click application. It turns command
line arguments into instructions and hands them to the core store; it
holds no list logic of its own.
"""
from __future__ import annotations
