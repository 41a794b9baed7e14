"""
Identifier generation.

The model only needs a callable that returns a fresh string on every call.
Creation helpers accept one as ``id_generator``; generate_id is the default.
"""

from __future__ import annotations

import uuid
from collections.abc import Callable

IdGenerator = Callable[[], str]


def generate_id() -> str:
    """Return a new random identifier (UUID4 text)."""
    return str(uuid.uuid4())
