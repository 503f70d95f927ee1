"""Task identifier generation."""

from __future__ import annotations

import time
import uuid


def generate_task_id() -> str:
    """Return a fresh task id.

    A random UUID4 when the OS provides a secure random source, otherwise
    the current time in milliseconds. The fallback is not collision-free.
    """
    try:
        return str(uuid.uuid4())
    except NotImplementedError:
        return str(int(time.time() * 1000))
