"""Keyboard input polled once per frame."""

from __future__ import annotations

from collections.abc import Callable


class Input:
    """Holds the key code pressed during the current frame, or 0 for none."""

    def __init__(self, poll: Callable[[], int | None] | None = None) -> None:
        self._poll = poll
        self.key_code = 0

    def tick(self) -> None:
        """Read the pending key, if any, into ``key_code``."""
        pending = self._poll() if self._poll is not None else None
        self.key_code = pending or 0