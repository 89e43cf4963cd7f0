"""Bookkeeping of the open image windows."""

from __future__ import annotations

from typing import Dict, Iterator, List, Optional

from .geometry import WinType
from .window import ImageWindow


class WindowRegistry:
    """The open windows in creation order, also looked up by window id."""

    def __init__(self) -> None:
        self._windows: List[ImageWindow] = []
        self._by_id: Dict[int, ImageWindow] = {}

    def register(self, window: ImageWindow) -> None:
        """Add ``window`` to the end of the list and index it by its id."""
        self._windows.append(window)
        self._by_id[window.win_id] = window

    def unregister(self, window: ImageWindow) -> None:
        """Remove ``window`` from the list and drop its id from the index."""
        self._windows = [w for w in self._windows if w is not window]
        self._by_id.pop(window.win_id, None)

    def first_of_type(self, win_type: WinType) -> Optional[ImageWindow]:
        """Return the earliest registered window of ``win_type``, if any."""
        return next((w for w in self._windows if w.type == win_type), None)

    def find(self, window_id: int) -> Optional[ImageWindow]:
        """Return the window registered under ``window_id``, if any."""
        return self._by_id.get(window_id)

    def destroy_all(self) -> List[ImageWindow]:
        """Unregister every window, newest first, releasing its image.

        Returns the windows in the order they were destroyed.
        """
        destroyed = list(reversed(self._windows))
        for window in destroyed:
            self.unregister(window)
            window.free_image()
            window.visible = False
        return destroyed

    def __len__(self) -> int:
        return len(self._windows)

    def __iter__(self) -> Iterator[ImageWindow]:
        return iter(list(self._windows))