from typing import FrozenSet, Iterable, Set


class ExpandedPanels:
    """Course titles whose accordion panel is open. Owned by PortalState; not persisted."""

    def __init__(self, titles: Iterable[str] = ()):
        self._open: Set[str] = set(titles)

    def __contains__(self, title):
        return title in self._open

    def __len__(self):
        return len(self._open)

    def snapshot(self) -> FrozenSet[str]:
        return frozenset(self._open)

    def toggle(self, title: str) -> bool:
        """Flip one panel; returns True if it is now open."""
        if title in self._open:
            self._open.discard(title)
            return False
        self._open.add(title)
        return True

    def reset(self, titles: Iterable[str] = ()):
        self._open = set(titles)

    def clear(self):
        self._open = set()
