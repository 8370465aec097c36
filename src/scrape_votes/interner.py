"""Dense integer ids for voter and tag names."""

from __future__ import annotations


class Interner:
    """Assigns sequential ids to names, starting at 0, on first sight."""

    def __init__(self) -> None:
        self._ids: dict[str, int] = {}

    def get(self, name: str) -> int:
        """Return the id for name, assigning the next free one if unseen."""
        existing = self._ids.get(name)
        if existing is not None:
            return existing
        new_id = len(self._ids)
        self._ids[name] = new_id
        return new_id

    def names(self) -> dict[str, int]:
        """Return a copy of the name to id mapping."""
        return dict(self._ids)

    def __len__(self) -> int:
        return len(self._ids)

    def __contains__(self, name: object) -> bool:
        return name in self._ids
