from typing import Iterator


class NamePool:
    """
    Bidirectional mapping between names and small dense integer ids.

    Ids are handed out in first-seen order starting at 0 and are never
    reused or removed, so an id stays valid for the lifetime of the pool.
    """
    __slots__ = ("_names", "_ids")

    def __init__(self) -> None:
        self._names: list[str] = []
        self._ids: dict[str, int] = {}

    def intern(self, name: str) -> int:
        """Return the id of `name`, adding it to the pool if it is new."""
        existing = self._ids.get(name)
        if existing is not None:
            return existing
        new_id = len(self._names)
        self._names.append(name)
        self._ids[name] = new_id
        return new_id

    def resolve(self, name_id: int) -> str:
        """Return the name for `name_id`. Raises IndexError for ids this pool never issued."""
        if name_id < 0 or name_id >= len(self._names):
            raise IndexError(f"NamePool: no name with id {name_id} (pool size {len(self._names)})")
        return self._names[name_id]

    def get_id(self, name: str) -> int | None:
        return self._ids.get(name)

    def __getitem__(self, name_id: int) -> str:
        return self.resolve(name_id)

    def __contains__(self, name: object) -> bool:
        return name in self._ids

    def __len__(self) -> int:
        return len(self._names)

    def __iter__(self) -> Iterator[str]:
        return iter(self._names)

    def __repr__(self) -> str:
        return f"NamePool({self._names!r})"
