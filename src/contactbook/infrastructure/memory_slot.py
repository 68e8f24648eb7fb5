"""In-memory implementation of ContactSlot (no disk)."""

from contactbook.domain import PersistenceError


class InMemorySlot:
    """Stores slot values in a dict. Set fail_writes to simulate a failing device write."""

    def __init__(self, initial: dict[str, bytes] | None = None) -> None:
        self._values: dict[str, bytes] = dict(initial or {})
        self.fail_writes = False
        self.writes = 0

    def read(self, key: str) -> bytes | None:
        return self._values.get(key)

    def write(self, key: str, data: bytes) -> None:
        if self.fail_writes:
            raise PersistenceError(f"Write to slot {key!r} failed.")
        self._values[key] = bytes(data)
        self.writes += 1
