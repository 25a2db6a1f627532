"""An array whose past states can be read back by snapshot id."""

from __future__ import annotations

from bisect import bisect_right


class SnapshotArray:
    """An integer array, initially all zeros, that records snapshots of its contents."""

    def __init__(self, length: int) -> None:
        self._snap_id = 0
        self._snap_ids: list[list[int]] = [[0] for _ in range(length)]
        self._values: list[list[int]] = [[0] for _ in range(length)]

    def __len__(self) -> int:
        return len(self._values)

    def _check_index(self, index: int) -> None:
        if not 0 <= index < len(self._values):
            raise IndexError(f"index {index} out of range")

    def set(self, index: int, val: int) -> None:
        """Set the element at ``index`` to ``val`` in the current state."""
        self._check_index(index)
        ids = self._snap_ids[index]
        if ids[-1] == self._snap_id:
            self._values[index][-1] = val
        else:
            ids.append(self._snap_id)
            self._values[index].append(val)

    def snap(self) -> int:
        """Take a snapshot and return its id."""
        taken = self._snap_id
        self._snap_id += 1
        return taken

    def get(self, index: int, snap_id: int) -> int:
        """Return the value at ``index`` as of snapshot ``snap_id``."""
        self._check_index(index)
        if snap_id < 0:
            raise ValueError(f"snapshot id must not be negative: {snap_id}")
        position = bisect_right(self._snap_ids[index], snap_id) - 1
        return self._values[index][position]