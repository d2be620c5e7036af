"""Undo/redo history that stores each edit as the differing middle of two texts."""

from __future__ import annotations

from dataclasses import dataclass
from itertools import takewhile

HISTORY_MAX_SIZE = 200


@dataclass(frozen=True)
class IntegralChange:
    """One edit: at *begin_change_pos* the text *before* was replaced by *after*."""

    begin_change_pos: int
    before: str
    after: str


def _common_prefix_length(first: str, second: str) -> int:
    return sum(1 for _ in takewhile(lambda pair: pair[0] == pair[1], zip(first, second)))


class ChangeManager:
    """Keeps the history of text states and moves through it."""

    def __init__(self, file_state: str = "") -> None:
        self._history: list[IntegralChange] = []
        self._state = file_state
        self._current = -1

    @property
    def history(self) -> tuple[IntegralChange, ...]:
        return tuple(self._history)

    @property
    def current_state(self) -> str:
        return self._state

    @property
    def current_index(self) -> int:
        """Index of the last applied change, -1 when there is none."""
        return self._current

    def is_file_changed(self, new_state: str) -> bool:
        return self._state != new_state

    def _limit_check(self) -> None:
        if len(self._history) > HISTORY_MAX_SIZE:
            self._history.pop(0)
            self._current -= 1

    def _remove_history(self) -> None:
        # Changes undone but not redone are dropped once a new change arrives.
        if self._history:
            del self._history[self._current + 1:]

    def write_change(self, new_state: str) -> None:
        """Record the difference between the current state and *new_state*."""
        if self._state == new_state:
            return
        self._limit_check()
        self._remove_history()

        old_state = self._state
        prefix = _common_prefix_length(old_state, new_state)
        suffix = _common_prefix_length(old_state[::-1], new_state[::-1])
        old_end = len(old_state) - suffix
        new_end = len(new_state) - suffix

        if prefix > old_end or prefix > new_end:
            before, after = old_state[prefix:], new_state[prefix:]
        else:
            before, after = old_state[prefix:old_end], new_state[prefix:new_end]

        self._history.append(IntegralChange(prefix, before, after))
        self._state = new_state
        self._current = len(self._history) - 1

    def undo(self) -> str:
        """Revert the last applied change; the first recorded change stays applied."""
        if self._current <= 0:
            return self._state
        change = self._history[self._current]
        self._current -= 1
        pos = change.begin_change_pos
        self._state = self._state[:pos] + change.before + self._state[pos + len(change.after):]
        return self._state

    def redo(self) -> str:
        """Re-apply the next change, if any."""
        if self._current >= len(self._history) - 1:
            return self._state
        self._current += 1
        change = self._history[self._current]
        pos = change.begin_change_pos
        self._state = self._state[:pos] + change.after + self._state[pos + len(change.before):]
        return self._state

    def cursor_pos_prev(self) -> int:
        """Position of the change just undone (0 with an empty history)."""
        if not self._history:
            return 0
        index = min(self._current + 1, len(self._history) - 1)
        return self._history[index].begin_change_pos

    def cursor_pos_next(self) -> int:
        """Position of the change just redone (0 with an empty history)."""
        if not self._history:
            return 0
        last = len(self._history) - 1
        index = last if self._current >= last else self._current + 1
        return self._history[index].begin_change_pos