"""DebouncedCommitter — coalesce bursts of value changes into one delayed commit."""

from __future__ import annotations

import logging
from collections.abc import Callable
from enum import Enum, auto

from PyQt6.QtCore import QObject, QTimer, pyqtSignal

log = logging.getLogger(__name__)


class _State(Enum):
    IDLE = auto()
    PENDING = auto()


class DebouncedCommitter(QObject):
    """Delays a commit callable and hands it only the latest scheduled value.

    The first :meth:`schedule` call of a burst starts a single-shot timer;
    later calls before it fires only replace the pending value.  With
    *restart_on_schedule* every call restarts the timer instead, so the
    commit happens *delay* after the last call of the burst.

    The timer is a child of this object and is destroyed with it, which
    drops any commit still pending.

    Signals
    -------
    committed(str)
        Emitted after the commit callable returned for *value*.
    """

    committed = pyqtSignal(str)

    def __init__(self, parent: QObject | None = None, *, restart_on_schedule: bool = False) -> None:
        super().__init__(parent)
        self._restart_on_schedule = restart_on_schedule
        self._state: _State = _State.IDLE
        self._pending_value = ""
        self._commit_fn: Callable[[str], object] | None = None

        self._timer = QTimer(self)
        self._timer.setSingleShot(True)
        self._timer.timeout.connect(self._fire)

    @property
    def is_pending(self) -> bool:
        return self._state is _State.PENDING

    @property
    def pending_value(self) -> str | None:
        if self._state is _State.PENDING:
            return self._pending_value
        return None

    def schedule(self, value: str, delay: int, commit_fn: Callable[[str], object]) -> None:
        """Commit *value* through *commit_fn* after *delay* milliseconds."""
        self._pending_value = value
        self._commit_fn = commit_fn
        if self._state is _State.IDLE:
            self._state = _State.PENDING
            self._timer.start(max(0, delay))
            log.debug("Scheduled commit of %r in %d ms", value, delay)
        elif self._restart_on_schedule:
            self._timer.start(max(0, delay))

    def _fire(self) -> None:
        if self._state is not _State.PENDING or self._commit_fn is None:
            return
        value = self._pending_value
        commit_fn = self._commit_fn
        try:
            commit_fn(value)
        except Exception:  # noqa: BLE001
            log.exception("Commit of %r failed", value)
            return
        finally:
            self._state = _State.IDLE
            self._pending_value = ""
            self._commit_fn = None
        self.committed.emit(value)
