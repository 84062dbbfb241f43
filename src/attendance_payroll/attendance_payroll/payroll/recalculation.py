from __future__ import annotations

import logging
from collections import deque
from dataclasses import dataclass
from typing import Callable, Deque, Optional, Protocol, Tuple

from ..core.constants import DEFAULT_RECALC_FAILURES_KEPT, DEFAULT_RECALC_MAX_ATTEMPTS
from ..core.exceptions import DomainError

logger = logging.getLogger(__name__)

TaskKey = Tuple[str, int, int]


class RecalculationScheduler(Protocol):
    def schedule(self, employee_id: str, month: int, year: int) -> None:
        raise NotImplementedError


@dataclass
class RecalculationTask:
    employee_id: str
    month: int
    year: int
    attempts: int = 0
    last_error: Optional[str] = None

    @property
    def key(self) -> TaskKey:
        return (self.employee_id, self.month, self.year)


class RecalculationQueue(RecalculationScheduler):
    """Background payroll consistency pass after attendance/advance writes.

    Tasks are de-duplicated by (employee, month, year). `drain()` never raises:
    domain errors are recorded straight away, anything else is retried up to
    `max_attempts` before it lands in `failures`, which keeps only the most
    recent `max_failures` tasks.
    """

    def __init__(
        self,
        recalculate: Callable[[str, int, int], object],
        *,
        max_attempts: int = DEFAULT_RECALC_MAX_ATTEMPTS,
        auto_drain: bool = True,
        on_drain_start: Optional[Callable[[], None]] = None,
        max_failures: int = DEFAULT_RECALC_FAILURES_KEPT,
    ):
        self._recalculate = recalculate
        self._max_attempts = max(1, int(max_attempts))
        self._auto_drain = auto_drain
        self._on_drain_start = on_drain_start
        self._pending: Deque[RecalculationTask] = deque()
        self._draining = False
        self.failures: Deque[RecalculationTask] = deque(maxlen=max(1, int(max_failures)))

    def clear_failures(self) -> None:
        self.failures.clear()

    @property
    def pending(self) -> list[TaskKey]:
        return [t.key for t in self._pending]

    def schedule(self, employee_id: str, month: int, year: int) -> None:
        task = RecalculationTask(employee_id=str(employee_id), month=int(month), year=int(year))
        if task.key not in self.pending:
            self._pending.append(task)
        if self._auto_drain and not self._draining:
            self.drain()

    def drain(self) -> int:
        """Run queued tasks; returns how many completed successfully."""
        if self._draining:
            return 0
        self._draining = True
        done = 0
        try:
            if self._pending and self._on_drain_start:
                self._on_drain_start()
            while self._pending:
                task = self._pending.popleft()
                if self._run(task):
                    done += 1
        finally:
            self._draining = False
        return done

    def _run(self, task: RecalculationTask) -> bool:
        task.attempts += 1
        try:
            self._recalculate(task.employee_id, task.month, task.year)
            return True
        except DomainError as exc:
            task.last_error = str(exc)
            logger.error("Payroll recalculation rejected for %s %s/%s: %s", *task.key, exc)
            self.failures.append(task)
        except Exception as exc:
            task.last_error = str(exc)
            if task.attempts < self._max_attempts:
                logger.warning("Payroll recalculation attempt %s failed for %s %s/%s; retrying", task.attempts, *task.key)
                self._pending.append(task)
            else:
                logger.exception("Payroll recalculation failed for %s %s/%s", *task.key)
                self.failures.append(task)
        return False
