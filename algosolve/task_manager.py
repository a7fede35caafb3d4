"""Priority-ordered task execution with editing and removal."""

from __future__ import annotations

import heapq
from dataclasses import dataclass
from itertools import count
from typing import Dict, Iterable, List, Sequence, Tuple


@dataclass(eq=False)
class Task:
    """A user's task with a priority."""

    user_id: int
    task_id: int
    priority: int


class TaskManager:
    """Runs tasks highest priority first; ties go to the larger task id.

    Adding a task id that is already present replaces the earlier task.
    """

    def __init__(self, tasks: Iterable[Sequence[int]] = ()) -> None:
        self._tasks: Dict[int, Task] = {}
        self._heap: List[Tuple[int, int, int, Task]] = []
        self._order = count()
        for user_id, task_id, priority in tasks:
            self.add(user_id, task_id, priority)

    def _schedule(self, task: Task) -> None:
        heapq.heappush(
            self._heap, (-task.priority, -task.task_id, next(self._order), task)
        )

    def add(self, user_id: int, task_id: int, priority: int) -> None:
        """Add a task for a user."""
        task = Task(user_id, task_id, priority)
        self._tasks[task_id] = task
        self._schedule(task)

    def edit(self, task_id: int, new_priority: int) -> None:
        """Change a task's priority; unknown task ids are ignored."""
        task = self._tasks.get(task_id)
        if task is None:
            return
        task.priority = new_priority
        self._schedule(task)

    def remove(self, task_id: int) -> None:
        """Drop a task; unknown task ids are ignored."""
        self._tasks.pop(task_id, None)

    def exec_top(self) -> int:
        """Run and drop the top task, returning its user id, or -1 when empty."""
        while self._heap:
            neg_priority, _, _, task = heapq.heappop(self._heap)
            current = self._tasks.get(task.task_id)
            if current is task and task.priority == -neg_priority:
                del self._tasks[task.task_id]
                return task.user_id
        return -1

    def __len__(self) -> int:
        return len(self._tasks)