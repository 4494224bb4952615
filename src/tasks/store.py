from datetime import datetime
import logging
import threading

from src.common.exceptions import ResourceNotFoundException, ResourceType
from src.tasks.schemas import Task

logger = logging.getLogger(__name__)


class TaskStore:
    """In-memory task storage keyed by sequential integer ids.

    A single lock serializes every operation. Tasks handed to callers are
    deep copies, so mutating them never touches the stored state.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._tasks: dict[int, Task] = {}
        self._next_id = 1

    def __len__(self) -> int:
        with self._lock:
            return len(self._tasks)

    def create_task(
        self, text: str, tags: list[str], due: datetime | None = None
    ) -> int:
        with self._lock:
            task_id = self._next_id
            self._tasks[task_id] = Task(id=task_id, text=text, tags=list(tags), due=due)
            self._next_id += 1
        logger.debug(f"Created task {task_id}")
        return task_id

    def get_task(self, task_id: int) -> Task:
        with self._lock:
            task = self._tasks.get(task_id)
            if task is None:
                raise ResourceNotFoundException(ResourceType.TASK, str(task_id))
            return task.model_copy(deep=True)

    def get_all_tasks(self) -> list[Task]:
        with self._lock:
            return self._copy_matching(lambda task: True)

    def delete_task(self, task_id: int) -> None:
        with self._lock:
            if task_id not in self._tasks:
                raise ResourceNotFoundException(ResourceType.TASK, str(task_id))
            del self._tasks[task_id]
        logger.debug(f"Deleted task {task_id}")

    def delete_all_tasks(self) -> None:
        with self._lock:
            self._tasks.clear()

    def get_tasks_by_tag(self, tag: str) -> list[Task]:
        with self._lock:
            return self._copy_matching(lambda task: tag in task.tags)

    def get_tasks_by_due_date(self, year: int, month: int, day: int) -> list[Task]:
        def is_due(task: Task) -> bool:
            return task.due is not None and (
                task.due.year,
                task.due.month,
                task.due.day,
            ) == (year, month, day)

        with self._lock:
            return self._copy_matching(is_due)

    def _copy_matching(self, predicate) -> list[Task]:
        # Caller must hold the lock.
        return [
            task.model_copy(deep=True)
            for task_id, task in sorted(self._tasks.items())
            if predicate(task)
        ]
