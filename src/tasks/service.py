from datetime import tzinfo

from src.common.current_datetime import get_current_datetime
from src.tasks.schemas import Task, TaskCreate
from src.tasks.store.base import TaskStore


class TaskService:
    def __init__(self, *, task_store: TaskStore, timezone: tzinfo) -> None:
        self.task_store = task_store
        self.timezone = timezone

    def list_tasks(self) -> list[Task]:
        return self.task_store.list_tasks()

    def create_task(self, task_input: TaskCreate) -> Task:
        timestamp = get_current_datetime(self.timezone)

        return self.task_store.create_task(
            title=task_input.title,
            description=task_input.description,
            timestamp=timestamp,
        )

    def delete_task(self, task_id: int) -> int:
        self.task_store.delete_task(task_id)
        return task_id
