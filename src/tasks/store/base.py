from abc import ABC, abstractmethod
from datetime import datetime

from src.tasks.schemas import Task


class TaskStore(ABC):
    @abstractmethod
    def list_tasks(self) -> list[Task]:
        pass

    @abstractmethod
    def create_task(self, title: str, description: str, timestamp: datetime) -> Task:
        pass

    @abstractmethod
    def delete_task(self, task_id: int) -> None:
        pass

    @abstractmethod
    def ping(self) -> None:
        pass

    @abstractmethod
    def close(self) -> None:
        pass
