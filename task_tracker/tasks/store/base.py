from abc import ABC, abstractmethod
from datetime import datetime

from task_tracker.tasks.schemas import Task, TaskFields


class TaskStore(ABC):
    @abstractmethod
    def task_exists(self, task_id: int) -> bool:
        pass

    @abstractmethod
    def create_task(self, fields: TaskFields, timestamp: datetime) -> Task:
        pass

    @abstractmethod
    def get_task(self, task_id: int) -> Task:
        pass

    @abstractmethod
    def update_task(
        self,
        task_id: int,
        fields: TaskFields,
        timestamp: datetime,
    ) -> Task:
        pass

    @abstractmethod
    def delete_task(self, task_id: int) -> None:
        pass

    @abstractmethod
    def list_tasks(self) -> list[Task]:
        pass
