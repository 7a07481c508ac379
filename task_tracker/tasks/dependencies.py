from fastapi import Depends

from task_tracker.tasks.service import TaskService
from task_tracker.tasks.store.base import TaskStore
from task_tracker.tasks.store.dependencies import get_task_store


def get_task_service(
    task_store: TaskStore = Depends(get_task_store),
) -> TaskService:
    return TaskService(task_store=task_store)
