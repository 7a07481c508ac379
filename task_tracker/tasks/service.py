import logging

from task_tracker.common.current_datetime import get_current_datetime
from task_tracker.common.exceptions import ResourceNotFoundException, ResourceType
from task_tracker.tasks.schemas import Task, TaskDraft, TaskFields
from task_tracker.tasks.store.base import TaskStore

logger = logging.getLogger(__name__)


class TaskService:
    def __init__(self, task_store: TaskStore):
        self.task_store = task_store

    def _writable_fields(self, draft: TaskDraft) -> TaskFields:
        return TaskFields.model_validate(draft.model_dump(exclude={"id"}))

    def list_tasks(self) -> list[Task]:
        return self.task_store.list_tasks()

    def get_task(self, task_id: int) -> Task:
        if not self.task_store.task_exists(task_id):
            raise ResourceNotFoundException(ResourceType.TASK, str(task_id))

        return self.task_store.get_task(task_id)

    def create_task(self, task_input: TaskDraft) -> Task:
        if task_input.id is not None:
            logger.debug(f"Ignoring client-supplied id {task_input.id}")

        task = self.task_store.create_task(
            fields=self._writable_fields(task_input),
            timestamp=get_current_datetime(),
        )
        logger.info(f"Created task {task.id}")
        return task

    def update_task(self, task_id: int, task_input: TaskDraft) -> Task:
        """Replace every writable field of the task with the values in ``task_input``.

        Fields left out of the request fall back to their defaults (``None``,
        or ``TODO`` for status) instead of keeping their stored value.
        """
        if not self.task_store.task_exists(task_id):
            raise ResourceNotFoundException(ResourceType.TASK, str(task_id))

        task = self.task_store.update_task(
            task_id=task_id,
            fields=self._writable_fields(task_input),
            timestamp=get_current_datetime(),
        )
        logger.info(f"Updated task {task_id}")
        return task

    def delete_task(self, task_id: int) -> None:
        if not self.task_store.task_exists(task_id):
            raise ResourceNotFoundException(ResourceType.TASK, str(task_id))

        self.task_store.delete_task(task_id)
        logger.info(f"Deleted task {task_id}")
