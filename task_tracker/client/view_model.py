import logging
import unicodedata
from enum import Enum
from typing import Awaitable

from task_tracker.client.exceptions import TaskClientException
from task_tracker.client.service import TaskClient
from task_tracker.tasks.schemas import WRITABLE_FIELDS, Task, TaskFields, TaskStatus

logger = logging.getLogger(__name__)

ALL = "ALL"

STATUS_ORDER: dict[TaskStatus, int] = {
    TaskStatus.TODO: 1,
    TaskStatus.IN_PROGRESS: 2,
    TaskStatus.DONE: 3,
}


class SortOption(str, Enum):
    STATUS = "status"
    DUE_DATE = "dueDate"
    TITLE = "title"


def matches_search(task: Task, query: str) -> bool:
    query = query.lower()
    if query in task.title.lower():
        return True
    return bool(task.description) and query in task.description.lower()


def title_collation_key(title: str) -> tuple[str, str, str]:
    """Order titles the way a browser's ``localeCompare`` does.

    Titles compare by base letters first, ignoring accents and case. Accents
    break ties next, then lowercase sorts ahead of uppercase.
    """
    decomposed = unicodedata.normalize("NFKD", title)
    base = "".join(char for char in decomposed if not unicodedata.combining(char))
    return base.casefold(), decomposed.casefold(), title.swapcase()


def sort_tasks(tasks: list[Task], sort_by: SortOption) -> list[Task]:
    # sorted() is stable, so equal keys keep their incoming order
    if sort_by == SortOption.STATUS:
        return sorted(tasks, key=lambda task: STATUS_ORDER[task.status])
    if sort_by == SortOption.DUE_DATE:
        with_due_date = sorted(
            (task for task in tasks if task.due_date is not None),
            key=lambda task: task.due_date,
        )
        return with_due_date + [task for task in tasks if task.due_date is None]
    if sort_by == SortOption.TITLE:
        return sorted(tasks, key=lambda task: title_collation_key(task.title))
    raise ValueError(f"Unsupported sort option: {sort_by}")


def filter_and_sort_tasks(
    tasks: list[Task],
    *,
    search_query: str = "",
    status_filter: TaskStatus | str = ALL,
    category_filter: str = ALL,
    sort_by: SortOption = SortOption.STATUS,
) -> list[Task]:
    """Derive the visible task list from the full collection.

    Search, status filter and category filter are applied in that order,
    then the result is sorted. The input list is never modified.
    """
    result = list(tasks)

    if search_query.strip():
        result = [task for task in result if matches_search(task, search_query)]

    if status_filter != ALL:
        result = [task for task in result if task.status == status_filter]

    if category_filter != ALL:
        result = [task for task in result if task.category == category_filter]

    return sort_tasks(result, SortOption(sort_by))


def get_categories(tasks: list[Task]) -> list[str]:
    return sorted({task.category for task in tasks if task.category})


class TaskListViewModel:
    def __init__(self, client: TaskClient):
        self.client = client

        self.tasks: list[Task] = []
        self.loading = True
        self.error: str | None = None
        self.success_message: str | None = None

        self.search_query = ""
        self.status_filter: TaskStatus | str = ALL
        self.category_filter = ALL
        self.sort_by = SortOption.STATUS

    @property
    def visible_tasks(self) -> list[Task]:
        return filter_and_sort_tasks(
            self.tasks,
            search_query=self.search_query,
            status_filter=self.status_filter,
            category_filter=self.category_filter,
            sort_by=self.sort_by,
        )

    @property
    def categories(self) -> list[str]:
        return get_categories(self.tasks)

    @property
    def has_active_filters(self) -> bool:
        return bool(
            self.search_query
            or self.status_filter != ALL
            or self.category_filter != ALL
        )

    @property
    def summary(self) -> str:
        return f"Showing {len(self.visible_tasks)} of {len(self.tasks)} tasks"

    @property
    def empty_message(self) -> str:
        if self.has_active_filters:
            return "No tasks match your filters"
        return "No tasks yet. Create your first task!"

    async def load_tasks(self) -> None:
        self.loading = True
        self.error = None
        try:
            self.tasks = await self.client.get_all_tasks()
        except TaskClientException as e:
            logger.error(f"Failed to load tasks: {e}")
            self.error = str(e)
        finally:
            self.loading = False

    async def _mutate(self, request: Awaitable[object], success_message: str) -> bool:
        try:
            await request
        except TaskClientException as e:
            logger.error(e)
            self.error = str(e)
            return False

        await self.load_tasks()
        self.success_message = success_message
        return True

    async def create_task(self, fields: TaskFields) -> bool:
        return await self._mutate(
            self.client.create_task(fields), "Task created successfully"
        )

    async def update_task(self, task_id: int, fields: TaskFields) -> bool:
        return await self._mutate(
            self.client.update_task(task_id, fields), "Task updated successfully"
        )

    async def change_status(self, task: Task, status: TaskStatus) -> bool:
        # PUT replaces every writable field, so resend the rest unchanged
        fields = TaskFields.model_validate(
            {**task.model_dump(include=WRITABLE_FIELDS), "status": status}
        )
        return await self._mutate(
            self.client.update_task(task.id, fields), "Status updated successfully"
        )

    async def delete_task(self, task_id: int) -> bool:
        return await self._mutate(
            self.client.delete_task(task_id), "Task deleted successfully"
        )
