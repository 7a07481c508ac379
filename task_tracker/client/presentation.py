from datetime import date

from task_tracker.tasks.schemas import Task, TaskStatus

STATUS_LABELS: dict[TaskStatus, str] = {
    TaskStatus.TODO: "To Do",
    TaskStatus.IN_PROGRESS: "In Progress",
    TaskStatus.DONE: "Done",
}

MONTH_ABBREVIATIONS = (
    "Jan",
    "Feb",
    "Mar",
    "Apr",
    "May",
    "Jun",
    "Jul",
    "Aug",
    "Sep",
    "Oct",
    "Nov",
    "Dec",
)


def is_overdue(task: Task, today: date | None = None) -> bool:
    if task.due_date is None or task.status == TaskStatus.DONE:
        return False
    return task.due_date < (today or date.today())


def format_due_date(due_date: date) -> str:
    """Render a due date as shown on task cards, e.g. ``Nov 1, 2024``."""
    return f"{MONTH_ABBREVIATIONS[due_date.month - 1]} {due_date.day}, {due_date.year}"


def status_label(status: TaskStatus) -> str:
    return STATUS_LABELS[status]
