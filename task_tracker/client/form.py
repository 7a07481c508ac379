from datetime import date

from task_tracker.tasks.schemas import (
    DESCRIPTION_MAX_LENGTH,
    TITLE_MAX_LENGTH,
    Task,
    TaskFields,
    TaskStatus,
)


class TaskForm:
    """State behind the create/edit task dialog."""

    def __init__(self, initial_task: Task | None = None):
        self.reset(initial_task)

    def reset(self, initial_task: Task | None = None) -> None:
        self.initial_task = initial_task
        if initial_task:
            self.title = initial_task.title
            self.description = initial_task.description or ""
            self.status = initial_task.status
            self.category = initial_task.category or ""
            self.due_date: date | None = initial_task.due_date
        else:
            self.title = ""
            self.description = ""
            self.status = TaskStatus.TODO
            self.category = ""
            self.due_date = None
        self.title_error = ""
        self.description_error = ""

    @property
    def is_editing(self) -> bool:
        return self.initial_task is not None

    @property
    def dialog_title(self) -> str:
        return "Edit Task" if self.is_editing else "Create New Task"

    @property
    def submit_label(self) -> str:
        return "Update" if self.is_editing else "Create"

    @property
    def title_counter(self) -> str:
        return f"{len(self.title)}/{TITLE_MAX_LENGTH} characters"

    @property
    def description_counter(self) -> str:
        return f"{len(self.description)}/{DESCRIPTION_MAX_LENGTH} characters"

    def validate_title(self) -> bool:
        if not self.title.strip():
            self.title_error = "Title is required"
            return False
        if len(self.title) > TITLE_MAX_LENGTH:
            self.title_error = f"Title must not exceed {TITLE_MAX_LENGTH} characters"
            return False
        self.title_error = ""
        return True

    def validate_description(self) -> bool:
        if len(self.description) > DESCRIPTION_MAX_LENGTH:
            self.description_error = (
                f"Description must not exceed {DESCRIPTION_MAX_LENGTH} characters"
            )
            return False
        self.description_error = ""
        return True

    def validate(self) -> bool:
        is_title_valid = self.validate_title()
        is_description_valid = self.validate_description()
        return is_title_valid and is_description_valid

    def submit(self) -> TaskFields | None:
        """Return the fields to send, or None when the form has errors."""
        if not self.validate():
            return None

        return TaskFields(
            title=self.title.strip(),
            description=self.description.strip() or None,
            status=self.status,
            category=self.category.strip() or None,
            due_date=self.due_date,
        )
