from datetime import date, datetime
from enum import Enum
from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

TITLE_MAX_LENGTH = 100
DESCRIPTION_MAX_LENGTH = 500


class TaskStatus(str, Enum):
    TODO = "TODO"
    IN_PROGRESS = "IN_PROGRESS"
    DONE = "DONE"


class TaskFields(BaseModel):
    """Client-writable fields of a task, as sent on create and update."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    title: str = Field(..., max_length=TITLE_MAX_LENGTH)
    description: str | None = Field(default=None, max_length=DESCRIPTION_MAX_LENGTH)
    status: TaskStatus = TaskStatus.TODO
    category: str | None = None
    due_date: date | None = None

    @field_validator("title")
    def validate_title(cls, value: str):
        if not value.strip():
            raise ValueError("'title' must not be blank")
        return value


class TaskDraft(TaskFields):
    # Accepted so that clients may echo a fetched task back; never persisted
    id: int | None = None


class Task(TaskFields):
    id: int
    created_at: datetime
    updated_at: datetime


WRITABLE_FIELDS = set(TaskFields.model_fields)
