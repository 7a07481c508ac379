from datetime import date, datetime
from sqlalchemy import Date, DateTime, Engine, Integer, String, Text
from sqlalchemy.orm import declarative_base, Mapped, mapped_column

from task_tracker.config import get_settings
from task_tracker.tasks.schemas import (
    DESCRIPTION_MAX_LENGTH,
    TITLE_MAX_LENGTH,
    TaskStatus,
)


settings = get_settings()

Base = declarative_base()


class TaskModel(Base):
    __tablename__ = settings.TASKS_TABLE_NAME
    # Keeps SQLite from handing out the id of a deleted last row again
    __table_args__ = {"sqlite_autoincrement": True}

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    title: Mapped[str] = mapped_column(String(TITLE_MAX_LENGTH), nullable=False)
    description: Mapped[str | None] = mapped_column(
        Text(DESCRIPTION_MAX_LENGTH), nullable=True
    )
    status: Mapped[str] = mapped_column(
        String(20), nullable=False, default=TaskStatus.TODO.value
    )
    category: Mapped[str | None] = mapped_column(String, nullable=True)
    due_date: Mapped[date | None] = mapped_column(Date, nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False
    )

    def __init__(
        self,
        title: str,
        created_at: datetime,
        updated_at: datetime,
        description: str | None = None,
        status: str = TaskStatus.TODO.value,
        category: str | None = None,
        due_date: date | None = None,
    ):
        self.title = title
        self.description = description
        self.status = status
        self.category = category
        self.due_date = due_date
        self.created_at = created_at
        self.updated_at = updated_at


def create_tables(engine: Engine) -> None:
    Base.metadata.create_all(engine)
