from datetime import date, datetime
from pathlib import Path
from typing import Callable, Generator
import pytest
from fastapi.testclient import TestClient
from pytest_mock import MockerFixture

from task_tracker.config import Settings
from task_tracker.main import app as main_app
from task_tracker.tasks.schemas import Task, TaskStatus

TEST_TIMESTAMP = datetime.fromisoformat("2024-01-01T12:00:00")


@pytest.fixture
def test_database_url(tmp_path: Path) -> str:
    db_path: Path = tmp_path / "test_tasks.db"
    return f"sqlite:///{db_path}"


@pytest.fixture
def test_settings(test_database_url: str) -> Settings:
    return Settings(
        _env_file=None,  # type: ignore
        DATABASE_URL=test_database_url,
        OTEL_ENABLED=False,
    )


@pytest.fixture
def test_client(
    test_settings: Settings, mocker: MockerFixture
) -> Generator[TestClient, None, None]:
    mocker.patch("task_tracker.main.settings", test_settings)

    with TestClient(main_app) as client:
        yield client

    main_app.dependency_overrides.clear()


@pytest.fixture
def make_task() -> Callable[..., Task]:
    """Factory for in-memory tasks with sensible defaults."""

    def _make_task(
        id: int,
        title: str,
        *,
        description: str | None = None,
        status: TaskStatus = TaskStatus.TODO,
        category: str | None = None,
        due_date: date | None = None,
    ) -> Task:
        return Task(
            id=id,
            title=title,
            description=description,
            status=status,
            category=category,
            due_date=due_date,
            created_at=TEST_TIMESTAMP,
            updated_at=TEST_TIMESTAMP,
        )

    return _make_task
