from datetime import datetime, timezone
from sqlalchemy import Engine
from sqlalchemy.orm import sessionmaker

from task_tracker.common.exceptions import ResourceNotFoundException, ResourceType
from task_tracker.tasks.schemas import Task, TaskFields
from task_tracker.tasks.store.base import TaskStore
from task_tracker.tasks.store.sql.model import TaskModel


def as_utc(value: datetime) -> datetime:
    # SQLite drops the offset; stored values are always UTC
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


class SQLTaskStore(TaskStore):
    def __init__(self, engine: Engine):
        self.engine = engine
        self.Session = sessionmaker(bind=self.engine)

    def _map_task(self, task: TaskModel) -> Task:
        return Task(
            id=task.id,
            title=task.title,
            description=task.description,
            status=task.status,
            category=task.category,
            due_date=task.due_date,
            created_at=as_utc(task.created_at),
            updated_at=as_utc(task.updated_at),
        )

    def task_exists(self, task_id: int) -> bool:
        with self.Session() as session:
            return session.query(
                session.query(TaskModel).filter_by(id=task_id).exists()
            ).scalar()

    def create_task(self, fields: TaskFields, timestamp: datetime) -> Task:
        with self.Session() as session:
            new_task = TaskModel(
                title=fields.title,
                description=fields.description,
                status=fields.status.value,
                category=fields.category,
                due_date=fields.due_date,
                created_at=timestamp,
                updated_at=timestamp,
            )

            session.add(new_task)
            session.commit()

            return self._map_task(new_task)

    def get_task(self, task_id: int) -> Task:
        with self.Session() as session:
            task = session.get(TaskModel, task_id)

            if not task:
                raise ResourceNotFoundException(ResourceType.TASK, str(task_id))

            return self._map_task(task)

    def update_task(
        self,
        task_id: int,
        fields: TaskFields,
        timestamp: datetime,
    ) -> Task:
        with self.Session() as session:
            task = session.get(TaskModel, task_id)

            if not task:
                raise ResourceNotFoundException(ResourceType.TASK, str(task_id))

            task.title = fields.title
            task.description = fields.description
            task.status = fields.status.value
            task.category = fields.category
            task.due_date = fields.due_date

            task.updated_at = timestamp
            session.commit()

            return self._map_task(task)

    def delete_task(self, task_id: int) -> None:
        with self.Session() as session:
            task = session.get(TaskModel, task_id)

            if not task:
                raise ResourceNotFoundException(ResourceType.TASK, str(task_id))

            session.delete(task)
            session.commit()

    def list_tasks(self) -> list[Task]:
        with self.Session() as session:
            all_tasks = session.query(TaskModel).all()
            return [self._map_task(task) for task in all_tasks]
