from fastapi import Depends
from sqlalchemy import Engine

from task_tracker.common.database import get_database_engine
from task_tracker.tasks.store.base import TaskStore
from task_tracker.tasks.store.sql.store import SQLTaskStore


def get_task_store(
    engine: Engine = Depends(get_database_engine),
) -> TaskStore:
    return SQLTaskStore(engine=engine)
