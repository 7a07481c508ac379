from fastapi import Request
from sqlalchemy import Engine, create_engine


def create_database_engine(database_url: str) -> Engine:
    connect_args: dict[str, bool] = {}
    if database_url.startswith("sqlite"):
        # Requests are served from a threadpool
        connect_args["check_same_thread"] = False

    try:
        return create_engine(database_url, connect_args=connect_args)
    except Exception as e:
        raise RuntimeError("Failed to create database engine") from e


def get_database_engine(request: Request) -> Engine:
    return request.app.state.database_engine
