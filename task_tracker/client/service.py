import logging
from types import TracebackType
from typing import Any, Type
from aiohttp import ClientError, ClientSession

from task_tracker.client.exceptions import TaskClientException
from task_tracker.tasks.schemas import Task, TaskFields


logger = logging.getLogger(__name__)


class TaskClient:
    """Async wrapper around the task REST API.

    Every non-2xx response is raised as a ``TaskClientException`` carrying the
    status code and the text the server sent back. Requests are made once:
    there are no retries and no timeout beyond aiohttp's default.
    """

    def __init__(self, *, base_url: str, user_agent: str):
        self.base_url = base_url.rstrip("/")
        self.session: ClientSession = ClientSession(
            headers={
                "Accept": "application/json",
                "User-Agent": user_agent,
            }
        )

    async def __aenter__(self):
        return self

    async def __aexit__(
        self, exc_type: Type[Exception], exc: Exception, tb: TracebackType
    ):
        if self.session:
            await self.session.close()

    async def request(
        self,
        method: str,
        path: str,
        payload: dict[str, Any] | None = None,
    ) -> Any | None:
        url = f"{self.base_url}{path}"
        try:
            async with self.session.request(method, url, json=payload) as response:
                if not 200 <= response.status < 300:
                    error_text = await response.text()
                    logger.error(f"{method} {url} failed with {response.status}")
                    raise TaskClientException(
                        response.status, error_text or response.reason or ""
                    )

                if response.status == 204:
                    return None

                return await response.json()
        except ClientError as e:
            logger.exception("HTTP request failed")
            raise TaskClientException(None, f"Request to {url} failed: {e}") from e

    def _serialize(self, fields: TaskFields) -> dict[str, Any]:
        return fields.model_dump(
            mode="json",
            by_alias=True,
            include=set(TaskFields.model_fields),
            exclude_none=True,
        )

    async def get_all_tasks(self) -> list[Task]:
        data = await self.request("GET", "/tasks")
        return [Task.model_validate(task) for task in data or []]

    async def get_task_by_id(self, task_id: int) -> Task:
        data = await self.request("GET", f"/tasks/{task_id}")
        return Task.model_validate(data)

    async def create_task(self, fields: TaskFields) -> Task:
        data = await self.request("POST", "/tasks", payload=self._serialize(fields))
        return Task.model_validate(data)

    async def update_task(self, task_id: int, fields: TaskFields) -> Task:
        data = await self.request(
            "PUT", f"/tasks/{task_id}", payload=self._serialize(fields)
        )
        return Task.model_validate(data)

    async def delete_task(self, task_id: int) -> None:
        await self.request("DELETE", f"/tasks/{task_id}")
