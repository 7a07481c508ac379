from fastapi import APIRouter, Depends, status

from task_tracker.common.exceptions import (
    ResourceType,
    resource_not_found_response,
    validation_error_response,
)
from task_tracker.tasks.dependencies import get_task_service
from task_tracker.tasks.schemas import Task, TaskDraft
from task_tracker.tasks.service import TaskService


router = APIRouter(
    prefix="/tasks",
    tags=["Tasks"],
)


@router.get("")
def list_tasks(task_service: TaskService = Depends(get_task_service)) -> list[Task]:
    return task_service.list_tasks()


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    responses={**validation_error_response},
)
def create_task(
    task_input: TaskDraft,
    task_service: TaskService = Depends(get_task_service),
) -> Task:
    return task_service.create_task(task_input)


@router.get("/{task_id}", responses={**resource_not_found_response(ResourceType.TASK)})
def get_task(
    task_id: int, task_service: TaskService = Depends(get_task_service)
) -> Task:
    return task_service.get_task(task_id)


@router.put(
    "/{task_id}",
    responses={
        **resource_not_found_response(ResourceType.TASK),
        **validation_error_response,
    },
)
def update_task(
    task_id: int,
    task_input: TaskDraft,
    task_service: TaskService = Depends(get_task_service),
) -> Task:
    return task_service.update_task(task_id, task_input)


@router.delete(
    "/{task_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    responses={**resource_not_found_response(ResourceType.TASK)},
)
def delete_task(task_id: int, task_service: TaskService = Depends(get_task_service)):
    task_service.delete_task(task_id)
