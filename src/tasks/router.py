from fastapi import APIRouter, Depends, Response, status
from fastapi.responses import PlainTextResponse

from src.common.exceptions import (
    ResourceType,
    bad_request_response,
    resource_not_found_response,
)
from src.tasks.dependencies import get_task_input, get_task_service
from src.tasks.schemas import Task, TaskCreate
from src.tasks.service import TaskService
from src.tasks.task_id import parse_task_id


router = APIRouter(
    tags=["Tasks"],
)


@router.get("/tasks")
def list_tasks(task_service: TaskService = Depends(get_task_service)) -> list[Task]:
    return task_service.list_tasks()


@router.post(
    "/task/create",
    status_code=status.HTTP_201_CREATED,
    response_class=Response,
    responses={
        201: {"description": "Task created"},
        **bad_request_response("Malformed task payload", "Malformed request"),
    },
    openapi_extra={
        "requestBody": {
            "required": True,
            "content": {"application/json": {"schema": TaskCreate.model_json_schema()}},
        }
    },
)
def create_task(
    task_input: TaskCreate = Depends(get_task_input),
    task_service: TaskService = Depends(get_task_service),
) -> Response:
    task_service.create_task(task_input)
    return Response(status_code=status.HTTP_201_CREATED)


@router.api_route(
    "/tasks/delete/{task_path:path}",
    methods=["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"],
    response_class=PlainTextResponse,
    responses={
        200: {
            "description": "Id of the deleted task",
            "content": {"text/plain": {"example": "1"}},
        },
        **bad_request_response("Missing or invalid task id", "invalid id parameter"),
        **resource_not_found_response(ResourceType.TASK),
    },
)
def delete_task(
    task_path: str, task_service: TaskService = Depends(get_task_service)
) -> PlainTextResponse:
    task_id = parse_task_id(task_path)
    deleted_id = task_service.delete_task(task_id)

    return PlainTextResponse(content=str(deleted_id), status_code=status.HTTP_200_OK)
