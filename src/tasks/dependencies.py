from fastapi import Depends, Request
from fastapi.exceptions import RequestValidationError
from pydantic import ValidationError

from src.config import Settings, get_settings
from src.tasks.schemas import TaskCreate
from src.tasks.service import TaskService
from src.tasks.store.base import TaskStore


def get_task_store(request: Request) -> TaskStore:
    return request.app.state.task_store


def get_task_service(
    task_store: TaskStore = Depends(get_task_store),
    settings: Settings = Depends(get_settings),
) -> TaskService:
    return TaskService(task_store=task_store, timezone=settings.task_timezone)


async def get_task_input(request: Request) -> TaskCreate:
    """Decode the body as JSON whatever Content-Type the client sent."""
    body = await request.body()
    try:
        return TaskCreate.model_validate_json(body)
    except ValidationError as e:
        raise RequestValidationError(
            [
                {**error, "loc": ("body", *error["loc"])}
                for error in e.errors(include_url=False)
            ]
        ) from e
