from typing import Any
from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from src.tasks.dependencies import get_task_store
from src.tasks.store.base import TaskStore

router = APIRouter()


@router.get(
    "/healthcheck",
    tags=["Healthcheck"],
    status_code=status.HTTP_200_OK,
    responses={
        200: {
            "description": "Healthcheck status",
            "content": {
                "application/json": {
                    "example": {
                        "api": {"status": "ok"},
                        "postgres": {"status": "ok"},
                    }
                }
            },
        },
        503: {
            "description": "Service unavailable",
            "content": {
                "application/json": {
                    "example": {
                        "api": {"status": "ok"},
                        "postgres": {
                            "status": "error",
                            "message": "Connection error or unexpected result",
                        },
                    }
                }
            },
        },
    },
)
def healthcheck(task_store: TaskStore = Depends(get_task_store)) -> JSONResponse:
    health_status: dict[str, Any] = {
        "api": {"status": "ok"},
        "postgres": {"status": "ok"},
    }

    try:
        task_store.ping()
    except Exception as e:
        health_status["postgres"].update({"status": "error", "message": str(e)})
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE, content=health_status
        )

    return JSONResponse(status_code=status.HTTP_200_OK, content=health_status)
