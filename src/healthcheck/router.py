from typing import Any
from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from src.tasks.dependencies import get_task_store
from src.tasks.store import TaskStore

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
                        "store": {"status": "ok", "tasks": 3},
                    }
                }
            },
        },
    },
)
def healthcheck(store: TaskStore = Depends(get_task_store)) -> JSONResponse:
    health_status: dict[str, Any] = {
        "api": {"status": "ok"},
        "store": {"status": "ok", "tasks": len(store)},
    }

    return JSONResponse(status_code=status.HTTP_200_OK, content=health_status)
