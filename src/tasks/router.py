import logging
from fastapi import APIRouter, Depends, Path, Request, status
from fastapi.responses import JSONResponse, PlainTextResponse, Response
from pydantic import ValidationError

from src.common.exceptions import (
    InvalidRequestException,
    ResourceType,
    UnsupportedMediaTypeException,
    bad_request_response,
    internal_error_response,
    loc_to_dot_sep,
    resource_not_found_response,
    unsupported_media_type_response,
)
from src.config import Settings, get_settings
from src.tasks.dependencies import get_task_store
from src.tasks.schemas import RequestTask, ResponseTask, Task
from src.tasks.store import TaskStore

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Tasks"])

# Path ids share the range of a signed 64-bit integer.
MIN_TASK_ID = -(2**63)
MAX_TASK_ID = 2**63 - 1

invalid_id_response = bad_request_response(
    "Invalid request /task/abc/: path.task_id: Input should be a valid integer"
)


def render_json(
    response: ResponseTask, status_code: int = status.HTTP_200_OK
) -> Response:
    """Serialize the envelope, leaving out ``data`` when there is none.

    Rendering failures are reported as a plain-text 500 carrying the
    serializer's message.
    """
    exclude = {"data"} if response.data is None else None
    try:
        return JSONResponse(
            content=response.model_dump(mode="json", exclude=exclude),
            status_code=status_code,
        )
    except ValueError as e:
        logger.error(f"Failed to render response: {e}")
        return PlainTextResponse(
            str(e), status_code=status.HTTP_500_INTERNAL_SERVER_ERROR
        )


def parse_media_type(content_type: str) -> str:
    media_type = content_type.split(";", 1)[0].strip().lower()
    if not media_type:
        raise InvalidRequestException("missing Content-Type header")
    main_type, _, sub_type = media_type.partition("/")
    if not main_type or not sub_type or "/" in sub_type:
        raise InvalidRequestException(f"malformed Content-Type '{content_type}'")
    return media_type


async def read_body(request: Request, limit: int) -> bytes:
    body = bytearray()
    async for chunk in request.stream():
        body.extend(chunk)
        if len(body) > limit:
            raise InvalidRequestException(
                f"request body too large, limit is {limit} bytes"
            )
    return bytes(body)


async def parse_request_task(request: Request, settings: Settings) -> RequestTask:
    media_type = parse_media_type(request.headers.get("content-type", ""))
    if media_type != "application/json":
        raise UnsupportedMediaTypeException("expect application/json Content-Type")

    body = await read_body(request, settings.MAX_REQUEST_BODY_BYTES)
    try:
        return RequestTask.model_validate_json(body)
    except ValidationError as e:
        errors = "; ".join(
            f"{loc_to_dot_sep(error['loc']) or 'body'}: {error['msg']}"
            for error in e.errors()
        )
        raise InvalidRequestException(f"Invalid task body: {errors}") from e


@router.post(
    "/task/",
    status_code=status.HTTP_201_CREATED,
    response_model=ResponseTask,
    responses={
        **bad_request_response(
            "Invalid task body: foo: Extra inputs are not permitted"
        ),
        **unsupported_media_type_response,
    },
)
async def create_task(
    request: Request,
    store: TaskStore = Depends(get_task_store),
    settings: Settings = Depends(get_settings),
) -> Response:
    logger.info(f"handling task create at {request.url.path}")

    request_task = await parse_request_task(request, settings)
    tags = request_task.tags or []
    task_id = store.create_task(request_task.text, tags, request_task.due)

    return render_json(
        ResponseTask(
            status=status.HTTP_201_CREATED,
            message=f"Task with id {task_id} is created",
            data=Task(
                id=task_id, text=request_task.text, tags=tags, due=request_task.due
            ),
        ),
        status_code=status.HTTP_201_CREATED,
    )


@router.get("/tasks/", response_model=ResponseTask)
def get_all_tasks(
    request: Request, store: TaskStore = Depends(get_task_store)
) -> Response:
    logger.info(f"handling get all tasks at {request.url.path}")

    return render_json(
        ResponseTask(
            status=status.HTTP_200_OK,
            message="Fetched successfully",
            data=store.get_all_tasks(),
        )
    )


@router.get(
    "/task/{task_id}/",
    response_model=ResponseTask,
    responses={
        **invalid_id_response,
        **resource_not_found_response(ResourceType.TASK),
    },
)
def get_task(
    request: Request,
    task_id: int = Path(ge=MIN_TASK_ID, le=MAX_TASK_ID),
    store: TaskStore = Depends(get_task_store),
) -> Response:
    logger.info(f"handling get task at {request.url.path}")

    return render_json(
        ResponseTask(
            status=status.HTTP_200_OK,
            message=f"Task with id {task_id} fetched successfully",
            data=store.get_task(task_id),
        )
    )


@router.delete(
    "/task/{task_id}/",
    response_model=ResponseTask,
    responses={
        **invalid_id_response,
        **resource_not_found_response(ResourceType.TASK),
    },
)
def delete_task(
    request: Request,
    task_id: int = Path(ge=MIN_TASK_ID, le=MAX_TASK_ID),
    store: TaskStore = Depends(get_task_store),
) -> Response:
    logger.info(f"handling delete task at {request.url.path}")

    store.delete_task(task_id)

    return render_json(
        ResponseTask(
            status=status.HTTP_204_NO_CONTENT,
            message=f"Task with id {task_id} successfully removed",
        )
    )


@router.delete(
    "/tasks/", response_model=ResponseTask, responses={**internal_error_response}
)
def delete_all_tasks(
    request: Request, store: TaskStore = Depends(get_task_store)
) -> Response:
    logger.info(f"handling delete all tasks at {request.url.path}")

    store.delete_all_tasks()

    return render_json(
        ResponseTask(
            status=status.HTTP_204_NO_CONTENT,
            message="Successfully removed all tasks",
        )
    )


@router.get("/tag/{tag}/", response_model=ResponseTask)
def get_tasks_by_tag(
    tag: str, request: Request, store: TaskStore = Depends(get_task_store)
) -> Response:
    logger.info(f"handling tasks by tag at {request.url.path}")

    return render_json(
        ResponseTask(
            status=status.HTTP_200_OK,
            message="Successfully fetched tasks by tag",
            data=store.get_tasks_by_tag(tag),
        )
    )


@router.get(
    "/due/{year}/{month}/{day}/",
    response_model=ResponseTask,
    responses={
        **bad_request_response(
            "Invalid request /due/2024/13/1/: "
            "path.month: Input should be less than or equal to 12"
        )
    },
)
def get_tasks_by_due_date(
    request: Request,
    year: int,
    month: int = Path(ge=1, le=12),
    day: int = Path(),
    store: TaskStore = Depends(get_task_store),
) -> Response:
    logger.info(f"handling tasks by due date at {request.url.path}")

    return render_json(
        ResponseTask(
            status=status.HTTP_200_OK,
            message="Successfully fetched tasks by due date",
            data=store.get_tasks_by_due_date(year, month, day),
        )
    )
