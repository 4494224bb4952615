from datetime import datetime, timezone
import pytest
from pytest_mock import MockerFixture

from src.common.exceptions import InvalidRequestException
from src.tasks.router import parse_media_type, render_json
from src.tasks.schemas import ResponseTask, Task


@pytest.mark.parametrize(
    "content_type, expected",
    [
        ("application/json", "application/json"),
        ("Application/JSON; charset=utf-8", "application/json"),
        ("text/plain", "text/plain"),
    ],
)
def test_parse_media_type(content_type: str, expected: str) -> None:
    assert parse_media_type(content_type) == expected


@pytest.mark.parametrize("content_type", ["", "   ", "json", "application/", "a/b/c"])
def test_parse_media_type_rejects_malformed(content_type: str) -> None:
    with pytest.raises(InvalidRequestException):
        parse_media_type(content_type)


def test_render_json_omits_missing_data() -> None:
    response = render_json(ResponseTask(status=204, message="removed"))

    assert response.status_code == 200
    assert response.headers["content-type"] == "application/json"
    assert response.body == b'{"status":204,"message":"removed"}'


def test_render_json_keeps_empty_list() -> None:
    response = render_json(ResponseTask(status=200, message="ok", data=[]))
    assert response.body == b'{"status":200,"message":"ok","data":[]}'


def test_render_json_serializes_task() -> None:
    task = Task(
        id=1,
        text="buy milk",
        tags=["errand"],
        due=datetime(2024, 5, 1, 9, 0, tzinfo=timezone.utc),
    )

    response = render_json(ResponseTask(status=201, message="created", data=task), 201)

    assert response.status_code == 201
    assert b'"due":"2024-05-01T09:00:00Z"' in response.body


def test_render_json_failure_is_internal_error(mocker: MockerFixture) -> None:
    mocker.patch.object(
        ResponseTask, "model_dump", side_effect=ValueError("cannot serialize")
    )

    response = render_json(ResponseTask(status=200, message="ok"))

    assert response.status_code == 500
    assert response.headers["content-type"].startswith("text/plain")
    assert response.body == b"cannot serialize"
