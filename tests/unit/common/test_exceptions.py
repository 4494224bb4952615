import pytest

from src.common.exceptions import (
    ResourceNotFoundException,
    ResourceType,
    loc_to_dot_sep,
)


def test_resource_not_found_message() -> None:
    exc = ResourceNotFoundException(ResourceType.TASK, "5")
    assert str(exc) == "Task '5' not found"
    assert exc.resource_type == "Task"
    assert exc.identifier == "5"


@pytest.mark.parametrize(
    "loc, expected",
    [
        (("path", "task_id"), "path.task_id"),
        (("body", "tags", 0), "body.tags[0]"),
        (("foo",), "foo"),
        ((), ""),
    ],
)
def test_loc_to_dot_sep(loc: tuple, expected: str) -> None:
    assert loc_to_dot_sep(loc) == expected


def test_loc_to_dot_sep_rejects_unknown_parts() -> None:
    with pytest.raises(TypeError):
        loc_to_dot_sep(("body", 1.5))
