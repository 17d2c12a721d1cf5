import pytest
from pydantic import ValidationError

from src.tasks.schemas import TaskCreate


def test_task_create_null_fields_are_empty() -> None:
    task_input = TaskCreate.model_validate_json('{"title": null, "description": null}')

    assert task_input.title == ""
    assert task_input.description == ""


def test_task_create_defaults() -> None:
    task_input = TaskCreate.model_validate_json("{}")

    assert task_input == TaskCreate(title="", description="")


def test_task_create_rejects_non_string() -> None:
    with pytest.raises(ValidationError):
        TaskCreate.model_validate_json('{"title": 1}')
