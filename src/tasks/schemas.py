from datetime import datetime
from typing import Any
from pydantic import BaseModel, field_validator


class Task(BaseModel):
    id: int
    title: str
    description: str
    created_at: datetime | None = None
    updated_at: datetime | None = None


class TaskCreate(BaseModel):
    title: str = ""
    description: str = ""

    @field_validator("title", "description", mode="before")
    def null_as_empty(cls, v: Any):
        if v is None:
            return ""
        return v
