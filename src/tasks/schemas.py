from datetime import datetime
from typing import Annotated
from pydantic import AwareDatetime, BaseModel, ConfigDict, Strict


class Task(BaseModel):
    id: int
    text: str
    tags: list[str]
    due: datetime | None = None


class RequestTask(BaseModel):
    text: str = ""
    tags: list[str] | None = None
    # RFC 3339: a string timestamp that carries a UTC offset
    due: Annotated[AwareDatetime, Strict()] | None = None

    model_config = ConfigDict(extra="forbid")


class ResponseTask(BaseModel):
    status: int
    message: str
    data: Task | list[Task] | None = None
