"""
Exercise and log API schemas.
"""
from typing import List, Union

from pydantic import BaseModel, ConfigDict, Field


class ExerciseResponse(BaseModel):
    id: str = Field(..., alias="_id")  # owning user's ID
    username: str
    date: str
    duration: Union[int, float]
    description: str

    model_config = ConfigDict(populate_by_name=True)


class LogEntry(BaseModel):
    description: str
    duration: Union[int, float]
    date: str


class LogResponse(BaseModel):
    id: str = Field(..., alias="_id")
    username: str
    count: int
    log: List[LogEntry]

    model_config = ConfigDict(populate_by_name=True)
