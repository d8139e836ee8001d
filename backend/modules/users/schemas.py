"""
User API schemas.
"""
from pydantic import BaseModel, ConfigDict, Field


class UserResponse(BaseModel):
    username: str
    id: str = Field(..., alias="_id")

    model_config = ConfigDict(from_attributes=True, populate_by_name=True)
