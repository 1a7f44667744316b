"""
Shared pydantic building blocks
"""

from typing import Annotated, Any

from pydantic import BaseModel, ConfigDict, Field, StringConstraints, model_validator

RequiredStr = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]


class RequestModel(BaseModel):
    """
    Base for request bodies.

    Blank strings count as absent, so a required field sent as ``""`` is
    reported as missing and an optional one is stored as NULL.
    """

    model_config = ConfigDict(str_strip_whitespace=True, coerce_numbers_to_str=True)

    @model_validator(mode="before")
    @classmethod
    def blank_strings_to_none(cls, data: Any) -> Any:
        if isinstance(data, dict):
            return {
                key: (None if isinstance(value, str) and not value.strip() else value)
                for key, value in data.items()
            }
        return data


class ResponseModel(BaseModel):
    """Base for response bodies read straight from ORM rows"""

    model_config = ConfigDict(from_attributes=True)


class Ack(BaseModel):
    """Plain success acknowledgement"""
    success: bool = Field(True, description="Operation success status")
    message: str = Field(..., description="Human readable outcome")
