"""
Shared pydantic configuration: camelCase on the wire, snake_case in Python.
"""
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base for response schemas read from ORM objects."""
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class RequestModel(CamelModel):
    """Base for request bodies; unknown fields are rejected."""
    model_config = ConfigDict(extra="forbid")


class OkResponse(BaseModel):
    ok: bool = True
