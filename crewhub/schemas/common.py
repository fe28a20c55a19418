# crewhub/schemas/common.py
from pydantic import ConfigDict
from pydantic.alias_generators import to_camel
from sqlmodel import SQLModel


class APIModel(SQLModel):
    """
    Base for request/response schemas.

    JSON keys are camelCase on the wire (`visitTime`, `workerType`);
    snake_case names are accepted on input too.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class ErrorResponse(APIModel):
    """Body of every non-2xx response."""

    message: str
    field: str | None = None
