"""Shared schema configuration."""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Schema exchanged as camelCase JSON.

    Requests may use either camelCase or the snake_case field names.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)
