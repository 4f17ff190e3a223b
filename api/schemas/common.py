"""Common Pydantic schemas shared across the API."""

from datetime import datetime
from typing import Annotated
from pydantic import BaseModel, ConfigDict, PlainSerializer
from pydantic.alias_generators import to_camel

from core.utils.datetime import to_iso


# Timestamps always leave the API as ISO-8601 UTC strings
IsoDatetime = Annotated[datetime, PlainSerializer(to_iso, return_type=str)]


class CamelModel(BaseModel):
    """Base schema with camelCase JSON field names."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )
