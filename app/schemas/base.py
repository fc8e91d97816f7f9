from datetime import datetime, timezone

from pydantic import BaseModel, ConfigDict, field_validator
from pydantic.alias_generators import to_camel


class BaseSchema(BaseModel):
    """Base schema for all models.

    Fields are exposed in camelCase on the wire and accepted in either
    camelCase or snake_case on input.
    """
    model_config = ConfigDict(
        from_attributes=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )


class TimestampedSchema(BaseSchema):
    """Base response schema for generated plan records."""
    id: int
    created_at: datetime

    @field_validator("created_at")
    @classmethod
    def assume_utc(cls, value: datetime) -> datetime:
        # SQLite hands timestamps back without an offset
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value
