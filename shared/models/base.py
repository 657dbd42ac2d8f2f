from datetime import datetime, timezone
from pydantic import BaseModel as PydanticModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Schema(PydanticModel):
    """Base for every API payload: snake_case in Python, camelCase on the wire."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )

    def changes(self, nullable: tuple = ()) -> dict:
        """Fields sent in a PATCH body.

        An explicit null clears the field only when it is listed in ``nullable``;
        for required fields it is ignored.
        """
        data = self.model_dump(exclude_unset=True)
        return {key: value for key, value in data.items() if value is not None or key in nullable}


class BaseModel(Schema):
    id: int = 0
    created_at: datetime = Field(default_factory=utcnow)


class TimestampedModel(BaseModel):
    updated_at: datetime = Field(default_factory=utcnow)
