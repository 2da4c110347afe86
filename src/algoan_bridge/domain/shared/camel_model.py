"""Base model for records exchanged with Algoan in camelCase."""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Frozen model that reads and writes camelCase keys.

    Fields are declared in snake_case and populated from either form.
    """

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )

    def to_payload(self) -> dict:
        """Serialize to the JSON body sent to Algoan."""
        return self.model_dump(mode="json", by_alias=True)
