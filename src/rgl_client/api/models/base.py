from __future__ import annotations

from typing import Any, NewType

from pydantic import BaseModel, ConfigDict, ValidationInfo, field_validator
from pydantic.alias_generators import to_camel

# 64-bit platform account id. The API sends it as a string or a number.
SteamID = NewType("SteamID", int)


class RglModel(BaseModel):
    """Base for API records: camelCase keys upstream, snake_case attributes here."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    @field_validator("*", mode="before")
    @classmethod
    def _null_means_default(cls, value: Any, info: ValidationInfo) -> Any:
        # The API sends null for fields it has no value for; keep the empty default.
        if value is not None or info.field_name is None:
            return value
        field = cls.model_fields[info.field_name]
        if field.is_required():
            return value
        return field.get_default(call_default_factory=True)
