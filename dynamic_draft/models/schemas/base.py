import datetime
import typing

import pydantic

from dynamic_draft.utilities.formatters.datetime_formatter import format_datetime_into_isoformat
from dynamic_draft.utilities.formatters.field_formatter import format_dict_key_to_camel_case

UtcDateTime = typing.Annotated[
    datetime.datetime,
    pydantic.PlainSerializer(format_datetime_into_isoformat, return_type=str, when_used="json"),
]


class BaseSchemaModel(pydantic.BaseModel):
    model_config = pydantic.ConfigDict(
        from_attributes=True,
        validate_assignment=True,
        populate_by_name=True,
        alias_generator=format_dict_key_to_camel_case,
    )


class FrozenSchemaModel(BaseSchemaModel):
    """Immutable variant; instances are values and are replaced, never edited."""

    model_config = typing.cast(pydantic.ConfigDict, {**BaseSchemaModel.model_config, "frozen": True})
