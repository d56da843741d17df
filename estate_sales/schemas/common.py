# schemas/common.py

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


def api_alias(field_name: str) -> str:
    # event_id -> eventID, start_date -> startDate, created_at stays as-is
    if field_name == "created_at":
        return field_name
    if field_name.endswith("_id"):
        return to_camel(field_name[:-3]) + "ID"
    return to_camel(field_name)


class ApiModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=api_alias,
        populate_by_name=True,
        from_attributes=True,
    )


class ApiInput(ApiModel):
    model_config = ConfigDict(str_strip_whitespace=True)


class MessageResponse(ApiModel):
    success: bool = True
    message: str
