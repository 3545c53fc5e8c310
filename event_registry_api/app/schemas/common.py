"""
Shared base classes and summary payloads.
"""

from pydantic import BaseModel, ConfigDict, Field


class RecordModel(BaseModel):
    """Base for every record and input type.

    Numbers given for string fields are coerced (a dataset may use
    integer ids such as ``1``; they are stored as ``"1"``).  Fields may
    be populated by name as well as by their wire alias.
    """

    model_config = ConfigDict(
        populate_by_name=True,
        coerce_numbers_to_str=True,
        from_attributes=True,
    )


class DeleteAllResult(BaseModel):
    """Summary returned when a whole collection is cleared."""

    count: int = Field(..., examples=[3])
