from __future__ import annotations

from typing import Annotated, FrozenSet

from pydantic import BaseModel, ConfigDict, Field, StrictInt, StrictStr

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1

Int64 = Annotated[StrictInt, Field(ge=INT64_MIN, le=INT64_MAX)]


class User(BaseModel):
    """A person known to the Bookkeeping system.

    Wire keys are ``externalId``, ``id`` and ``name``; all three are required
    and always emitted when serializing by alias.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    # Identifier minted by the organisation-wide personnel directory.
    external_id: Int64 = Field(alias="externalId")
    id: Int64
    name: StrictStr


USER_WIRE_KEYS: FrozenSet[str] = frozenset(
    field.alias or name for name, field in User.model_fields.items()
)
