"""Metric and trigger models."""

from typing import Any

from pydantic import AliasChoices, BaseModel, Field, field_validator


class Metric(BaseModel):
    """Current value of a host item.

    Accepts both the ``item.get`` field names (``key_``, ``lastvalue``) and
    the exported ones (``key``, ``value``).
    """

    itemid: str
    name: str
    key: str = Field(..., validation_alias=AliasChoices("key_", "key"))
    value: str = Field(..., validation_alias=AliasChoices("lastvalue", "value"))


class Trigger(BaseModel):
    """Trigger definition. Missing or non-string fields become empty."""

    triggerid: str = ""
    description: str = ""
    priority: str = ""
    status: str = ""

    @field_validator("*", mode="before")
    @classmethod
    def string_or_empty(cls, v: Any) -> str:
        return v if isinstance(v, str) else ""
