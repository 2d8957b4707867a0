"""
Food Ordering API — Shared schema pieces: camelCase wire models, envelope, pagination
"""
import math
from typing import Any

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class ApiModel(BaseModel):
    """Wire model: camelCase on the wire, snake_case in Python."""
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        str_strip_whitespace=True,
    )


class Pagination(ApiModel):
    current: int
    pages: int
    total: int
    limit: int

    @classmethod
    def build(cls, page: int, limit: int, total: int) -> "Pagination":
        return cls(current=page, pages=math.ceil(total / limit) if limit else 0, total=total, limit=limit)


def ok(data: dict[str, Any] | None = None, message: str | None = None) -> dict[str, Any]:
    """Success envelope: {"success": true, "message"?: ..., "data"?: ...}."""
    body: dict[str, Any] = {"success": True}
    if message is not None:
        body["message"] = message
    if data is not None:
        body["data"] = data
    return body
