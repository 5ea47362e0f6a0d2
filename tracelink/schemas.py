from __future__ import annotations

from collections.abc import Mapping
from typing import Any, TypeVar

from pydantic import BaseModel, ConfigDict

Envelope = dict[str, Any]

ModelT = TypeVar("ModelT", bound=BaseModel)


class RequestOptions(BaseModel):
    model_config = ConfigDict(extra="ignore")

    idempotency_key: str | None = None


class ListOptions(BaseModel):
    model_config = ConfigDict(extra="ignore")

    sort: str | list[str] | None = None
    reverse: bool = False
    limit: int | None = None
    page: int | None = None
    filter: dict[str, str | list[str]] | None = None
    filter_or: bool = False


class DocumentUpload(BaseModel):
    data: str
    filename: str
    type: str | None = None


def coerce(model: type[ModelT], value: ModelT | Mapping[str, Any] | None) -> ModelT:
    """Accept a model instance, a plain mapping or None for any options argument."""
    if value is None:
        return model()
    if isinstance(value, model):
        return value
    return model.model_validate(dict(value))
