# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, TypeVar

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from .base import ValidationError

ModelT = TypeVar("ModelT", bound=BaseModel)


def format_pydantic_errors(exc: PydanticValidationError) -> dict[str, Any]:
    errors_list = []
    fields_set = set()

    for error in exc.errors():
        loc = error.get("loc", ())
        field_path = ".".join(str(part) for part in loc if part is not None)

        if field_path:
            fields_set.add(field_path)

        errors_list.append(
            {
                "field": field_path or "unknown",
                "type": error.get("type", "value_error"),
            }
        )

    return {
        "fields": sorted(fields_set),
        "errors": errors_list,
    }


def raise_validation_error(exc: PydanticValidationError, code: str = "validation_error") -> None:
    context = format_pydantic_errors(exc)
    raise ValidationError(code, context=context) from exc


def parse_payload(
    model: type[ModelT], payload: Mapping[str, Any], *, code: str = "validation_error"
) -> ModelT:
    """Validate ``payload`` into ``model`` or raise :class:`ValidationError`."""
    try:
        return model.model_validate(dict(payload))
    except PydanticValidationError as exc:
        raise_validation_error(exc, code)
        raise  # unreachable, keeps type checkers quiet


__all__ = [
    "format_pydantic_errors",
    "parse_payload",
    "raise_validation_error",
]
