"""Rendering context assembly."""

from __future__ import annotations

import dataclasses
import logging
from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel

from ..core.errors import InvalidDataModelError, MissingDataModelError
from ..core.models import DataModelFactory

logger = logging.getLogger(__name__)


def resolve_data_model(factory: DataModelFactory) -> dict[str, Any]:
    """Invoke the data-model factory and return its bindings as a dict.

    Mappings are copied, pydantic models and dataclasses are dumped
    recursively and other objects contribute their instance attributes.

    Raises:
        MissingDataModelError: The factory returned ``None``.
        InvalidDataModelError: The result has no named bindings, e.g. a
            list, a string or a number.
    """
    data_model = factory()
    if data_model is None:
        raise MissingDataModelError("Data model factory returned no data model")
    if isinstance(data_model, BaseModel):
        return data_model.model_dump()
    if isinstance(data_model, Mapping):
        return dict(data_model)
    if dataclasses.is_dataclass(data_model) and not isinstance(data_model, type):
        return dataclasses.asdict(data_model)
    if hasattr(data_model, "__dict__") and not isinstance(data_model, type):
        return dict(vars(data_model))
    raise InvalidDataModelError(
        f"Data model must provide named bindings, got {type(data_model).__name__}"
    )


def build_context(
    environment: Mapping[str, str],
    system_properties: Mapping[str, str],
    data_model: Mapping[str, Any],
) -> dict[str, Any]:
    """Merge binding sources into a single rendering context.

    Later sources override earlier ones:
    1. Environment variables
    2. System properties
    3. Caller data model

    The environment and system properties are additionally available as
    ``env`` and ``sys`` unless the data model defines those names.

    Returns:
        Context dictionary for template rendering
    """
    context: dict[str, Any] = {}
    context.update(environment)
    context.update(system_properties)
    context["env"] = dict(environment)
    context["sys"] = dict(system_properties)
    context.update(data_model)

    logger.debug(
        f"Built context: {len(environment)} env, {len(system_properties)} "
        f"properties, {len(data_model)} data model binding(s)"
    )
    return context
