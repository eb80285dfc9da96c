"""Input coercion and fingerprinting shared by the calculators."""

import logging
from typing import Any, Mapping, Type, TypeVar, Union

from pydantic import BaseModel, ValidationError

from .. import config
from ..errors import InvalidInputError
from ..hashing import canonicalize_and_hash
from ..models import find_out_of_range_fields

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)


def coerce_input(model: Type[ModelT], data: Union[ModelT, Mapping[str, Any], None]) -> ModelT:
    """
    Accept a model instance, a plain mapping or None (all defaults).

    Raises:
        InvalidInputError: mapping fails validation (first error reported)
    """
    if isinstance(data, model):
        parsed = data
    else:
        try:
            parsed = model.model_validate(dict(data or {}))
        except ValidationError as e:
            first = e.errors()[0]
            field = ".".join(str(p) for p in first.get("loc", ())) or None
            logger.error(f"{model.__name__} validation failed: {e.error_count()} error(s), first on '{field}'")
            raise InvalidInputError(
                f"Invalid {model.__name__}: {first.get('msg')}",
                field=field,
                value=first.get("input"),
            ) from e

    if config.WARN_OUT_OF_RANGE:
        for name, value, lo, hi in find_out_of_range_fields(parsed):
            logger.warning(f"{model.__name__}.{name}={value} outside advisory range [{lo}, {hi}]")

    return parsed


def input_fingerprint(data: BaseModel) -> str:
    return canonicalize_and_hash(data)
