"""
Coordinate Defaults — process-wide configuration

Holds the defaults geometry code falls back to when it does not pass a
factory or comparator explicitly:
- which sequence implementation the default factory builds
- the largest ordinate set it creates
- the dimension limit of the default comparator
- the level of the geomcore logger

LIFECYCLE:
1. Optional: configure_defaults(...) or configure_defaults(load_defaults(path))
2. First read (get_defaults / get_default_factory / get_default_comparator)
   fixes the defaults; built-in values are used if nothing was configured
3. Any later configure_defaults raises ConfigurationError

reset_defaults() returns to step 1 and exists for tests.
"""

import json
import logging
from enum import Enum
from pathlib import Path
from typing import Any, Optional

from jsonschema import ValidationError as SchemaValidationError
from pydantic import BaseModel, Field, ValidationError, field_validator

from geomcore.core.contracts import validate_coordinate_defaults
from geomcore.core.domain.errors import ConfigurationError
from geomcore.core.domain.ordinates import Ordinates
from geomcore.core.structured_logging import ROOT_LOGGER_NAME
from geomcore.sequences.comparator import CoordinateSequenceComparator
from geomcore.sequences.factory import (
    CoordinateArraySequenceFactory,
    CoordinateSequenceFactory,
    PackedCoordinateSequenceFactory,
)

logger = logging.getLogger(__name__)


# =============================================================================
# MODEL
# =============================================================================


class SequenceFactoryKind(str, Enum):
    """Sequence implementation built by the default factory."""

    ARRAY = "array"
    PACKED_DOUBLE = "packed_double"
    PACKED_FLOAT = "packed_float"


class CoordinateDefaults(BaseModel):
    """
    Process-wide coordinate defaults.

    Mirrors contracts/schema/coordinate_defaults.json.
    """

    sequence_factory: SequenceFactoryKind = Field(
        SequenceFactoryKind.ARRAY, description="Default sequence implementation"
    )
    max_ordinates: str = Field(
        "XYZM", description="Name of the largest Ordinates mask created"
    )
    comparator_dimension_limit: Optional[int] = Field(
        None, ge=2, description="Ordinates compared per coordinate (None: all)"
    )
    log_level: str = Field("WARNING", description="Level of the geomcore logger")

    model_config = {"frozen": True}

    @field_validator("max_ordinates")
    @classmethod
    def _known_mask(cls, value: str) -> str:
        # raises ValueError for unknown names
        return Ordinates.parse(value).name

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.upper()
        if level not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(f"Unknown log level: {value!r}")
        return level

    @property
    def ordinates(self) -> Ordinates:
        return Ordinates.parse(self.max_ordinates)

    def build_factory(self) -> CoordinateSequenceFactory:
        """Sequence factory described by these defaults."""
        if self.sequence_factory is SequenceFactoryKind.PACKED_DOUBLE:
            return PackedCoordinateSequenceFactory("float64", self.ordinates)
        if self.sequence_factory is SequenceFactoryKind.PACKED_FLOAT:
            return PackedCoordinateSequenceFactory("float32", self.ordinates)
        return CoordinateArraySequenceFactory(self.ordinates)

    def build_comparator(self) -> CoordinateSequenceComparator:
        return CoordinateSequenceComparator(self.comparator_dimension_limit)


# =============================================================================
# LOADING
# =============================================================================


def parse_defaults(data: dict[str, Any]) -> CoordinateDefaults:
    """
    Build defaults from an already parsed JSON document.

    Raises:
        ConfigurationError: If the document violates the coordinate_defaults
            schema or holds values the model rejects
    """
    try:
        validate_coordinate_defaults(data)
    except SchemaValidationError as e:
        raise ConfigurationError(f"Invalid coordinate defaults: {e.message}") from e

    try:
        return CoordinateDefaults.model_validate(data)
    except ValidationError as e:
        raise ConfigurationError(f"Invalid coordinate defaults: {e}") from e


def load_defaults(path: str | Path) -> CoordinateDefaults:
    """
    Read defaults from a JSON file.

    Raises:
        FileNotFoundError: If the file does not exist
        ConfigurationError: If the file is not JSON or fails validation
    """
    with open(path, "r", encoding="utf-8") as f:
        try:
            data = json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigurationError(f"Coordinate defaults file {path} is not JSON: {e}") from e

    if not isinstance(data, dict):
        raise ConfigurationError(f"Coordinate defaults file {path} must hold a JSON object")
    return parse_defaults(data)


# =============================================================================
# PROCESS-WIDE STATE
# =============================================================================

_defaults: CoordinateDefaults | None = None
_factory: CoordinateSequenceFactory | None = None
_comparator: CoordinateSequenceComparator | None = None


def _install(defaults: CoordinateDefaults) -> None:
    global _defaults, _factory, _comparator

    _defaults = defaults
    _factory = defaults.build_factory()
    _comparator = defaults.build_comparator()
    logger.debug(
        "coordinate defaults installed",
        extra={"extra": defaults.model_dump(mode="json")},
    )
    logging.getLogger(ROOT_LOGGER_NAME).setLevel(defaults.log_level)


def configure_defaults(
    defaults: CoordinateDefaults | None = None, **overrides: Any
) -> CoordinateDefaults:
    """
    Install the process-wide defaults.

    Args:
        defaults: Complete defaults (built-in values when None)
        **overrides: Field values replacing those of `defaults`

    Returns:
        The installed defaults

    Raises:
        ConfigurationError: If defaults were already configured or read, or
            if an override is invalid
    """
    if _defaults is not None:
        raise ConfigurationError(
            "coordinate defaults are already in use; configure them once, "
            "before the first read"
        )

    base = defaults if defaults is not None else CoordinateDefaults()
    if overrides:
        try:
            base = CoordinateDefaults.model_validate({**base.model_dump(), **overrides})
        except ValidationError as e:
            raise ConfigurationError(f"Invalid coordinate defaults: {e}") from e

    _install(base)
    return base


def get_defaults() -> CoordinateDefaults:
    """The installed defaults (built-in values are installed on first read)."""
    if _defaults is None:
        _install(CoordinateDefaults())
    return _defaults


def get_default_factory() -> CoordinateSequenceFactory:
    get_defaults()
    return _factory


def get_default_comparator() -> CoordinateSequenceComparator:
    get_defaults()
    return _comparator


def reset_defaults() -> None:
    """Forget the installed defaults and the logger level they set."""
    global _defaults, _factory, _comparator

    _defaults = None
    _factory = None
    _comparator = None
    logging.getLogger(ROOT_LOGGER_NAME).setLevel(logging.NOTSET)
