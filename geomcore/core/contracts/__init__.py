"""
Contract Validation Module

JSON Schema validation of the documents geomcore reads.
"""

from .validators import (
    ContractValidator,
    CoordinateDefaultsValidator,
    SchemaLoader,
    validate_coordinate_defaults,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "CoordinateDefaultsValidator",
    # Functions
    "validate_coordinate_defaults",
]
