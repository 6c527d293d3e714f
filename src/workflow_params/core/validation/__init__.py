from .rules import compute_findings, validate_name, validate_parameter, validate_value
from .swagger import SwaggerValueValidator, validate_value_with_type

__all__ = [
    "compute_findings",
    "validate_name",
    "validate_parameter",
    "validate_value",
    "SwaggerValueValidator",
    "validate_value_with_type",
]
