"""
Core math modules

Guards for machine integers entering the Peano representation.
"""

from peano.core.math.safeguards import (
    NATURAL_FLOOR,
    clamp_to_natural,
    is_machine_int,
    require_int,
    validate_in_range,
)

__all__ = [
    # Constants
    "NATURAL_FLOOR",
    # Type checks
    "is_machine_int",
    "require_int",
    # Clamp
    "clamp_to_natural",
    # Validation
    "validate_in_range",
]
