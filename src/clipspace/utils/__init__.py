"""Common utilities."""

from .conversion import (
    to_torch_tensor,
    to_numpy_array,
)
from .validation import (
    validate_points,
    validate_viewport,
)
from .debug import (
    is_debug_enabled,
    debug_print,
    debug_matrix_info,
    get_array_stats,
)

__all__ = [
    # Conversion
    "to_torch_tensor",
    "to_numpy_array",

    # Validation
    "validate_points",
    "validate_viewport",

    # Debug
    "is_debug_enabled",
    "debug_print",
    "debug_matrix_info",
    "get_array_stats",
]
