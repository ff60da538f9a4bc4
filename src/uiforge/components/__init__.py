"""Component records and their normalization."""

from .models import ComponentRecord, TreeNode, Scalar, ScalarMap, format_scalar
from .normalize import coerce_records, flatten_records

__all__ = [
    "ComponentRecord",
    "TreeNode",
    "Scalar",
    "ScalarMap",
    "format_scalar",
    "coerce_records",
    "flatten_records",
]
