"""
uiforge - component tree construction and code generation for a visual UI builder.
"""

from .components import ComponentRecord, TreeNode, coerce_records, flatten_records
from .tree import TreeBuildResult, TreeWarning, WarningKind, build_tree
from .emitter import EmitOptions, Framework, emit
from .generator import CodeGenerator, GenerationResult, generate_code

__version__ = "0.1.0"

__all__ = [
    "ComponentRecord",
    "TreeNode",
    "coerce_records",
    "flatten_records",
    "TreeBuildResult",
    "TreeWarning",
    "WarningKind",
    "build_tree",
    "EmitOptions",
    "Framework",
    "emit",
    "CodeGenerator",
    "GenerationResult",
    "generate_code",
]
