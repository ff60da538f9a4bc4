"""Forest construction from flat component records."""

from .builder import TreeBuilder, TreeBuildResult, TreeWarning, WarningKind, build_tree

__all__ = ["TreeBuilder", "TreeBuildResult", "TreeWarning", "WarningKind", "build_tree"]
