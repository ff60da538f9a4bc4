"""Tree Builder - flat parent-referencing records to a forest.

Structural anomalies never raise. A dangling parent reference, a reference
that would make a component its own ancestor, or a repeated id is reported
as a TreeWarning and the component is placed at the root level (or, for a
repeated id, skipped).
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable

from ..core import get_logger
from ..components import ComponentRecord, TreeNode

logger = get_logger(__name__)


class WarningKind(str, Enum):
    PARENT_NOT_FOUND = "parent_not_found"
    CYCLE_DETECTED = "cycle_detected"
    DUPLICATE_ID = "duplicate_id"


@dataclass(frozen=True)
class TreeWarning:
    """Non-fatal diagnostic produced while building the forest."""

    kind: WarningKind
    component_id: str
    message: str
    related_id: str | None = None

    def __str__(self) -> str:
        return self.message


@dataclass
class TreeBuildResult:
    roots: list[TreeNode] = field(default_factory=list)
    warnings: list[TreeWarning] = field(default_factory=list)

    def __iter__(self):
        return iter(self.roots)

    def __len__(self) -> int:
        return len(self.roots)


class TreeBuilder:
    """Builds a forest from flat records in a single pass."""

    def __init__(self, records: Iterable[ComponentRecord]) -> None:
        self._records: list[ComponentRecord] = []
        self._nodes: dict[str, TreeNode] = {}
        self._grounded: set[str] = set()
        self.warnings: list[TreeWarning] = []

        for record in records:
            if record.id in self._nodes:
                self._warn(
                    WarningKind.DUPLICATE_ID,
                    record.id,
                    f"Duplicate component id {record.id}, keeping first occurrence",
                )
                continue
            self._records.append(record)
            self._nodes[record.id] = TreeNode(record)

    def build(self) -> TreeBuildResult:
        roots: list[TreeNode] = []

        for record in self._records:
            node = self._nodes[record.id]
            parent_id = record.parent_id

            if parent_id is None:
                roots.append(node)
            elif parent_id not in self._nodes:
                self._warn(
                    WarningKind.PARENT_NOT_FOUND,
                    record.id,
                    f"Parent {parent_id} not found for component {record.id}, attaching to root",
                    related_id=parent_id,
                )
                roots.append(node)
            elif self._closes_cycle(record.id, parent_id):
                self._warn(
                    WarningKind.CYCLE_DETECTED,
                    record.id,
                    f"Cycle detected involving component {record.id}, attaching to root",
                    related_id=parent_id,
                )
                roots.append(node)
            else:
                self._nodes[parent_id].children.append(node)

        return TreeBuildResult(roots=roots, warnings=list(self.warnings))

    def _closes_cycle(self, component_id: str, parent_id: str) -> bool:
        """
        Check whether component_id is an ancestor of parent_id.

        Walks declared parent links upward from parent_id, tracking the nodes
        on this walk. Reaching component_id means attaching it would make it
        its own ancestor. Reaching a root, a dangling reference, a grounded
        node, or a cycle further up that does not contain component_id ends
        the walk without a cycle for this component.
        """
        path: set[str] = set()
        current: str | None = parent_id

        while current is not None and current in self._nodes:
            if current == component_id:
                return True
            if current in self._grounded:
                break
            if current in path:
                # Upstream cycle without component_id; its members are
                # broken when they are processed themselves.
                return False
            path.add(current)
            current = self._nodes[current].record.parent_id

        # Every node on this walk reaches a root (or grounded node) acyclically.
        self._grounded.update(path)
        return False

    def _warn(
        self,
        kind: WarningKind,
        component_id: str,
        message: str,
        related_id: str | None = None,
    ) -> None:
        self.warnings.append(TreeWarning(kind, component_id, message, related_id))
        logger.warning(kind.value, component_id=component_id, related_id=related_id)


def build_tree(records: Iterable[ComponentRecord]) -> TreeBuildResult:
    """
    Build a forest from flat, parent-referencing component records.

    Roots keep the relative order of the input; children appear in the order
    their records were encountered. Input records are never modified.

    Args:
        records: Flat component records

    Returns:
        TreeBuildResult with roots and warnings
    """
    return TreeBuilder(records).build()
