"""Component record models."""

from dataclasses import dataclass, field
from typing import Any, Iterator
from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator

from ..core.json import safe_json_dumps
from ..geometry import Point, Size

Scalar = str | int | float | bool | None
"""Value type of the props and styles maps."""

ScalarMap = dict[str, Scalar]

_SCALAR_TYPES = (str, int, float, bool)


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _coerce_scalar(value: Any) -> Scalar:
    if value is None or isinstance(value, _SCALAR_TYPES):
        return value
    return safe_json_dumps(value)


def format_scalar(value: Scalar) -> str:
    """Stringify a scalar the way a browser script would."""
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


class ComponentRecord(BaseModel):
    """A single design-canvas element as persisted by the editor."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    id: str = Field(..., min_length=1, description="Unique identifier")
    type: str = Field(default="div", description="Key into the component-type table")
    name: str = Field(default="", description="Human-readable label")
    category: str = Field(default="", description="Palette category")
    parent_id: str | None = Field(default=None, alias="parentId")
    props: ScalarMap = Field(default_factory=dict)
    styles: ScalarMap = Field(default_factory=dict)
    position: Point | None = Field(default=None)
    size: Size | None = Field(default=None)
    children: list["ComponentRecord"] = Field(default_factory=list)

    @field_validator("id", "parent_id", mode="before")
    @classmethod
    def stringify_ids(cls, v: Any) -> Any:
        """Accept numeric ids; an empty parent reference means no parent."""
        if _is_number(v):
            return format_scalar(v)
        if v == "":
            return None
        return v

    @field_validator("props", "styles", mode="before")
    @classmethod
    def coerce_map(cls, v: Any) -> ScalarMap:
        """Missing or malformed maps become empty; nested values become JSON text."""
        if not isinstance(v, dict):
            return {}
        return {str(k): _coerce_scalar(value) for k, value in v.items()}

    @field_validator("type", "name", "category", mode="before")
    @classmethod
    def default_labels(cls, v: Any, info: ValidationInfo) -> Any:
        """Null or non-string labels fall back to the field default."""
        if isinstance(v, str):
            return v
        if _is_number(v):
            return format_scalar(v)
        return cls.model_fields[info.field_name].default

    @field_validator("position", "size", mode="before")
    @classmethod
    def drop_malformed_geometry(cls, v: Any, info: ValidationInfo) -> Any:
        """Non-numeric members (e.g. ``"auto"``) are dropped one by one.

        A position member falls back to 0; a size member becomes auto (None),
        and a size with neither dimension is treated as absent.
        """
        if v is None or isinstance(v, (Point, Size)):
            return v
        if not isinstance(v, dict):
            return None
        if info.field_name == "position":
            return {key: v[key] if _is_number(v.get(key)) else 0 for key in ("x", "y")}

        values = {key: v[key] if _is_number(v.get(key)) else None for key in ("width", "height")}
        if all(value is None for value in values.values()):
            return None
        return values

    @field_validator("children", mode="before")
    @classmethod
    def coerce_children(cls, v: Any) -> Any:
        return v if isinstance(v, list) else []

    @property
    def text(self) -> str | None:
        """Literal content held in ``props['children']``, if any."""
        value = self.props.get("children")
        if value is None or value is False or value == "":
            return None
        return format_scalar(value)


ComponentRecord.model_rebuild()


@dataclass
class TreeNode:
    """A record placed in the derived forest."""

    record: ComponentRecord
    children: list["TreeNode"] = field(default_factory=list)

    @property
    def id(self) -> str:
        return self.record.id

    @property
    def type(self) -> str:
        return self.record.type

    def walk(self) -> Iterator["TreeNode"]:
        """Yield this node and its descendants in pre-order."""
        stack = [self]
        while stack:
            node = stack.pop()
            yield node
            stack.extend(reversed(node.children))
