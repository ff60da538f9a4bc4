"""Boundary normalization: raw or pre-nested input to flat records."""

from typing import Any, Iterable, Mapping
from pydantic import ValidationError as PydanticValidationError

from ..core import ValidationError
from .models import ComponentRecord


def coerce_records(items: Iterable[ComponentRecord | Mapping[str, Any]]) -> list[ComponentRecord]:
    """
    Validate raw mappings into ComponentRecord models.

    Records that are already models pass through untouched.

    Raises:
        ValidationError: If an item cannot be read as a component record
    """
    records: list[ComponentRecord] = []
    for index, item in enumerate(items):
        if isinstance(item, ComponentRecord):
            records.append(item)
            continue
        if not isinstance(item, Mapping):
            raise ValidationError(
                f"Component at index {index} must be an object, got {type(item).__name__}"
            )
        try:
            records.append(ComponentRecord.model_validate(dict(item)))
        except PydanticValidationError as e:
            raise ValidationError(f"Invalid component at index {index}: {e}") from e
    return records


def flatten_records(records: Iterable[ComponentRecord]) -> list[ComponentRecord]:
    """
    Flatten pre-nested ``children`` lists into parent-referencing records.

    Output is pre-order: every container precedes its nested children, and
    siblings keep their order. A nested child inherits its container's id as
    ``parent_id`` unless it declares its own. Input records are not modified;
    records that carry nested children are replaced by copies without them.
    """
    flat: list[ComponentRecord] = []
    stack: list[tuple[ComponentRecord, str | None]] = [
        (record, None) for record in reversed(list(records))
    ]

    while stack:
        record, container_id = stack.pop()
        updates: dict[str, Any] = {}
        if record.children:
            updates["children"] = []
        if container_id is not None and record.parent_id is None:
            updates["parent_id"] = container_id
        flat.append(record.model_copy(update=updates) if updates else record)
        stack.extend((child, record.id) for child in reversed(record.children))

    return flat
