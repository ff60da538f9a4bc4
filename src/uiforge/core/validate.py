"""Design document validation."""

from dataclasses import dataclass
from typing import Any

from .json import JSONParseError, validate_json_size, validate_json_depth


# Validation limits
MAX_DOCUMENT_SIZE = 2 * 1024 * 1024  # 2MB
MAX_DOCUMENT_DEPTH = 64


class ValidationError(Exception):
    """Validation failed."""

    pass


@dataclass(frozen=True)
class ValidationResult:
    """Validation error with details (for Result pattern)."""

    message: str
    field: str | None = None
    value: Any | None = None


class DesignValidator:
    """Validates the envelope of a persisted design document."""

    def __init__(
        self,
        max_size: int = MAX_DOCUMENT_SIZE,
        max_depth: int = MAX_DOCUMENT_DEPTH,
    ) -> None:
        self.max_size = max_size
        self.max_depth = max_depth

    def validate(self, document: dict[str, Any], raw: str) -> None:
        """
        Validate a parsed design document.

        Args:
            document: Parsed document
            raw: Original text (for the size check)

        Raises:
            ValidationError: If validation fails
        """
        try:
            validate_json_size(raw, self.max_size, "Design document")
            validate_json_depth(document, self.max_depth)
        except JSONParseError as e:
            raise ValidationError(str(e)) from e

        if "components" not in document:
            raise ValidationError("Design document missing required 'components' field")

        if not isinstance(document["components"], list):
            raise ValidationError("Design document 'components' must be a list")

        options = document.get("codeOptions", document.get("options"))
        if options is not None and not isinstance(options, dict):
            raise ValidationError("Design document 'codeOptions' must be an object")

