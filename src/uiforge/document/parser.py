"""Design Parser - persisted design JSON to records and options."""

from typing import Any
from pydantic import BaseModel, ConfigDict, Field
from returns.result import Result, Success, Failure

from ..core import (
    DesignValidator,
    JSONParseError,
    Settings,
    ValidationError,
    ValidationResult,
    extract_json,
    get_logger,
    get_settings,
)
from ..components import ComponentRecord, coerce_records
from ..emitter import EmitOptions

logger = get_logger(__name__)


class Design(BaseModel):
    """A saved design: its components and, optionally, code options."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(default="Untitled Project")
    components: list[ComponentRecord] = Field(default_factory=list)
    options: EmitOptions | None = Field(default=None)


class DesignParser:
    """Parses design documents exported by the editor.

    Accepted shape::

        {
          "name": "Landing page",
          "components": [{"id": "root", "type": "div", ...}, ...],
          "codeOptions": {"framework": "html", "includeStyles": true}
        }

    ``options`` is accepted in place of ``codeOptions``. Markdown fences
    around the JSON and small syntax damage are tolerated.
    """

    def __init__(self, settings: Settings | None = None) -> None:
        self.settings = settings or get_settings()
        self.validator = DesignValidator(
            max_size=self.settings.max_document_size,
            max_depth=self.settings.max_document_depth,
        )

    def parse(self, content: str) -> Design:
        """
        Parse design JSON.

        Args:
            content: JSON content string

        Returns:
            Design with validated component records

        Raises:
            ValidationError: If the document cannot be read
        """
        try:
            document = extract_json(content, repair=True)
        except JSONParseError as e:
            logger.error("json_parse_failed", error=str(e))
            raise ValidationError(f"Invalid JSON: {e}") from e

        self.validator.validate(document, content)

        components = coerce_records(document["components"])
        options = self._parse_options(document.get("codeOptions", document.get("options")))
        name = document.get("name")

        logger.info("design_parsed", components=len(components), has_options=options is not None)
        return Design(
            name=name if isinstance(name, str) and name else "Untitled Project",
            components=components,
            options=options,
        )

    def _parse_options(self, raw: dict[str, Any] | None) -> EmitOptions | None:
        if raw is None:
            return None
        try:
            return EmitOptions.coerce(raw, self.settings)
        except ValueError as e:
            # pydantic.ValidationError subclasses ValueError
            raise ValidationError(f"Invalid code options: {e}") from e


def parse_design(content: str) -> Design:
    """Convenience function to parse a design document."""
    return DesignParser().parse(content)


def try_parse_design(content: str) -> Result[Design, ValidationResult]:
    """Parse a design document (Result pattern version)."""
    try:
        return Success(DesignParser().parse(content))
    except ValidationError as e:
        return Failure(ValidationResult(str(e)))
