"""Code generation options."""

from enum import Enum
from typing import Any, Mapping
from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..core import Settings, get_logger, get_settings

logger = get_logger(__name__)


class Framework(str, Enum):
    """Output grammars."""

    REACT = "react"  # component markup (JSX)
    HTML = "html"  # static HTML document
    TAILWIND = "tailwind"  # utility-class HTML fragment

    @classmethod
    def _missing_(cls, value: object) -> "Framework":
        """Resolve aliases; anything unknown falls back to React."""
        key = str(value).strip().lower()
        for member in cls:
            if member.value == key:
                return member
        if key in _ALIASES:
            return cls(_ALIASES[key])
        logger.debug("unknown_framework", framework=value, fallback=cls.REACT.value)
        return cls.REACT


_ALIASES = {
    "component-markup": "react",
    "jsx": "react",
    "static-html": "html",
    "utility-html": "tailwind",
}


class EmitOptions(BaseModel):
    """Options for a single code generation."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    framework: Framework = Field(default=Framework.REACT)
    include_styles: bool = Field(default=True, alias="includeStyles")
    format: bool = Field(default=True, description="Indent output; False emits a single line")
    component_name: str = Field(default="MyComponent", alias="componentName", min_length=1)
    title: str = Field(default="Generated Component")

    @field_validator("framework", mode="before")
    @classmethod
    def resolve_framework(cls, v: Any) -> Framework:
        return v if isinstance(v, Framework) else Framework(v)

    @classmethod
    def from_settings(cls, settings: Settings | None = None) -> "EmitOptions":
        settings = settings or get_settings()
        return cls(
            framework=settings.default_framework,
            include_styles=settings.include_styles,
            format=settings.format_output,
            component_name=settings.component_name,
            title=settings.document_title,
        )

    @classmethod
    def coerce(
        cls,
        options: "EmitOptions | Mapping[str, Any] | None",
        settings: Settings | None = None,
    ) -> "EmitOptions":
        """Accept options as a model, a mapping of overrides, or None for defaults."""
        if isinstance(options, EmitOptions):
            return options
        defaults = cls.from_settings(settings)
        if options is None:
            return defaults

        overrides = dict(options)
        for name, info in cls.model_fields.items():
            if info.alias and info.alias in overrides:
                overrides[name] = overrides.pop(info.alias)
        return cls.model_validate({**defaults.model_dump(), **overrides})
