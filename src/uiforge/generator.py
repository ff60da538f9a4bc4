"""Code Generator - records in, source text out."""

from dataclasses import dataclass, field, replace
from typing import Any, Iterable, Mapping

from .core import LogContext, LRUCache, Settings, Stats, get_logger, get_settings, hash_fields, safe_json_dumps
from .components import ComponentRecord, coerce_records, flatten_records
from .emitter import EmitOptions, emit
from .tree import TreeWarning, build_tree

logger = get_logger(__name__)

RecordsInput = Iterable[ComponentRecord | Mapping[str, Any]]
OptionsInput = EmitOptions | Mapping[str, Any] | None


@dataclass(frozen=True)
class GenerationResult:
    """Generated source plus the diagnostics collected while building the tree."""

    code: str
    warnings: list[TreeWarning] = field(default_factory=list)
    cached: bool = False


class CodeGenerator:
    """Generates code for a design, memoizing results per design fingerprint.

    The editor calls this on every change; identical designs (same records in
    the same order with the same options) are served from the cache.
    """

    def __init__(self, settings: Settings | None = None, enable_cache: bool | None = None) -> None:
        self.settings = settings or get_settings()
        if enable_cache is None:
            enable_cache = self.settings.enable_cache
        self.cache: LRUCache[GenerationResult] | None = (
            LRUCache(max_size=self.settings.cache_size, ttl_seconds=self.settings.cache_ttl)
            if enable_cache
            else None
        )

        logger.info("initialized", cache=enable_cache)

    def generate(self, records: RecordsInput, options: OptionsInput = None) -> GenerationResult:
        """
        Generate source text for a design.

        Args:
            records: Flat records with ``parent_id`` links, pre-nested records,
                or raw mappings of either
            options: EmitOptions, a mapping of overrides, or None for defaults

        Returns:
            GenerationResult

        Raises:
            ValidationError: If an item cannot be read as a component record
        """
        flat = flatten_records(coerce_records(records))
        emit_options = EmitOptions.coerce(options, self.settings)

        key = self._fingerprint(flat, emit_options) if self.cache is not None else None
        if key is not None:
            cached = self.cache.get(key)
            if cached is not None:
                logger.debug("cache_hit", key=key)
                return replace(cached, cached=True)

        with LogContext(framework=emit_options.framework.value):
            tree = build_tree(flat)
            result = GenerationResult(code=emit(tree.roots, emit_options), warnings=tree.warnings)

        if key is not None:
            self.cache.set(key, result)
        return result

    def clear_cache(self) -> None:
        if self.cache is not None:
            self.cache.clear()

    @property
    def cache_stats(self) -> Stats | None:
        return self.cache.stats if self.cache is not None else None

    @staticmethod
    def _fingerprint(records: list[ComponentRecord], options: EmitOptions) -> str:
        payload = [record.model_dump(mode="json") for record in records]
        return hash_fields(
            safe_json_dumps(options.model_dump(mode="json")),
            safe_json_dumps(payload),
        )


def generate_code(records: RecordsInput, options: OptionsInput = None) -> str:
    """
    One-shot code generation without caching.

    Example:
        >>> generate_code([{"id": "t", "type": "text", "props": {"children": "Hi"}}],
        ...               {"framework": "html"})
    """
    return CodeGenerator(enable_cache=False).generate(records, options).code
