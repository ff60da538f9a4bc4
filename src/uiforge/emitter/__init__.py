"""Code Emitter - renders a component forest into source text."""

from typing import Any, Iterable, Mapping

from ..core import get_logger
from ..components import TreeNode
from .base import Renderer
from .markup import MarkupRenderer
from .options import EmitOptions, Framework
from .static_html import StaticHTMLRenderer
from .utility import UtilityHTMLRenderer

logger = get_logger(__name__)

RENDERERS: dict[Framework, type[Renderer]] = {
    Framework.REACT: MarkupRenderer,
    Framework.HTML: StaticHTMLRenderer,
    Framework.TAILWIND: UtilityHTMLRenderer,
}


def emit(
    roots: Iterable[TreeNode],
    options: EmitOptions | Mapping[str, Any] | None = None,
) -> str:
    """
    Render a forest with the backend selected by ``options.framework``.

    Args:
        roots: Root nodes (a TreeBuildResult is accepted as well)
        options: EmitOptions, a mapping of overrides, or None for configured defaults

    Returns:
        Complete source text
    """
    options = EmitOptions.coerce(options)
    renderer = RENDERERS[options.framework](options)
    code = renderer.render(roots)
    logger.debug("code_emitted", framework=options.framework.value, length=len(code))
    return code


__all__ = [
    "emit",
    "EmitOptions",
    "Framework",
    "Renderer",
    "MarkupRenderer",
    "StaticHTMLRenderer",
    "UtilityHTMLRenderer",
    "RENDERERS",
]
