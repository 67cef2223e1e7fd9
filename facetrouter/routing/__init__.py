"""Path decomposition and argument mapping for facet routing."""

from .arguments import expand_arguments
from .config import EnhancerConfig, RoutingSettings, load_settings
from .enhancers import select_enhancer
from .pages import resolve_page
from .paths import decompose_path, parse_placeholder
from .rewriter import RequestRewriter, RewriteResult
from .types import Outcome, PageCandidate, PageMatch, ParsedPath

__all__ = [
    "EnhancerConfig",
    "Outcome",
    "PageCandidate",
    "PageMatch",
    "ParsedPath",
    "RequestRewriter",
    "RewriteResult",
    "RoutingSettings",
    "decompose_path",
    "expand_arguments",
    "load_settings",
    "parse_placeholder",
    "resolve_page",
    "select_enhancer",
]
