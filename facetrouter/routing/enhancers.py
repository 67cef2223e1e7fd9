"""Pick the route enhancer that applies to a resolved page."""

from __future__ import annotations

import logging
from typing import Any, Mapping, Optional

from .config import EnhancerConfig, RoutingSettings
from .types import EnhancerConfigStore

logger = logging.getLogger(__name__)


def select_enhancer(
    site: Any,
    page_id: int,
    store: EnhancerConfigStore,
    settings: RoutingSettings,
) -> Optional[EnhancerConfig]:
    """Return the first facet enhancer limited to ``page_id``, in declaration order."""

    declared = store.route_enhancers(site)
    if not declared or not isinstance(declared, Mapping):
        return None

    for name, raw in declared.items():
        if not raw or not isinstance(raw, Mapping):
            continue
        if raw.get("type") != settings.enhancer_type:
            continue

        config = EnhancerConfig.from_raw(name, raw, settings)
        if not config.applies_to(page_id):
            continue

        logger.debug("Enhancer %r applies to page %s", name, page_id)
        return config

    return None
