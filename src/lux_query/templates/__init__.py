"""
Query template library.

Named, pre-composed query trees keyed by a record identifier, plus the
related-link estimates and search URLs built from them.

Usage:
    from lux_query.templates import get_template_library

    library = get_template_library()
    tree = library.build("itemsProducedByAgent", "https://lux.example/agent/9")
"""

from .registry import TemplateLibrary, TemplateSpec, get_template_library, template_library
from .decorators import template
from .estimates import (
    ESTIMATE_LINKS,
    HAL_LINKS,
    LinkBuilder,
    LinkSpec,
    build_estimates_query,
    build_hal_link,
    build_related_list_link,
    build_search_link,
    combine_estimates,
    estimate_templates,
    prepare_query,
    scope_for_record_type,
    split_estimates,
)

# Register the packaged catalogue
from . import agents, archives, concepts, events, items, places, sets, works  # noqa: F401,E402

__all__ = [
    "TemplateLibrary",
    "TemplateSpec",
    "get_template_library",
    "template_library",
    "template",
    "ESTIMATE_LINKS",
    "HAL_LINKS",
    "LinkBuilder",
    "LinkSpec",
    "build_estimates_query",
    "build_hal_link",
    "build_related_list_link",
    "build_search_link",
    "combine_estimates",
    "estimate_templates",
    "prepare_query",
    "scope_for_record_type",
    "split_estimates",
]
