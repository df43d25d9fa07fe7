"""
Service bootstrap.

Builds the registry, label resolver, compiler and template library once
from the resolved settings and hands them out together.

::: This is-in-layer Service-Layer.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

from .logging_config import configure_logger_for_debug_trace, reconfigure_logging
from .query.compiler import QueryCompiler
from .relations.resolver import RelationResolver
from .schema.scope_schema import ScopeSchema
from .services.config_loader import ConfigLoader, QuerySettings
from .templates.estimates import LinkBuilder
from .templates.registry import TemplateLibrary, get_template_library

logger = configure_logger_for_debug_trace(__name__)


@dataclass(frozen=True)
class QueryServices:
    """The immutable services a search front end needs.

    ::: This is-in-layer Service-Layer.
    ::: This is a value-object.
    ::: This is stateless.
    """
    settings: QuerySettings
    schema: ScopeSchema
    resolver: RelationResolver
    compiler: QueryCompiler
    library: TemplateLibrary
    links: LinkBuilder


def build_services(
    config: Optional[QuerySettings] = None,
    project_root: Optional[Union[str, Path]] = None,
) -> QueryServices:
    """
    Build the query services.

    Args:
        config: Settings to use; when None they are read from lux_query.json
            and the environment
        project_root: Where to look for lux_query.json (config=None only)

    Returns:
        QueryServices bundle

    Raises:
        LuxQueryError: invalid configuration
        SchemaError: invalid registry entries
    """
    if config is None:
        loader = ConfigLoader()
        loader.load(Path(project_root) if project_root is not None else None)
        config = loader.get_settings()

    if config.log_level or config.log_dir:
        reconfigure_logging(log_level=config.log_level, log_dir=config.log_dir)

    schema = ScopeSchema.load_default(
        include_generated=config.include_generated_terms,
        extra_terms_path=config.extra_terms_path,
    )
    library = get_template_library()
    services = QueryServices(
        settings=config,
        schema=schema,
        resolver=RelationResolver(),
        compiler=QueryCompiler(schema, clamp_levels=config.clamp_related_levels),
        library=library,
        links=LinkBuilder(library, host=config.search_uri_host),
    )
    logger.info(
        "Query services ready: %d templates, search host %s",
        len(library),
        config.search_uri_host,
    )
    return services
