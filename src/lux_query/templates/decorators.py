"""
Template Decorators - register pre-composed query builders.

Example:
    @template("itemsProducedByAgent", Scope.ITEM)
    def items_produced_by_agent(agent_id):
        return by_id("producedBy", agent_id)

The builder may leave the root scope unset; the decorator tags the tree
with the declared scope and rejects a tree rooted anywhere else.
"""

from functools import wraps
from typing import Any, Callable, Optional

from ..lux_exceptions import InvalidValue
from ..models import scope_name
from ..query.nodes import QueryNode, node_scope, with_scope
from .registry import TemplateLibrary, TemplateSpec, template_library


def template(
    name: str,
    scope: Any,
    description: str = "",
    library: Optional[TemplateLibrary] = None,
) -> Callable:
    """
    Decorator to define a named query template.

    Args:
        name: Unique template name (used for lookup)
        scope: Scope the query is rooted at (a Scope, or "multi")
        description: Human-readable description; defaults to the docstring
        library: Library to register into (default: the packaged catalogue)

    Returns:
        The wrapped builder, with its TemplateSpec as .template_spec
    """
    root = scope_name(scope)

    def decorator(func: Callable[[str], QueryNode]) -> Callable[[str], QueryNode]:
        desc = description or (func.__doc__ or "").strip().split("\n")[0]

        @wraps(func)
        def builder(identifier: str) -> QueryNode:
            node = func(identifier)
            declared = node_scope(node)
            if declared is None:
                return with_scope(node, root)
            if declared != root:
                raise InvalidValue(
                    f"Template {name!r} is declared for {root!r} but built a "
                    f"{declared!r} query",
                    value=identifier,
                )
            return node

        spec = TemplateSpec(name=name, scope=root, builder=builder, description=desc)
        (library if library is not None else template_library).register(spec)
        builder.template_spec = spec
        return builder

    return decorator
