"""
Template Registry - named, pre-composed query builders.

Templates are registered by the @template decorator (see decorators.py)
and looked up by their camelCase name, e.g. "itemsProducedByAgent".
"""

from dataclasses import dataclass
from typing import Callable, Dict, Iterator, List

from ..logging_config import configure_logger_for_debug_trace
from ..lux_exceptions import InvalidValue, UnknownTemplate
from ..models import scope_name
from ..query.nodes import QueryNode, check_scope_nesting, to_wire

logger = configure_logger_for_debug_trace(__name__)


@dataclass(frozen=True)
class TemplateSpec:
    """Registration record of one template."""
    name: str
    scope: str
    builder: Callable[[str], QueryNode]
    description: str = ""

    def __call__(self, identifier: str) -> QueryNode:
        return self.builder(identifier)


class TemplateLibrary:
    """
    Registry of query templates.

    ::: This is-in-layer Domain-Layer.
    ::: This is a registry.
    ::: This is stateless.

    Example:
        library.build("itemsProducedByAgent", "agent:9")
        library.by_scope("item")      # every item-scoped template
    """

    def __init__(self):
        self._templates: Dict[str, TemplateSpec] = {}
        self._by_scope: Dict[str, List[str]] = {}

    def register(self, spec: TemplateSpec) -> None:
        """
        Register a template specification.

        Re-registering a name replaces the earlier builder.
        """
        name = spec.name
        previous = self._templates.get(name)
        if previous is not None:
            logger.debug("Replacing template %r", name)
            self._by_scope[previous.scope].remove(name)

        self._templates[name] = spec
        self._by_scope.setdefault(spec.scope, []).append(name)

    def get(self, name: str) -> TemplateSpec:
        """
        Get a template by name.

        Raises:
            UnknownTemplate: if no template is registered under name
        """
        try:
            return self._templates[name]
        except KeyError:
            raise UnknownTemplate(name) from None

    def names(self) -> List[str]:
        return sorted(self._templates)

    def by_scope(self, scope) -> List[TemplateSpec]:
        """Templates rooted at scope, in registration order."""
        return [self._templates[n] for n in self._by_scope.get(scope_name(scope), [])]

    def build(self, name: str, identifier: str) -> QueryNode:
        """
        Build a template's query tree for one record.

        Raises:
            UnknownTemplate: unknown name
            InvalidValue: identifier is not a non-empty string, or the
                template produced an ill-scoped tree
        """
        spec = self.get(name)
        if not isinstance(identifier, str) or not identifier:
            raise InvalidValue(
                f"Template {name!r} expects a record identifier, got {identifier!r}",
                value=identifier,
            )
        node = spec.builder(identifier)
        check_scope_nesting(node)
        return node

    def build_wire(self, name: str, identifier: str) -> dict:
        """build() serialised to the executor's wire form."""
        return to_wire(self.build(name, identifier))

    def __contains__(self, name: object) -> bool:
        return name in self._templates

    def __iter__(self) -> Iterator[TemplateSpec]:
        return iter(list(self._templates.values()))

    def __len__(self) -> int:
        return len(self._templates)


# Library the catalogue modules register into
template_library = TemplateLibrary()


def get_template_library() -> TemplateLibrary:
    """Get the library holding the packaged catalogue."""
    # Importing the catalogue modules registers their templates
    from . import agents, archives, concepts, events, items, places, sets, works  # noqa: F401
    return template_library

