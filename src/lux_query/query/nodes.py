"""
Query tree nodes and their wire form.

A compiled query is a tree of Leaf, Hop and BooleanNode values, with
Identifier terminating hops that point at a single record. Nodes are
frozen; trees are built bottom-up and never mutated.

Wire form (consumed by the search executor):

    {"_scope": "item", "OR": [{"producedBy": {"id": "agent:9"}}, ...]}

A boolean node is keyed by AND/OR; a leaf or hop is keyed by its term
name; "_scope" appears at the root of every independently scoped subtree.
"""

from dataclasses import dataclass, replace
from typing import Any, Dict, Optional, Tuple, Union

from ..lux_exceptions import InvalidValue
from ..models import MULTI_SCOPE, BoolOp, Comparator, scope_name

SCOPE_KEY = "_scope"
COMPARATOR_KEY = "_comp"


@dataclass(frozen=True)
class Identifier:
    """Reference to one record by its id (serialised as {"id": ...})."""
    id: str

    def __post_init__(self):
        if not isinstance(self.id, str) or not self.id:
            raise InvalidValue(f"Identifier must be a non-empty string, got {self.id!r}", value=self.id)


@dataclass(frozen=True)
class Leaf:
    """Direct field match."""
    term: str
    value: Any
    scope: Optional[str] = None
    field: Optional[str] = None
    full_text: bool = False
    comparator: Optional[Comparator] = None


@dataclass(frozen=True)
class Hop:
    """Traversal of one relation, constrained by target."""
    term: str
    target: "Target"
    scope: Optional[str] = None
    field: Optional[str] = None
    target_scope: Optional[str] = None


@dataclass(frozen=True)
class BooleanNode:
    """AND / OR over an ordered sequence of children."""
    op: BoolOp
    children: Tuple["QueryNode", ...] = ()
    scope: Optional[str] = None

    def __post_init__(self):
        if not isinstance(self.children, tuple):
            object.__setattr__(self, "children", tuple(self.children))


QueryNode = Union[Leaf, Hop, BooleanNode]
Target = Union[Identifier, Leaf, Hop, BooleanNode]


# ============================================================================
# Construction helpers
# ============================================================================

def by_id(term: str, identifier: str) -> Hop:
    """Hop on term to the record with the given id."""
    return Hop(term=term, target=Identifier(identifier))


def hop(term: str, target: Target) -> Hop:
    return Hop(term=term, target=target)


def leaf(term: str, value: Any) -> Leaf:
    return Leaf(term=term, value=value)


def any_of(*children: Target, scope: Any = None) -> BooleanNode:
    return BooleanNode(BoolOp.OR, tuple(children), scope=scope_name(scope))


def all_of(*children: Target, scope: Any = None) -> BooleanNode:
    return BooleanNode(BoolOp.AND, tuple(children), scope=scope_name(scope))


def with_scope(node: QueryNode, scope: Any) -> QueryNode:
    """Copy of node tagged with scope."""
    return replace(node, scope=scope_name(scope))


def node_scope(node: Target) -> Optional[str]:
    return getattr(node, "scope", None)


# ============================================================================
# Serialisation
# ============================================================================

def to_wire(node: Target, context_scope: Any = None) -> Dict[str, Any]:
    """
    Serialise a node to the executor's nested-object form.

    Args:
        node: Node to serialise
        context_scope: Scope the enclosing node evaluates node in; "_scope"
            is emitted only where node's scope differs from it

    Returns:
        Plain dict/list/scalar structure, safe to json.dumps
    """
    context = scope_name(context_scope)

    if isinstance(node, Identifier):
        return {"id": node.id}

    wire: Dict[str, Any] = {}
    scope = node_scope(node)
    if scope is not None and scope != context:
        wire[SCOPE_KEY] = scope
    inner = scope if scope is not None else context

    if isinstance(node, Leaf):
        wire[node.term] = node.value
        if node.comparator is not None:
            wire[COMPARATOR_KEY] = node.comparator.value
    elif isinstance(node, Hop):
        target_context = node.target_scope
        wire[node.term] = to_wire(node.target, target_context)
    elif isinstance(node, BooleanNode):
        wire[node.op.value] = [to_wire(child, inner) for child in node.children]
    else:
        raise TypeError(f"Not a query node: {node!r}")
    return wire


def iter_nodes(node: Target):
    """Depth-first walk over node and everything beneath it."""
    yield node
    if isinstance(node, Hop):
        yield from iter_nodes(node.target)
    elif isinstance(node, BooleanNode):
        for child in node.children:
            yield from iter_nodes(child)


def check_scope_nesting(node: Target) -> None:
    """
    Verify the tree is rooted at a scope and stays in one scope per subtree.

    Only a root OR tagged "multi" may have children in different scopes,
    and each of those children must declare its own scope.

    Raises:
        InvalidValue: if the rule is violated
    """
    root_scope = node_scope(node)
    if root_scope is None:
        raise InvalidValue("Query tree is not rooted at a declared _scope", value=node)

    if root_scope == MULTI_SCOPE:
        if not isinstance(node, BooleanNode) or node.op is not BoolOp.OR:
            raise InvalidValue("A multi-scope query must be an OR at the top level", value=node)
        for child in node.children:
            child_scope = node_scope(child)
            if child_scope is None or child_scope == MULTI_SCOPE:
                raise InvalidValue(
                    "Each branch of a multi-scope query must declare its own _scope",
                    value=child,
                )
            _check_subtree(child, child_scope)
        return

    _check_subtree(node, root_scope)


def _check_subtree(node: Target, scope: str) -> None:
    if isinstance(node, Identifier):
        return
    declared = node_scope(node)
    if declared is not None and declared != scope:
        raise InvalidValue(
            f"Nested node declares _scope {declared!r} inside a {scope!r} subtree",
            value=node,
        )
    if isinstance(node, Hop):
        if node.target_scope is not None:
            _check_subtree(node.target, node.target_scope)
        else:
            # Target scope unknown (hand-composed): only reject multi below the root
            for inner in iter_nodes(node.target):
                if node_scope(inner) == MULTI_SCOPE:
                    raise InvalidValue("multi scope is only legal at the top level", value=inner)
    elif isinstance(node, BooleanNode):
        for child in node.children:
            _check_subtree(child, scope)
