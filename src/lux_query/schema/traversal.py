"""
Bounded path enumeration over the scope graph.

Scopes are nodes and hopWithField terms are directed edges. The graph is
cyclic (agents reach works reach agents), so enumeration iterates path
length explicitly up to a hard cap instead of recursing.
"""

from dataclasses import dataclass
from typing import TYPE_CHECKING, Dict, List, Sequence, Tuple

from ..models import Scope, TermDefinition

if TYPE_CHECKING:
    from .scope_schema import ScopeSchema


@dataclass(frozen=True)
class HopPath:
    """A chain of hop terms leading from one scope to another."""
    origin: Scope
    terms: Tuple[TermDefinition, ...]

    def __len__(self) -> int:
        return len(self.terms)

    @property
    def scopes(self) -> Tuple[Scope, ...]:
        """Origin followed by the scope each hop lands on."""
        return (self.origin,) + tuple(t.target_scope for t in self.terms)

    @property
    def intermediate_scopes(self) -> Tuple[Scope, ...]:
        return self.scopes[1:-1]

    @property
    def relation_key(self) -> str:
        return "-".join(t.name for t in self.terms)


def enumerate_paths(
    schema: "ScopeSchema",
    origin: Scope,
    target_scope: Scope,
    in_between: Sequence[Scope],
    max_level: int,
) -> List[List[HopPath]]:
    """
    Enumerate every hop chain from origin to target_scope.

    A chain has 1..max_level hops; every scope it passes through before
    the last hop is one of in_between and never the origin itself.

    Returns:
        One list per path length (index 0 holds single-hop chains). Within
        a length, chains are ordered by the position of their intermediate
        scopes in in_between, then by the declaration order of their terms.
    """
    if max_level < 1:
        return []

    allowed = {scope: i for i, scope in enumerate(in_between) if scope != origin}
    term_position: Dict[Tuple[Scope, str], int] = {}

    def hops(scope: Scope) -> Tuple[TermDefinition, ...]:
        result = schema.hops_from(scope)
        for i, term in enumerate(result):
            term_position.setdefault((scope, term.name), i)
        return result

    def sort_key(path: HopPath):
        return (
            tuple(allowed[s] for s in path.intermediate_scopes),
            tuple(term_position[(t.scope, t.name)] for t in path.terms),
        )

    grouped: List[List[HopPath]] = []
    frontier: List[Tuple[TermDefinition, ...]] = [()]

    for level in range(1, max_level + 1):
        complete: List[HopPath] = []
        extended: List[Tuple[TermDefinition, ...]] = []
        for partial in frontier:
            here = partial[-1].target_scope if partial else origin
            for term in hops(here):
                chain = partial + (term,)
                if term.target_scope == target_scope:
                    complete.append(HopPath(origin=origin, terms=chain))
                if level < max_level and term.target_scope in allowed:
                    extended.append(chain)
        complete.sort(key=sort_key)
        grouped.append(complete)
        frontier = extended
        if not frontier:
            break

    # Pad so index == length - 1 holds for every length up to the cap
    while len(grouped) < max_level:
        grouped.append([])
    return grouped
