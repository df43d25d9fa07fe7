"""
Predicate expression parser - Lark-based parser for registry predicates.

Term definitions name their underlying relation as a namespaced call,
e.g. ``lux("agentOfProduction")``. This module turns those expressions
into Predicate values carrying the compact (curie) and full IRI forms.
"""

from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Dict, Optional

from lark import Lark, Transformer
from lark.exceptions import UnexpectedInput

from .lux_exceptions import SchemaError


NAMESPACES: Dict[str, str] = {
    "lux": "https://lux.collections.yale.edu/ns/",
    "crm": "http://www.cidoc-crm.org/cidoc-crm/",
    "la": "https://linked.art/ns/terms/",
    "skos": "http://www.w3.org/2004/02/skos/core#",
}


@dataclass(frozen=True)
class Predicate:
    """A parsed relation predicate."""
    namespace: str
    local_name: str

    @property
    def curie(self) -> str:
        return f"{self.namespace}:{self.local_name}"

    @property
    def iri(self) -> str:
        return NAMESPACES[self.namespace] + self.local_name

    def __str__(self) -> str:
        return self.curie


def unquote(s: str) -> str:
    """Remove surrounding single or double quotes from a string."""
    if len(s) >= 2 and s[0] == s[-1] and s[0] in ("'", '"'):
        return s[1:-1]
    return s


class PredicateTransformer(Transformer):
    """Transforms the parse tree of one expression into a Predicate."""

    def namespace(self, children):
        return str(children[0])

    def local_name(self, children):
        return unquote(str(children[0]))

    def start(self, children):
        namespace, local_name = children
        return Predicate(namespace=namespace, local_name=local_name)


class PredicateParser:
    """
    Parser for registry predicate expressions.

    Usage:
        parser = PredicateParser()
        predicate = parser.parse('crm("P45_consists_of")')
        predicate.curie   # 'crm:P45_consists_of'
    """

    _instance: Optional["PredicateParser"] = None
    _parser: Optional[Lark] = None

    def __new__(cls) -> "PredicateParser":
        """Singleton pattern for parser reuse."""
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self):
        """Initialize the parser with the grammar file."""
        if PredicateParser._parser is not None:
            return

        grammar_path = Path(__file__).parent / "predicate.lark"
        with open(grammar_path, "r", encoding="utf-8") as f:
            grammar = f.read()

        PredicateParser._parser = Lark(
            grammar,
            start="start",
            parser="lalr",
            transformer=PredicateTransformer(),
        )

    def parse(self, expression: str) -> Predicate:
        """
        Parse one predicate expression.

        Raises:
            SchemaError: if the expression is malformed or its namespace unknown
        """
        if not isinstance(expression, str) or not expression.strip():
            raise SchemaError(f"Empty predicate expression: {expression!r}")

        try:
            predicate = PredicateParser._parser.parse(expression)
        except UnexpectedInput as e:
            raise SchemaError(
                f"Malformed predicate expression {expression!r} at column {e.column}"
            ) from e

        if predicate.namespace not in NAMESPACES:
            raise SchemaError(
                f"Unknown predicate namespace {predicate.namespace!r} in {expression!r}; "
                f"expected one of: {', '.join(sorted(NAMESPACES))}"
            )
        return predicate


@lru_cache(maxsize=1024)
def parse_predicate(expression: str) -> Predicate:
    """Parse a predicate expression, caching results (the registry repeats many)."""
    return PredicateParser().parse(expression)
