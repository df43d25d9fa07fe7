"""
Relation Resolver - display labels for relation keys.

Total by construction: a key missing from the curated table falls back
to a label derived from its first term ("fooBar-baz" -> "Foo Bar").
"""

import re
from types import MappingProxyType
from typing import Iterator, Mapping, Optional

from ..logging_config import configure_logger_for_debug_trace
from .relation_names import RELATION_NAMES

logger = configure_logger_for_debug_trace(__name__)

# Lower/digit followed by upper, or the last capital of an acronym before a word
_WORD_BOUNDARY = re.compile(r"(?<=[a-z0-9])(?=[A-Z])|(?<=[A-Z])(?=[A-Z][a-z])")

FALLBACK_LABEL = "Related"


def camel_case_to_words(value: str) -> str:
    """Split a camelCase identifier at its case boundaries."""
    return " ".join(part for part in _WORD_BOUNDARY.split(value) if part)


def uppercase_first_character(value: str) -> str:
    return value[:1].upper() + value[1:]


class RelationLabelTable(Mapping[str, str]):
    """
    Read-only mapping from relation key to display label.

    ::: This is-in-layer Domain-Layer.
    ::: This is a value-object.
    ::: This is stateless.
    """

    def __init__(self, labels: Mapping[str, str]):
        self._labels = MappingProxyType(dict(labels))

    @classmethod
    def default(cls) -> "RelationLabelTable":
        return cls(RELATION_NAMES)

    def __getitem__(self, key: str) -> str:
        return self._labels[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._labels)

    def __len__(self) -> int:
        return len(self._labels)


class RelationResolver:
    """
    Resolves relation keys ("<sourceTerm>-<targetTerm>") to labels.

    ::: This is-in-layer Domain-Layer.
    ::: This is a resolver.
    ::: This is stateless.
    """

    def __init__(self, table: Optional[RelationLabelTable] = None):
        self._table = table if table is not None else RelationLabelTable.default()

    @property
    def table(self) -> RelationLabelTable:
        return self._table

    def resolve_label(self, relation_key: str) -> str:
        """Return the curated label, else one derived from the key's first term."""
        label = self._table.get(relation_key)
        if label:
            return label

        first_term = relation_key.split("-", 1)[0]
        derived = uppercase_first_character(camel_case_to_words(first_term))
        if not derived:
            # Keys such as "-foo" carry no first term
            derived = uppercase_first_character(
                camel_case_to_words(relation_key.replace("-", ""))
            ) or FALLBACK_LABEL
        logger.debug("No curated label for %r; derived %r", relation_key, derived)
        return derived

    def label_for(self, source_term: str, target_term: str) -> str:
        return self.resolve_label(f"{source_term}-{target_term}")
