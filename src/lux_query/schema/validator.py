"""
Schema Validator - consistency checks for the search-term registry.

This module validates a registry for:
- Closed-graph references (every targetScope / inBetweenScope is declared)
- Inverse bookkeeping (a hop's declared inverse exists and leads back)
- Reachability of relatedList terms within their maxLevel
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, List, Mapping, Optional

from ..models import PatternName, Scope, TermDefinition
from .traversal import enumerate_paths

if TYPE_CHECKING:
    from .scope_schema import ScopeSchema


# ============================================================
# VALIDATION RESULT TYPES
# ============================================================

class Severity(Enum):
    """Severity level for validation issues."""
    ERROR = "error"      # Registry unusable, blocks loading
    WARNING = "warning"  # Loads, but some compilations fail or are one-way
    INFO = "info"        # Informational


@dataclass
class ValidationIssue:
    """Represents a validation issue found in the registry."""
    severity: Severity
    message: str
    scope: Optional[str] = None
    term: Optional[str] = None
    suggestion: Optional[str] = None

    def __str__(self) -> str:
        loc = ""
        if self.scope:
            loc = f" at {self.scope}"
            if self.term:
                loc += f".{self.term}"

        msg = f"[{self.severity.value.upper()}]{loc}: {self.message}"
        if self.suggestion:
            msg += f"\n  Suggestion: {self.suggestion}"
        return msg


@dataclass
class ValidationResult:
    """Result of validating a registry."""
    valid: bool
    issues: List[ValidationIssue] = field(default_factory=list)

    @property
    def errors(self) -> List[ValidationIssue]:
        return [i for i in self.issues if i.severity == Severity.ERROR]

    @property
    def warnings(self) -> List[ValidationIssue]:
        return [i for i in self.issues if i.severity == Severity.WARNING]

    @property
    def error_count(self) -> int:
        return len(self.errors)

    @property
    def warning_count(self) -> int:
        return len(self.warnings)

    def __bool__(self) -> bool:
        return self.valid


# ============================================================
# CHECKS
# ============================================================

def check_references(
    tables: Mapping[Scope, Mapping[str, TermDefinition]],
) -> List[ValidationIssue]:
    """Report every scope reference that has no declared term table."""
    issues: List[ValidationIssue] = []
    declared = {scope for scope, terms in tables.items() if terms}

    for scope, terms in tables.items():
        for term in terms.values():
            if term.target_scope is not None and term.target_scope not in declared:
                issues.append(ValidationIssue(
                    severity=Severity.ERROR,
                    message=f"targetScope {term.target_scope.value!r} has no declared terms",
                    scope=scope.value,
                    term=term.name,
                ))
            for between in term.in_between_scopes:
                if between not in declared:
                    issues.append(ValidationIssue(
                        severity=Severity.ERROR,
                        message=f"inBetweenScopes entry {between.value!r} has no declared terms",
                        scope=scope.value,
                        term=term.name,
                    ))
    return issues


def _check_inverse(schema: "ScopeSchema", term: TermDefinition) -> Optional[ValidationIssue]:
    if term.inverse_term_name is None:
        return ValidationIssue(
            severity=Severity.INFO,
            message="one-directional hop (no inverse term declared)",
            scope=term.scope.value,
            term=term.name,
        )

    inverse = schema.find(term.target_scope, term.inverse_term_name)
    if inverse is None:
        return ValidationIssue(
            severity=Severity.WARNING,
            message=(
                f"inverse term {term.inverse_term_name!r} is missing from "
                f"scope {term.target_scope.value!r}"
            ),
            scope=term.scope.value,
            term=term.name,
            suggestion="load the generated registry entries or declare the inverse",
        )
    if not inverse.is_hop or inverse.target_scope != term.scope:
        return ValidationIssue(
            severity=Severity.WARNING,
            message=(
                f"inverse term {term.target_scope.value}.{inverse.name} does not "
                f"hop back to {term.scope.value!r}"
            ),
            scope=term.scope.value,
            term=term.name,
        )
    return None


def _check_reachable(schema: "ScopeSchema", term: TermDefinition) -> Optional[ValidationIssue]:
    grouped = enumerate_paths(
        schema, term.scope, term.target_scope, term.in_between_scopes, term.max_level
    )
    if any(grouped):
        return None
    return ValidationIssue(
        severity=Severity.WARNING,
        message=(
            f"no hop chain reaches {term.target_scope.value!r} "
            f"within {term.max_level} level(s)"
        ),
        scope=term.scope.value,
        term=term.name,
        suggestion="compiling this term always raises InvalidValue",
    )


def validate_schema(schema: "ScopeSchema", strict: bool = False) -> ValidationResult:
    """
    Validate a loaded registry.

    Args:
        schema: The registry to inspect
        strict: If True, treat warnings as errors

    Returns:
        ValidationResult with every issue found
    """
    issues = check_references({scope: schema.table(scope) for scope in schema.scopes()})

    for scope in schema.scopes():
        for term in schema.terms(scope):
            issue = None
            if term.pattern is PatternName.HOP_WITH_FIELD:
                issue = _check_inverse(schema, term)
            elif term.pattern is PatternName.RELATED_LIST:
                issue = _check_reachable(schema, term)
            if issue is not None:
                issues.append(issue)

    has_errors = any(i.severity == Severity.ERROR for i in issues)
    if strict:
        has_errors = has_errors or any(i.severity == Severity.WARNING for i in issues)

    return ValidationResult(valid=not has_errors, issues=issues)
