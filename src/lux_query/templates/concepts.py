"""
Concept-scoped templates.
"""

from ..models import Scope
from ..query.nodes import by_id, hop, leaf
from .decorators import template


@template("childrenOfConcept", Scope.CONCEPT)
def children_of_concept(concept_id):
    """Sub-concepts of the concept."""
    return by_id("broader", concept_id)


@template("conceptsClassifiedAs", Scope.CONCEPT)
def concepts_classified_as(concept_id):
    return by_id("classification", concept_id)


@template("conceptsInfluencedByAgent", Scope.CONCEPT)
def concepts_influenced_by_agent(agent_id):
    return by_id("influencedByAgent", agent_id)


@template("conceptsInfluencedByConcept", Scope.CONCEPT)
def concepts_influenced_by_concept(concept_id):
    return by_id("influencedByConcept", concept_id)


@template("conceptsInfluencedByPlace", Scope.CONCEPT)
def concepts_influenced_by_place(place_id):
    return by_id("influencedByPlace", place_id)


@template("conceptsSubjectsForPeriod", Scope.CONCEPT)
def concepts_subjects_for_period(event_id):
    """Concepts influenced by the period (event)."""
    return by_id("influencedByEvent", event_id)


@template("conceptsSubjectsForExhibition", Scope.CONCEPT)
def concepts_subjects_for_exhibition(event_id):
    """
    Subjects of works carried by items in a set used for the exhibition.
    """
    return hop("subjectOfConcept",
               hop("carriedBy",
                   hop("memberOf",
                       by_id("usedForEvent", event_id))))


@template("conceptsRelatedToAgent", Scope.CONCEPT)
def concepts_related_to_agent(agent_id):
    return leaf("relatedToAgent", agent_id)


@template("conceptsRelatedToConcept", Scope.CONCEPT)
def concepts_related_to_concept(concept_id):
    return leaf("relatedToConcept", concept_id)


@template("conceptsRelatedToEvent", Scope.CONCEPT)
def concepts_related_to_event(event_id):
    return leaf("relatedToEvent", event_id)


@template("conceptsRelatedToPlace", Scope.CONCEPT)
def concepts_related_to_place(place_id):
    return leaf("relatedToPlace", place_id)
