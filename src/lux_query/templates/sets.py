"""
Set-scoped templates (collections, exhibitions' object lists, archives).
"""

from ..models import Scope
from ..query.nodes import any_of, by_id, hop, leaf
from .decorators import template


@template("setById", Scope.SET)
def set_by_id(set_id):
    return leaf("id", set_id)


@template("setsInSet", Scope.SET)
def sets_in_set(set_id):
    return by_id("memberOf", set_id)


@template("setAboutEvent", Scope.SET)
def set_about_event(event_id):
    return any_of(
        by_id("aboutEvent", event_id),
        hop("aboutConcept", by_id("influencedByEvent", event_id)),
    )


@template("setCausedByEvent", Scope.SET)
def set_caused_by_event(event_id):
    return by_id("creationCausedBy", event_id)


@template("setForEventSetType", Scope.SET)
def set_for_event_set_type(event_id):
    """Sets related to the event, for the setType facet."""
    return any_of(
        by_id("aboutEvent", event_id),
        by_id("creationCausedBy", event_id),
    )


@template("setCreatedByAgent", Scope.SET)
def set_created_by_agent(agent_id):
    return by_id("createdBy", agent_id)


@template("setCreatedPublishedInfluencedByAgent", Scope.SET)
def set_created_published_influenced_by_agent(agent_id):
    return any_of(
        by_id("createdBy", agent_id),
        by_id("publishedBy", agent_id),
        by_id("creationInfluencedBy", agent_id),
    )


@template("setsRelatedToAgent", Scope.SET)
def sets_related_to_agent(agent_id):
    return any_of(
        by_id("aboutAgent", agent_id),
        by_id("createdBy", agent_id),
        by_id("publishedBy", agent_id),
    )


@template("setsRelatedToConcept", Scope.SET)
def sets_related_to_concept(concept_id):
    """Sets classified as, or about, the concept (or one it influenced)."""
    return any_of(
        hop("classification", any_of(
            leaf("id", concept_id),
            by_id("influencedByConcept", concept_id),
        )),
        by_id("aboutConcept", concept_id),
    )


@template("setsRelatedToPlace", Scope.SET)
def sets_related_to_place(place_id):
    return any_of(
        by_id("aboutPlace", place_id),
        by_id("createdAt", place_id),
        by_id("publishedAt", place_id),
    )
