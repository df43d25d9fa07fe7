"""
Event-scoped templates (activities, periods, exhibitions).
"""

from ..models import Scope
from ..query.nodes import by_id, hop
from .decorators import template


@template("eventsCarriedOutByAgent", Scope.EVENT)
def events_carried_out_by_agent(agent_id):
    return by_id("carriedOutBy", agent_id)


@template("eventsClassifiedAs", Scope.EVENT)
def events_classified_as(concept_id):
    return by_id("classification", concept_id)


@template("eventsHappenedAtPlace", Scope.EVENT)
def events_happened_at_place(place_id):
    """Events that took place at the place."""
    return by_id("tookPlaceAt", place_id)


@template("eventsUsingAgentsProducedObjects", Scope.EVENT)
def events_using_agents_produced_objects(agent_id):
    """Events that used a set containing objects produced by the agent."""
    return hop("used", hop("containing", by_id("producedBy", agent_id)))


@template("eventsWithItem", Scope.EVENT)
def events_with_item(item_id):
    """Events that used a set containing the item."""
    return hop("used", by_id("containing", item_id))


@template("eventsWithSet", Scope.EVENT)
def events_with_set(set_id):
    return by_id("used", set_id)
