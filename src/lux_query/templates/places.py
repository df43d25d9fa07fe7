"""
Place-scoped templates.
"""

from ..models import Scope
from ..query.nodes import by_id, leaf
from .decorators import template


@template("partsOfPlace", Scope.PLACE)
def parts_of_place(place_id):
    """Places that fall within the place."""
    return by_id("partOf", place_id)


@template("placesClassifiedAs", Scope.PLACE)
def places_classified_as(concept_id):
    return by_id("classification", concept_id)


@template("placesRelatedToAgent", Scope.PLACE)
def places_related_to_agent(agent_id):
    return leaf("relatedToAgent", agent_id)


@template("placesRelatedToConcept", Scope.PLACE)
def places_related_to_concept(concept_id):
    return leaf("relatedToConcept", concept_id)


@template("placesRelatedToEvent", Scope.PLACE)
def places_related_to_event(event_id):
    return leaf("relatedToEvent", event_id)


@template("placesRelatedToPlace", Scope.PLACE)
def places_related_to_place(place_id):
    return leaf("relatedToPlace", place_id)
