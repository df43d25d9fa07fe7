"""
Agent-scoped templates (people and groups).
"""

from ..models import Scope
from ..query.nodes import by_id, hop, leaf
from .decorators import template


@template("agentsActiveAtPlace", Scope.AGENT)
def agents_active_at_place(place_id):
    """Agents who were active at the place."""
    return by_id("activeAt", place_id)


@template("agentsBornAtPlace", Scope.AGENT)
def agents_born_at_place(place_id):
    """Agents who were born at the place."""
    return by_id("startAt", place_id)


@template("agentsDiedAtPlace", Scope.AGENT)
def agents_died_at_place(place_id):
    """Agents who died at the place."""
    return by_id("endAt", place_id)


@template("agentsClassifiedAs", Scope.AGENT)
def agents_classified_as(concept_id):
    """Agents classified as the type."""
    return by_id("classification", concept_id)


@template("agentsFoundedByAgent", Scope.AGENT)
def agents_founded_by_agent(agent_id):
    """Agents founded by the agent."""
    return by_id("foundedBy", agent_id)


@template("agentsMemberOfGroup", Scope.AGENT)
def agents_member_of_group(group_id):
    """Agents that are members of the group."""
    return by_id("memberOf", group_id)


@template("agentsWithGender", Scope.AGENT)
def agents_with_gender(concept_id):
    return by_id("gender", concept_id)


@template("agentsWithNationality", Scope.AGENT)
def agents_with_nationality(concept_id):
    return by_id("nationality", concept_id)


@template("agentsWithOccupation", Scope.AGENT)
def agents_with_occupation(concept_id):
    return by_id("occupation", concept_id)


# Related-list templates carry the bare term; the executor expands them.
# Used for related-list estimates only.

@template("agentsRelatedToAgent", Scope.AGENT)
def agents_related_to_agent(agent_id):
    return leaf("relatedToAgent", agent_id)


@template("agentsRelatedToConcept", Scope.AGENT)
def agents_related_to_concept(concept_id):
    return leaf("relatedToConcept", concept_id)


@template("agentsRelatedToEvent", Scope.AGENT)
def agents_related_to_event(event_id):
    return leaf("relatedToEvent", event_id)


@template("agentsRelatedToPlace", Scope.AGENT)
def agents_related_to_place(place_id):
    return leaf("relatedToPlace", place_id)


@template("departmentsCuratedSet", Scope.AGENT)
def departments_curated_set(set_id):
    """Departments (agents) that curated a set containing the set."""
    return hop("curated", by_id("containing", set_id))


@template("departmentsWithItem", Scope.AGENT)
def departments_with_item(item_id):
    """Departments that curated a set containing the item."""
    return hop("curated", by_id("containing", item_id))
