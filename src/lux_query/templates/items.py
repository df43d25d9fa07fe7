"""
Item-scoped templates (physical and digital objects).
"""

from ..models import Scope
from ..query.nodes import all_of, any_of, by_id, hop, leaf
from .decorators import template


@template("itemById", Scope.ITEM)
def item_by_id(item_id):
    return leaf("id", item_id)


@template("itemsCarryingWork", Scope.ITEM)
def items_carrying_work(work_id):
    """Items that carry or show the work."""
    # item.carries covers both "carries" and "shows"
    return by_id("carries", work_id)


@template("workShownBy", Scope.ITEM)
def work_shown_by(work_id):
    return by_id("carries", work_id)


@template("itemsClassifiedAs", Scope.ITEM)
def items_classified_as(concept_id):
    return by_id("classification", concept_id)


@template("itemsOfTypeOrMaterial", Scope.ITEM)
def items_of_type_or_material(concept_id):
    """Items classified as the concept or made of it."""
    return any_of(
        by_id("classification", concept_id),
        by_id("material", concept_id),
    )


@template("itemsProducedAtPlace", Scope.ITEM)
def items_produced_at_place(place_id):
    return by_id("producedAt", place_id)


@template("itemsProducedEncounteredAtPlace", Scope.ITEM)
def items_produced_encountered_at_place(place_id):
    return any_of(
        by_id("producedAt", place_id),
        by_id("encounteredAt", place_id),
    )


@template("itemsProducedByAgent", Scope.ITEM)
def items_produced_by_agent(agent_id):
    return by_id("producedBy", agent_id)


@template("itemsEncounteredByAgent", Scope.ITEM)
def items_encountered_by_agent(agent_id):
    return by_id("encounteredBy", agent_id)


@template("itemsProductionInfluencedByAgent", Scope.ITEM)
def items_production_influenced_by_agent(agent_id):
    return by_id("productionInfluencedBy", agent_id)


@template("itemsProducedEncounteredByAgent", Scope.ITEM)
def items_produced_encountered_by_agent(agent_id):
    """Items produced or encountered by the agent."""
    return any_of(
        by_id("producedBy", agent_id),
        by_id("encounteredBy", agent_id),
    )


@template("itemsProducedEncounteredInfluencedByAgent", Scope.ITEM)
def items_produced_encountered_influenced_by_agent(agent_id):
    return any_of(
        by_id("producedBy", agent_id),
        by_id("encounteredBy", agent_id),
        by_id("productionInfluencedBy", agent_id),
    )


@template("itemsForDepartment", Scope.ITEM)
def items_for_department(group_id):
    """
    Items in a set curated by the department, or by a group the
    department is a member of.
    """
    return any_of(
        hop("memberOf", by_id("curatedBy", group_id)),
        hop("memberOf", hop("curatedBy", by_id("memberOf", group_id))),
    )


@template("itemsForEvent", Scope.ITEM)
def items_for_event(event_id):
    """Items in a set used for the event."""
    return hop("memberOf", by_id("usedForEvent", event_id))


@template("itemsAboutEvent", Scope.ITEM)
def items_about_event(event_id):
    return hop("carries", any_of(
        by_id("aboutEvent", event_id),
        hop("aboutConcept", by_id("influencedByEvent", event_id)),
    ))


@template("itemsInfluencedByEvent", Scope.ITEM)
def items_influenced_by_event(event_id):
    return hop("carries", hop("aboutConcept", by_id("influencedByEvent", event_id)))


@template("itemsInSet", Scope.ITEM)
def items_in_set(set_id):
    return by_id("memberOf", set_id)


@template("itemsInSetWithImages", Scope.ITEM)
def items_in_set_with_images(set_id):
    """Items with a digital image, up to three set levels below the set."""
    return all_of(
        any_of(
            by_id("memberOf", set_id),
            hop("memberOf", by_id("member", set_id)),
            hop("memberOf", hop("member", by_id("memberOf", set_id))),
        ),
        leaf("hasDigitalImage", 1),
    )


@template("itemsSubjectOfItem", Scope.ITEM)
def items_subject_of_item(item_id):
    return by_id("subjectOfItem", item_id)
