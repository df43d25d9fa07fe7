"""
Work-scoped templates (textual and visual works).
"""

from ..models import Scope
from ..query.nodes import any_of, by_id, hop, leaf
from .decorators import template


def _concept_or_influenced(concept_id):
    return any_of(
        leaf("id", concept_id),
        by_id("influencedByConcept", concept_id),
    )


@template("workById", Scope.WORK)
def work_by_id(work_id):
    return leaf("id", work_id)


@template("worksInSet", Scope.WORK)
def works_in_set(set_id):
    return by_id("memberOf", set_id)


@template("worksAboutAgent", Scope.WORK)
def works_about_agent(agent_id):
    """Works about the agent, or about concepts the agent influenced."""
    return any_of(
        by_id("aboutAgent", agent_id),
        hop("aboutConcept", by_id("influencedByAgent", agent_id)),
    )


@template("worksAboutEvent", Scope.WORK)
def works_about_event(event_id):
    return any_of(
        by_id("aboutEvent", event_id),
        hop("aboutConcept", by_id("influencedByEvent", event_id)),
    )


@template("worksAboutConceptsInfluencedByEvent", Scope.WORK)
def works_about_concepts_influenced_by_event(event_id):
    return hop("aboutConcept", by_id("influencedByEvent", event_id))


@template("worksAboutPlace", Scope.WORK)
def works_about_place(place_id):
    return any_of(
        by_id("aboutPlace", place_id),
        hop("aboutConcept", by_id("influencedByPlace", place_id)),
    )


@template("worksCausedByEvent", Scope.WORK)
def works_caused_by_event(event_id):
    return by_id("creationCausedBy", event_id)


@template("worksWithEvent", Scope.WORK)
def works_with_event(event_id):
    return by_id("causedByProject", event_id)


@template("worksForEvent", Scope.WORK)
def works_for_event(event_id):
    """Works carried by items in a set used for the event."""
    return hop("carriedBy", hop("memberOf", by_id("usedForEvent", event_id)))


@template("worksClassifiedAs", Scope.WORK)
def works_classified_as(concept_id):
    return by_id("classification", concept_id)


@template("worksCreatedAtPlace", Scope.WORK)
def works_created_at_place(place_id):
    return by_id("createdAt", place_id)


@template("worksPublishedAtPlace", Scope.WORK)
def works_published_at_place(place_id):
    return by_id("publishedAt", place_id)


@template("worksCreatedByAgent", Scope.WORK)
def works_created_by_agent(agent_id):
    return by_id("createdBy", agent_id)


@template("worksCreationInfluencedByAgent", Scope.WORK)
def works_creation_influenced_by_agent(agent_id):
    return by_id("creationInfluencedBy", agent_id)


@template("worksCreatedPublishedByAgent", Scope.WORK)
def works_created_published_by_agent(agent_id):
    return any_of(
        by_id("createdBy", agent_id),
        by_id("publishedBy", agent_id),
    )


@template("worksCreatedPublishedInfluencedByAgent", Scope.WORK)
def works_created_published_influenced_by_agent(agent_id):
    return any_of(
        by_id("createdBy", agent_id),
        by_id("publishedBy", agent_id),
        by_id("creationInfluencedBy", agent_id),
    )


@template("worksRelatedToConcept", Scope.WORK)
def works_related_to_concept(concept_id):
    """
    Works classified as, in the language of, or about the concept, or a
    concept it influenced.
    """
    return any_of(
        hop("classification", _concept_or_influenced(concept_id)),
        hop("language", _concept_or_influenced(concept_id)),
        hop("aboutConcept", _concept_or_influenced(concept_id)),
    )


@template("worksRelatedToPlace", Scope.WORK)
def works_related_to_place(place_id):
    return any_of(
        by_id("aboutPlace", place_id),
        by_id("createdAt", place_id),
        by_id("publishedAt", place_id),
    )


@template("worksInWork", Scope.WORK)
def works_in_work(work_id):
    """Works that are part of the work."""
    return by_id("partOfWork", work_id)


@template("worksContainingWork", Scope.WORK)
def works_containing_work(work_id):
    return by_id("containsWork", work_id)


@template("worksSubjectOfWork", Scope.WORK)
def works_subject_of_work(work_id):
    return by_id("subjectOfWork", work_id)


@template("itemsSubjectOfWork", Scope.WORK)
def items_subject_of_work(item_id):
    """Works whose subject is the item."""
    return by_id("subjectOfItem", item_id)
