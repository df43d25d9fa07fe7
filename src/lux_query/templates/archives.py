"""
Archive-hierarchy templates.

An archive is a set classified under the AAT "archives" concept; items
and sub-sets hang beneath it through memberOf.
"""

from ..models import MULTI_SCOPE, Scope
from ..query.nodes import all_of, any_of, by_id, hop, leaf, with_scope
from .decorators import template

ARCHIVE_CLASSIFICATION = "http://vocab.getty.edu/aat/300375748"


def archive_classification():
    return hop("classification", leaf("identifier", ARCHIVE_CLASSIFICATION))


def _siblings(containing_term, record_id):
    member_of_archive = hop("memberOf", all_of(
        archive_classification(),
        by_id(containing_term, record_id),
    ))
    return any_of(
        with_scope(member_of_archive, Scope.ITEM),
        with_scope(member_of_archive, Scope.SET),
        scope=MULTI_SCOPE,
    )


@template("archivesWithItem", Scope.SET)
def archives_with_item(item_id):
    """Archives containing the item."""
    return all_of(
        archive_classification(),
        by_id("containing", item_id),
    )


@template("currentItemAndSiblings", MULTI_SCOPE)
def current_item_and_siblings(item_id):
    """The item and its siblings (items and sets) in an archive hierarchy."""
    return _siblings("containingItem", item_id)


@template("currentSetAndSiblings", MULTI_SCOPE)
def current_set_and_siblings(set_id):
    """The set and its siblings (items and sets) in an archive hierarchy."""
    return _siblings("containingSet", set_id)


@template("itemsInSetWithImagesEstimate", Scope.ITEM)
def items_in_set_with_images_estimate(set_id):
    """
    Estimate variant of itemsInSetWithImages.

    Only counts membership of archive-classified sets, which keeps items
    that merely belong to collections out of the estimate; the search
    itself uses itemsInSetWithImages so users never see the check.
    """
    archive = all_of(leaf("id", set_id), archive_classification())
    return all_of(
        any_of(
            hop("memberOf", archive),
            hop("memberOf", hop("memberOf", archive)),
            hop("memberOf", hop("memberOf", hop("memberOf", archive))),
        ),
        leaf("hasDigitalImage", 1),
    )
