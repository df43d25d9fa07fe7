"""
Related-link estimates and search-service URLs.

A record page shows a set of related links ("lux:agentRelatedAgents",
"lux:placeParts", ...). Each link is backed by one catalogue template:
the estimates query runs every template for the record to count hits,
and the HAL link turns the same template into a search, facet or
related-list URL on the search service.
"""

import json
from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional, Tuple, Union
from urllib.parse import quote

from ..logging_config import configure_logger_for_debug_trace
from ..lux_exceptions import InvalidValue, UnknownLink
from ..models import Scope
from ..query.nodes import SCOPE_KEY, QueryNode, to_wire
from ..services.config_loader import DEFAULT_SEARCH_URI_HOST
from .registry import TemplateLibrary, get_template_library

logger = configure_logger_for_debug_trace(__name__)

# Characters encodeURIComponent leaves alone
_URI_COMPONENT_SAFE = "-_.!~*'()"

# Linked-art record classes per scope; Set is a set before it is a work
RECORD_TYPES: Tuple[Tuple[Scope, Tuple[str, ...]], ...] = (
    (Scope.AGENT, ("Group", "Person")),
    (Scope.CONCEPT, ("Currency", "Language", "Material", "MeasurementUnit", "Type")),
    (Scope.EVENT, ("Activity", "Period")),
    (Scope.ITEM, ("DigitalObject", "HumanMadeObject")),
    (Scope.PLACE, ("Place",)),
    (Scope.SET, ("Set",)),
    (Scope.WORK, ("LinguisticObject", "Set", "VisualItem")),
)


@dataclass(frozen=True)
class LinkSpec:
    """
    One related link: the template behind it and how its URL is built.

    endpoint is "search", "facets" or "related-list". Related-list links
    name the relatedList term instead of carrying a serialised query.
    estimate names a different template for the hit count when the
    published estimate does not match the link.
    """
    template: str
    endpoint: str = "search"
    facet_name: Optional[str] = None
    sort: Optional[str] = None
    related_term: Optional[str] = None
    estimate: Optional[str] = None

    @property
    def estimate_template(self) -> str:
        return self.estimate or self.template


def _search(template, sort=None):
    return LinkSpec(template, sort=sort)


def _facet(template, facet_name, estimate=None):
    return LinkSpec(template, endpoint="facets", facet_name=facet_name, estimate=estimate)


def _related(template, term):
    return LinkSpec(template, endpoint="related-list", related_term=term)


_EVENT_DATE_ASC = "eventStartDate:asc"

HAL_LINKS: Dict[str, LinkSpec] = {
    # agent records
    "lux:agentAgentMemberOf": _search("agentsMemberOfGroup"),
    "lux:agentCreatedPublishedWork": _search("worksCreatedPublishedByAgent"),
    "lux:agentEventsCarriedOut": _search("eventsCarriedOutByAgent", _EVENT_DATE_ASC),
    "lux:agentEventsUsingProducedObjects": _search(
        "eventsUsingAgentsProducedObjects", _EVENT_DATE_ASC),
    "lux:agentFoundedByAgent": _search("agentsFoundedByAgent", "anySortName:asc"),
    "lux:agentInfluencedConcepts": _search("conceptsInfluencedByAgent"),
    "lux:agentItemEncounteredTime": _facet("itemsEncounteredByAgent", "itemEncounteredDate"),
    "lux:agentItemMadeTime": _facet("itemsProducedByAgent", "itemProductionDate"),
    "lux:agentMadeDiscoveredItem": _search("itemsProducedEncounteredByAgent"),
    "lux:agentRelatedAgents": _related("agentsRelatedToAgent", "relatedToAgent"),
    "lux:agentRelatedConcepts": _related("conceptsRelatedToAgent", "relatedToAgent"),
    "lux:agentRelatedItemTypes": _facet("itemsProducedByAgent", "itemTypeId"),
    "lux:agentRelatedMaterials": _facet("itemsProducedByAgent", "itemMaterialId"),
    "lux:agentRelatedPlaces": _related("placesRelatedToAgent", "relatedToAgent"),
    "lux:agentRelatedSubjects": _facet("worksCreatedByAgent", "workAboutConceptId"),
    "lux:agentRelatedWorkTypes": _facet("worksCreatedByAgent", "workTypeId"),
    "lux:agentWorkAbout": _search("worksAboutAgent"),
    "lux:agentWorkCreatedTime": _facet("worksCreatedPublishedByAgent", "workCreationDate"),
    "lux:agentWorkPublishedTime": _facet("worksCreatedPublishedByAgent", "workPublicationDate"),
    "lux:departmentItems": _search("itemsForDepartment"),
    # concept records
    "lux:conceptChildren": _search("childrenOfConcept"),
    "lux:conceptDepictedAgentFromRelatedWorks": _facet("worksRelatedToConcept", "workAboutAgentId"),
    "lux:conceptInfluencedConcepts": _search("conceptsInfluencedByConcept"),
    "lux:conceptItemEncounteredTime": _facet("itemsOfTypeOrMaterial", "itemEncounteredDate"),
    "lux:conceptItemMadeTime": _facet("itemsOfTypeOrMaterial", "itemProductionDate"),
    "lux:conceptItemTypes": _facet("itemsOfTypeOrMaterial", "itemTypeId"),
    "lux:conceptRelatedAgents": _related("agentsRelatedToConcept", "relatedToConcept"),
    "lux:conceptRelatedConcepts": _related("conceptsRelatedToConcept", "relatedToConcept"),
    "lux:conceptRelatedItems": _search("itemsOfTypeOrMaterial"),
    "lux:conceptRelatedPlaces": _related("placesRelatedToConcept", "relatedToConcept"),
    "lux:conceptRelatedWorks": _search("worksRelatedToConcept"),
    "lux:conceptWorkCreatedTime": _facet("worksRelatedToConcept", "workCreationDate"),
    "lux:conceptWorkPublishedTime": _facet("worksRelatedToConcept", "workPublicationDate"),
    "lux:conceptWorkTypes": _facet("worksRelatedToConcept", "workTypeId"),
    "lux:genderForAgent": _search("agentsWithGender"),
    "lux:nationalityForAgent": _search("agentsWithNationality"),
    "lux:occupationForAgent": _search("agentsWithOccupation"),
    "lux:typeForAgent": _search("agentsClassifiedAs"),
    "lux:typeForEvent": _search("eventsClassifiedAs"),
    "lux:typeForPlace": _search("placesClassifiedAs"),
    # event records
    "lux:eventConceptsInfluencedBy": _search("conceptsSubjectsForPeriod"),
    "lux:eventConceptsOfItems": _search("conceptsSubjectsForExhibition"),
    "lux:eventIncludedItems": _search("itemsForEvent"),
    "lux:eventItemMaterials": _facet("itemsForEvent", "itemMaterialId"),
    "lux:eventObjectTypesUsed": _facet("itemsForEvent", "itemTypeId"),
    "lux:eventObjectTypesAbout": _facet("itemsInfluencedByEvent", "itemTypeId"),
    "lux:eventWorksAbout": _search("worksAboutConceptsInfluencedByEvent"),
    "lux:eventWorkTypesUsed": _facet("worksForEvent", "workTypeId"),
    "lux:eventWorkTypesAbout": _facet("worksAboutConceptsInfluencedByEvent", "workTypeId"),
    # item records
    "lux:itemArchive": _search("archivesWithItem"),
    "lux:itemEvents": _search("eventsWithItem", _EVENT_DATE_ASC),
    "lux:itemDepartment": _search("departmentsWithItem"),
    # Not every set is linked to a department yet; the unit comes from
    # the responsibleUnits facet of the item itself
    "lux:itemUnit": _facet("itemById", "responsibleUnits"),
    # place records
    "lux:placeActiveAgent": _search("agentsActiveAtPlace"),
    "lux:placeBornAgent": _search("agentsBornAtPlace"),
    "lux:placeCreatedWork": _search("worksCreatedAtPlace"),
    "lux:placeDepictedAgentsFromRelatedWorks": _facet("worksRelatedToPlace", "workAboutAgentId"),
    # Estimated from created works, linked to related works; pending review
    "lux:placeDepictingWork": _facet(
        "worksRelatedToPlace", "workAboutConceptId", estimate="worksCreatedAtPlace"),
    "lux:placeDiedAgent": _search("agentsDiedAtPlace"),
    "lux:placeEvents": _search("eventsHappenedAtPlace"),
    "lux:placeInfluencedConcepts": _search("conceptsInfluencedByPlace"),
    "lux:placeItemTypes": _facet("itemsProducedAtPlace", "itemTypeId"),
    "lux:placeMadeDiscoveredItem": _search("itemsProducedEncounteredAtPlace"),
    "lux:placeParts": _search("partsOfPlace"),
    "lux:placePublishedWork": _search("worksPublishedAtPlace"),
    "lux:placeRelatedAgents": _related("agentsRelatedToPlace", "relatedToPlace"),
    "lux:placeRelatedConcepts": _related("conceptsRelatedToPlace", "relatedToPlace"),
    "lux:placeRelatedPlaces": _related("placesRelatedToPlace", "relatedToPlace"),
    "lux:placeWorkAbout": _search("worksAboutPlace"),
    "lux:placeWorkTypes": _facet("worksRelatedToPlace", "workTypeId"),
    # set records
    "lux:setDepartment": _search("departmentsCuratedSet"),
    "lux:setIncludedItems": _search("itemsInSet"),
    "lux:setIncludedWorks": _search("worksInSet"),
    "lux:setItemEncounteredTime": _facet("itemsInSet", "itemEncounteredDate"),
    "lux:setItemMadeTime": _facet("itemsInSet", "itemProductionDate"),
    "lux:setItemTypes": _facet("itemsInSet", "itemTypeId"),
    "lux:setUnit": _facet("workById", "responsibleUnits"),
    # work records
    "lux:workCarriedBy": _search("itemsCarryingWork"),
    "lux:workShownBy": _search("itemsCarryingWork"),
}

_WORK_LINKS = ("lux:workCarriedBy", "lux:workShownBy")

# Links estimated for a record, by the record's scope
ESTIMATE_LINKS: Dict[Scope, Tuple[str, ...]] = {
    Scope.AGENT: (
        "lux:agentAgentMemberOf", "lux:agentCreatedPublishedWork",
        "lux:agentEventsCarriedOut", "lux:agentEventsUsingProducedObjects",
        "lux:agentFoundedByAgent", "lux:agentInfluencedConcepts",
        "lux:agentItemEncounteredTime", "lux:agentItemMadeTime",
        "lux:agentMadeDiscoveredItem", "lux:agentRelatedAgents",
        "lux:agentRelatedConcepts", "lux:agentRelatedItemTypes",
        "lux:agentRelatedMaterials", "lux:agentRelatedPlaces",
        "lux:agentRelatedSubjects", "lux:agentRelatedWorkTypes",
        "lux:agentWorkAbout", "lux:agentWorkCreatedTime",
        "lux:agentWorkPublishedTime", "lux:departmentItems",
    ),
    Scope.CONCEPT: (
        "lux:conceptChildren", "lux:conceptDepictedAgentFromRelatedWorks",
        "lux:conceptInfluencedConcepts", "lux:conceptItemEncounteredTime",
        "lux:conceptItemMadeTime", "lux:conceptItemTypes",
        "lux:conceptRelatedAgents", "lux:conceptRelatedConcepts",
        "lux:conceptRelatedItems", "lux:conceptRelatedPlaces",
        "lux:conceptRelatedWorks", "lux:conceptWorkCreatedTime",
        "lux:conceptWorkPublishedTime", "lux:conceptWorkTypes",
        "lux:genderForAgent", "lux:nationalityForAgent",
        "lux:occupationForAgent", "lux:typeForAgent",
        "lux:typeForEvent", "lux:typeForPlace",
    ),
    Scope.EVENT: (
        "lux:eventConceptsInfluencedBy", "lux:eventConceptsOfItems",
        "lux:eventIncludedItems", "lux:eventItemMaterials",
        "lux:eventObjectTypesUsed", "lux:eventObjectTypesAbout",
        "lux:eventWorksAbout", "lux:eventWorkTypesUsed",
        "lux:eventWorkTypesAbout",
    ),
    Scope.ITEM: (
        "lux:itemArchive", "lux:itemEvents", "lux:itemDepartment", "lux:itemUnit",
    ),
    Scope.PLACE: (
        "lux:placeActiveAgent", "lux:placeBornAgent", "lux:placeCreatedWork",
        "lux:placeDepictingWork", "lux:placeDepictedAgentsFromRelatedWorks",
        "lux:placeDiedAgent", "lux:placeEvents", "lux:placeInfluencedConcepts",
        "lux:placeItemTypes", "lux:placeMadeDiscoveredItem", "lux:placeParts",
        "lux:placePublishedWork", "lux:placeRelatedAgents",
        "lux:placeRelatedConcepts", "lux:placeRelatedPlaces",
        "lux:placeWorkAbout", "lux:placeWorkTypes",
    ),
    # A set record is also a work record
    Scope.SET: (
        "lux:setDepartment", "lux:setIncludedItems", "lux:setIncludedWorks",
        "lux:setItemEncounteredTime", "lux:setItemMadeTime",
        "lux:setItemTypes", "lux:setUnit",
    ) + _WORK_LINKS,
    Scope.WORK: _WORK_LINKS,
}


# ============================================================
# Record classification
# ============================================================

def scope_for_record_type(record_type: str) -> Optional[Scope]:
    """Scope of a linked-art record class, or None if it has none."""
    for scope, types in RECORD_TYPES:
        if record_type in types:
            return scope
    return None


def _record_fields(doc: Mapping[str, Any]) -> Tuple[str, Any]:
    record_id = doc.get("id")
    if not isinstance(record_id, str) or not record_id:
        raise InvalidValue(f"Record has no usable id: {record_id!r}", value=record_id)
    return record_id, doc.get("type")


def estimate_templates(doc: Mapping[str, Any]) -> Optional[Dict[str, str]]:
    """
    Link relation -> template name for the record's estimates.

    Returns None when the record type has no scope.
    """
    _, record_type = _record_fields(doc)
    scope = scope_for_record_type(record_type)
    if scope is None:
        logger.debug("No estimates for record type %r", record_type)
        return None
    return {rel: HAL_LINKS[rel].estimate_template for rel in ESTIMATE_LINKS[scope]}


# ============================================================
# Estimates queries
# ============================================================

def build_estimates_query(
    doc: Mapping[str, Any],
    library: Optional[TemplateLibrary] = None,
) -> Optional[Dict[str, dict]]:
    """
    Build the estimates query for one record.

    Args:
        doc: Record with "id" and linked-art "type"
        library: Template library (default: the packaged catalogue)

    Returns:
        Link relation -> wire-form query, or None for an unknown type

    Raises:
        InvalidValue: the record has no id
    """
    templates = estimate_templates(doc)
    if templates is None:
        return None
    library = library or get_template_library()
    record_id = doc["id"]
    return {rel: library.build_wire(name, record_id) for rel, name in templates.items()}


def combine_estimates(
    record_id: str,
    key_templates: Mapping[str, str],
    library: Optional[TemplateLibrary] = None,
) -> Dict[str, dict]:
    """
    Build each distinct template once.

    Keys sharing a template are joined with "," into one key, so the
    executor runs one query per template; split_estimates() undoes this.
    """
    library = library or get_template_library()
    keys_by_template: Dict[str, list] = {}
    for key, name in key_templates.items():
        keys_by_template.setdefault(name, []).append(key)

    return {
        ",".join(keys): library.build_wire(name, record_id)
        for name, keys in keys_by_template.items()
    }


def split_estimates(response: Mapping[str, Any]) -> Dict[str, Any]:
    """Expand combined keys of an estimates response back to one per key."""
    estimates = {}
    for combined_key, result in response.items():
        for key in combined_key.split(","):
            estimates[key] = result
    return estimates


# ============================================================
# Search-service URLs
# ============================================================

def prepare_query(tree: Union[QueryNode, Mapping[str, Any]]) -> str:
    """Serialise a tree for a URL: root _scope dropped, JSON, URI-encoded."""
    wire = dict(tree) if isinstance(tree, Mapping) else to_wire(tree)
    wire.pop(SCOPE_KEY, None)
    text = json.dumps(wire, separators=(",", ":"), ensure_ascii=False)
    return quote(text, safe=_URI_COMPONENT_SAFE)


def _scope_of(tree: Union[QueryNode, Mapping[str, Any]]) -> str:
    scope = tree.get(SCOPE_KEY) if isinstance(tree, Mapping) else getattr(tree, "scope", None)
    if scope is None:
        raise InvalidValue("A search link needs a query rooted at a scope", value=tree)
    return getattr(scope, "value", scope)


def build_search_link(
    tree: Union[QueryNode, Mapping[str, Any]],
    endpoint: str = "search",
    facet_name: Optional[str] = None,
    sort: Optional[str] = None,
    host: Optional[str] = None,
) -> str:
    """
    Search-service URL for a query tree.

    Args:
        tree: Query node or wire-form dict; its root scope picks the path
        endpoint: "search" or "facets"
        facet_name: Facet to request (facets endpoint)
        sort: Sort expression, e.g. "eventStartDate:asc"
        host: Service origin (default: https://lux.collections.yale.edu)

    Returns:
        e.g. "{host}/api/search/item?q=..."
    """
    scope = _scope_of(tree)
    url = f"{host or DEFAULT_SEARCH_URI_HOST}/api/{endpoint}/{scope}?q={prepare_query(tree)}"
    if facet_name:
        url += f"&name={quote(facet_name, safe=_URI_COMPONENT_SAFE)}"
    if sort:
        url += f"&sort={sort}"
    return url


def build_related_list_link(scope, term: str, record_id: str, host: Optional[str] = None) -> str:
    """Related-list URL: records in scope related to record_id through term."""
    scope = getattr(scope, "value", scope)
    uri = quote(record_id, safe=_URI_COMPONENT_SAFE)
    return f"{host or DEFAULT_SEARCH_URI_HOST}/api/related-list/{scope}?name={term}&uri={uri}"


def build_hal_link(
    rel: str,
    record_id: str,
    host: Optional[str] = None,
    library: Optional[TemplateLibrary] = None,
) -> str:
    """
    URL behind one related link of a record.

    Raises:
        UnknownLink: rel has no link definition
    """
    try:
        spec = HAL_LINKS[rel]
    except KeyError:
        raise UnknownLink(rel) from None

    library = library or get_template_library()
    if spec.related_term:
        scope = library.get(spec.template).scope
        return build_related_list_link(scope, spec.related_term, record_id, host=host)

    tree = library.build(spec.template, record_id)
    return build_search_link(
        tree,
        endpoint=spec.endpoint,
        facet_name=spec.facet_name,
        sort=spec.sort,
        host=host,
    )


class LinkBuilder:
    """
    Related links bound to one library and search host.

    ::: This is-in-layer Service-Layer.
    ::: This is a builder.
    ::: This is stateless.
    """

    def __init__(self, library: TemplateLibrary, host: str = DEFAULT_SEARCH_URI_HOST):
        self.library = library
        self.host = host

    def estimates(self, doc: Mapping[str, Any]) -> Optional[Dict[str, dict]]:
        return build_estimates_query(doc, library=self.library)

    def hal_link(self, rel: str, record_id: str) -> str:
        return build_hal_link(rel, record_id, host=self.host, library=self.library)

    def hal_links(self, doc: Mapping[str, Any]) -> Dict[str, str]:
        """Every related-link URL of a record (empty for an unknown type)."""
        templates = estimate_templates(doc)
        if templates is None:
            return {}
        return {rel: self.hal_link(rel, doc["id"]) for rel in templates}

    def search_link(self, tree, **kwargs) -> str:
        kwargs.setdefault("host", self.host)
        return build_search_link(tree, **kwargs)
