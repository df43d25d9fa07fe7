"""
Unit tests for QueryCompiler.compile and relatedList expansion.
"""

import pytest

from lux_query.lux_exceptions import InvalidValue, TraversalBoundExceeded, UnknownScope, UnknownTerm
from lux_query.models import BoolOp, Comparator, PatternName, Scope
from lux_query.query import QueryCompiler, to_wire
from lux_query.query.nodes import BooleanNode, Hop, Identifier, Leaf, by_id, iter_nodes, with_scope
from lux_query.relations import RELATION_NAMES
from lux_query.schema.scope_schema import ScopeSchema

_DEFAULT_SCHEMA = ScopeSchema.load_default()

HOPS_WITH_INVERSE = [
    t for t in _DEFAULT_SCHEMA.iter_terms()
    if t.pattern is PatternName.HOP_WITH_FIELD and t.inverse_term_name is not None
]
RELATED_LISTS = [
    t for t in _DEFAULT_SCHEMA.iter_terms() if t.pattern is PatternName.RELATED_LIST
]


def _term_id(term):
    return f"{term.scope.value}.{term.name}"


def _identifiers(node):
    return [n for n in iter_nodes(node) if isinstance(n, Identifier)]


# =============================================================================
# Scalar patterns
# =============================================================================

class TestScalarPatterns:
    def test_document_id(self, compiler):
        node = compiler.compile("item", "id", "item:1")
        assert node == Leaf(term="id", value="item:1", scope="item", field="id")
        assert to_wire(node) == {"_scope": "item", "id": "item:1"}

    def test_indexed_word(self, compiler):
        node = compiler.compile("agent", "name", "Rembrandt")
        assert node.field == "agentName"
        assert not node.full_text
        assert to_wire(node) == {"_scope": "agent", "name": "Rembrandt"}

    def test_text(self, compiler):
        node = compiler.compile("work", "text", "night watch")
        assert node.full_text
        assert node.field == "workAnyText"

    def test_similar(self, compiler):
        node = compiler.compile("item", "similar", {"id": "item:7"})
        assert node.field == "similar"
        assert node.value == "item:7"

    def test_string_term_rejects_number(self, compiler):
        with pytest.raises(InvalidValue) as exc_info:
            compiler.compile("agent", "name", 42)
        assert exc_info.value.term_name == "name"
        assert isinstance(exc_info.value, ValueError)

    def test_string_term_rejects_blank(self, compiler):
        with pytest.raises(InvalidValue):
            compiler.compile("agent", "name", "   ")

    def test_document_id_rejects_mapping(self, compiler):
        with pytest.raises(InvalidValue):
            compiler.compile("item", "id", {"name": "x"})


# =============================================================================
# Numeric terms and comparators
# =============================================================================

class TestNumeric:
    @pytest.mark.parametrize("value,expected", [
        (1, 1),
        (0.5, 0.5),
        ("1", 1),
        (" 2.5 ", 2.5),
        (True, 1),
    ])
    def test_coercion(self, compiler, value, expected):
        node = compiler.compile("work", "isPublicDomain", value)
        assert node.value == expected

    @pytest.mark.parametrize("value", ["yes", "nan", "inf", None, [1]])
    def test_rejects_non_numbers(self, compiler, value):
        with pytest.raises(InvalidValue):
            compiler.compile("work", "isPublicDomain", value)

    def test_comparator(self, compiler):
        node = compiler.compile("work", "isPublicDomain", "1", comparator=">=")
        assert node.comparator is Comparator.GE
        assert to_wire(node) == {"_scope": "work", "isPublicDomain": 1, "_comp": ">="}

    def test_unknown_comparator(self, compiler):
        with pytest.raises(InvalidValue, match="Unknown comparator"):
            compiler.compile("work", "isPublicDomain", 1, comparator="~")

    def test_comparator_on_string_term(self, compiler):
        with pytest.raises(InvalidValue, match="string term"):
            compiler.compile("agent", "name", "Rembrandt", comparator="=")

    def test_comparator_on_hop(self, compiler):
        with pytest.raises(InvalidValue, match="numeric terms only"):
            compiler.compile("item", "producedBy", "agent:9", comparator="=")


# =============================================================================
# Hops
# =============================================================================

class TestHops:
    def test_classification_by_id(self, compiler):
        node = compiler.compile("item", "classification", "concept:123")
        assert to_wire(node) == {"_scope": "item", "classification": {"id": "concept:123"}}

    def test_hop_node_fields(self, compiler):
        node = compiler.compile("item", "producedBy", "agent:9")
        assert node == Hop(
            term="producedBy",
            target=Identifier("agent:9"),
            scope="item",
            field="lux:agentOfProduction",
            target_scope="agent",
        )

    def test_identifier_forms_are_equivalent(self, compiler):
        expected = compiler.compile("item", "producedBy", "agent:9")
        assert compiler.compile("item", "producedBy", {"id": "agent:9"}) == expected
        assert compiler.compile("item", "producedBy", Identifier("agent:9")) == expected

    def test_nested_criteria_compile_in_target_scope(self, compiler):
        node = compiler.compile("item", "producedBy", {"name": "Rembrandt"})
        assert node.target == Leaf(term="name", value="Rembrandt", scope="agent", field="agentName")
        assert to_wire(node) == {"_scope": "item", "producedBy": {"name": "Rembrandt"}}

    def test_nested_unknown_term(self, compiler):
        # "material" exists on item, not on agent
        with pytest.raises(UnknownTerm) as exc_info:
            compiler.compile("item", "producedBy", {"material": "concept:1"})
        assert exc_info.value.scope == "agent"

    def test_nested_wrong_scope(self, compiler):
        with pytest.raises(InvalidValue):
            compiler.compile("item", "producedBy", {"_scope": "place", "name": "Leiden"})

    def test_nested_node(self, compiler):
        inner = compiler.compile("agent", "name", "Rembrandt")
        node = compiler.compile("item", "producedBy", inner)
        assert node.target is inner

    def test_nested_node_wrong_scope(self, compiler):
        inner = compiler.compile("place", "name", "Leiden")
        with pytest.raises(InvalidValue, match="leads to 'agent'"):
            compiler.compile("item", "producedBy", inner)

    def test_hop_rejects_number(self, compiler):
        with pytest.raises(InvalidValue):
            compiler.compile("item", "producedBy", 9)

    @pytest.mark.parametrize("term", HOPS_WITH_INVERSE, ids=_term_id)
    def test_inverse_round_trip(self, compiler, schema, term):
        inverse = schema.inverse_of(term)
        assert inverse is not None

        target_id = f"{term.target_scope.value}:1"
        forward = compiler.compile(term.scope, term.name, target_id)
        assert forward.target == Identifier(target_id)
        assert _identifiers(forward) == [Identifier(target_id)]

        origin_id = f"{term.scope.value}:2"
        backward = compiler.compile(inverse.scope, inverse.name, origin_id)
        assert backward.target_scope == term.scope.value
        assert backward.target == Identifier(origin_id)
        assert _identifiers(backward) == [Identifier(origin_id)]

    def test_generated_hop(self, compiler):
        node = compiler.compile("set", "usedForEvent", "event:1")
        assert to_wire(node) == {"_scope": "set", "usedForEvent": {"id": "event:1"}}


# =============================================================================
# Lookup errors
# =============================================================================

class TestErrors:
    def test_unknown_term(self, compiler):
        with pytest.raises(UnknownTerm):
            compiler.compile("agent", "bogusTerm", "x")

    def test_unknown_scope(self, compiler):
        with pytest.raises(UnknownScope):
            compiler.compile("painting", "name", "x")

    def test_every_pattern_has_a_handler(self, compiler):
        assert set(compiler.handled_patterns) == set(PatternName)


# =============================================================================
# Related lists
# =============================================================================

EVENT_CHAIN = {"carriedBy": {"memberOf": {"usedForEvent": {"id": "event:7"}}}}


class TestRelatedList:
    def test_work_related_to_event(self, compiler):
        node = compiler.compile("work", "relatedToEvent", "event:7")
        assert to_wire(node) == {"_scope": "work", "OR": [{"OR": [EVENT_CHAIN]}]}

    def test_chain_scopes(self, compiler):
        node = compiler.compile("work", "relatedToEvent", "event:7")
        chain = node.children[0].children[0]
        assert (chain.scope, chain.target_scope) == ("work", "item")
        assert (chain.target.scope, chain.target.target_scope) == ("item", "set")
        assert (chain.target.target.scope, chain.target.target.target_scope) == ("set", "event")
        assert chain.target.target.target == Identifier("event:7")

    def test_direct_hops_come_first(self, compiler):
        node = compiler.compile("agent", "relatedToAgent", "agent:1")
        assert node.op is BoolOp.OR
        assert len(node.children) == 2
        assert [c.term for c in node.children[0].children] == [
            "foundedBy", "memberOf", "founded", "memberOfInverse",
        ]

    def test_groups_ordered_by_length(self, compiler):
        node = compiler.compile("agent", "relatedToEvent", "event:1")
        lengths = []
        for group in node.children:
            depths = set()
            for chain in group.children:
                depth, current = 0, chain
                while isinstance(current, Hop):
                    depth, current = depth + 1, current.target
                depths.add(depth)
            assert len(depths) == 1
            lengths.append(depths.pop())
        assert lengths == sorted(lengths)
        assert lengths[0] == 1

    def test_clamped_to_max_level(self, compiler):
        default = compiler.compile("work", "relatedToEvent", "event:7")
        assert compiler.compile("work", "relatedToEvent", "event:7", max_level=9) == default

    def test_clamp_disabled_per_call(self, compiler):
        with pytest.raises(TraversalBoundExceeded) as exc_info:
            compiler.compile("work", "relatedToEvent", "event:7", max_level=4, clamp=False)
        assert (exc_info.value.requested, exc_info.value.max_level) == (4, 3)

    def test_clamp_disabled_on_compiler(self, schema):
        strict = QueryCompiler(schema, clamp_levels=False)
        with pytest.raises(TraversalBoundExceeded):
            strict.compile("agent", "relatedToAgent", "agent:1", max_level=3)

    def test_no_chain_within_level_is_an_error(self, compiler):
        with pytest.raises(InvalidValue, match="reaches no 'event' record within 2 level"):
            compiler.compile("work", "relatedToEvent", "event:7", max_level=2)

    def test_no_chain_in_criteria_is_an_error(self, declared_schema):
        # without generated inverses work has no hop towards item
        with pytest.raises(InvalidValue):
            QueryCompiler(declared_schema).compile_criteria(
                {"_scope": "work", "relatedToEvent": {"id": "event:7"}}
            )

    @pytest.mark.parametrize("term", RELATED_LISTS, ids=_term_id)
    def test_groups_bounded_by_max_level(self, compiler, term):
        target_id = f"{term.target_scope.value}:1"
        if not compiler.related_branches(term.scope, term.name, target_id):
            with pytest.raises(InvalidValue):
                compiler.compile(term.scope, term.name, target_id)
            return
        node = compiler.compile(term.scope, term.name, target_id)
        assert 1 <= len(node.children) <= term.max_level
        for group in node.children:
            assert group.op is BoolOp.OR and group.children

    @pytest.mark.parametrize("level", [0, -1, "2", 1.5, True])
    def test_invalid_level(self, compiler, level):
        with pytest.raises(InvalidValue):
            compiler.compile("work", "relatedToEvent", "event:7", max_level=level)

    def test_level_on_other_pattern(self, compiler):
        with pytest.raises(InvalidValue, match="relatedList terms only"):
            compiler.compile("item", "producedBy", "agent:9", max_level=1)

    def test_nested_terminal(self, compiler):
        node = compiler.compile("work", "relatedToEvent", {"name": "Exhibition"})
        terminal = node.children[0].children[0].target.target.target
        assert terminal == Leaf(term="name", value="Exhibition", scope="event", field="eventName")


class TestRelatedBranches:
    def test_branch_keys(self, compiler):
        branches = compiler.related_branches("work", "relatedToEvent", "event:7")
        assert [b.relation_key for b in branches] == ["carriedBy-memberOf-usedForEvent"]
        assert branches[0].terms == ("carriedBy", "memberOf", "usedForEvent")
        assert branches[0].level == 3
        assert to_wire(branches[0].node, "work") == EVENT_CHAIN

    def test_branches_match_compiled_tree(self, compiler):
        branches = compiler.related_branches("agent", "relatedToEvent", "event:1")
        node = compiler.compile("agent", "relatedToEvent", "event:1")
        flattened = [chain for group in node.children for chain in group.children]
        assert [b.node for b in branches] == flattened

    def test_two_hop_branches_carry_curated_labels(self, compiler, resolver):
        branches = compiler.related_branches("concept", "relatedToAgent", "agent:1")
        keys = [b.relation_key for b in branches]
        assert "classificationOfItem-producedBy" in keys
        assert "classificationOfWork-createdBy" in keys
        assert resolver.resolve_label("classificationOfItem-producedBy") == (
            "Is the Category of Objects Created By"
        )

    def test_co_created_works(self, compiler, resolver):
        branches = compiler.related_branches("agent", "relatedToAgent", "agent:1")
        by_key = {b.relation_key: b for b in branches}
        co_created = by_key["created-createdBy"]
        assert co_created.level == 2
        assert to_wire(co_created.node, "agent") == {"created": {"createdBy": {"id": "agent:1"}}}
        assert resolver.resolve_label(co_created.relation_key) == "Co-created Works With"

    @pytest.mark.parametrize("term", [
        t for t in RELATED_LISTS
        if t.max_level == 2 and t.scope in (Scope.AGENT, Scope.CONCEPT, Scope.PLACE)
    ], ids=_term_id)
    def test_intermediate_branches_resolve_from_table(self, compiler, resolver, term):
        branches = compiler.related_branches(term.scope, term.name, f"{term.target_scope.value}:1")
        curated = [b for b in branches if b.relation_key in RELATION_NAMES]
        assert curated
        for branch in curated:
            assert branch.level == 2
            assert resolver.resolve_label(branch.relation_key) == RELATION_NAMES[branch.relation_key]

    def test_branches_require_related_list(self, compiler):
        with pytest.raises(InvalidValue, match="not a relatedList term"):
            compiler.related_branches("item", "producedBy", "agent:9")


# =============================================================================
# Hand-built targets
# =============================================================================

class TestHandBuiltTargets:
    def test_hop_to_template_style_node(self, compiler):
        inner = with_scope(by_id("produced", "item:1"), Scope.AGENT)
        node = compiler.compile("work", "createdBy", inner)
        assert to_wire(node) == {"_scope": "work", "createdBy": {"produced": {"id": "item:1"}}}

    def test_boolean_target(self, compiler):
        inner = BooleanNode(BoolOp.OR, (by_id("produced", "item:1"), by_id("created", "work:1")))
        node = compiler.compile("item", "producedBy", inner)
        assert to_wire(node)["producedBy"] == {
            "OR": [{"produced": {"id": "item:1"}}, {"created": {"id": "work:1"}}],
        }
