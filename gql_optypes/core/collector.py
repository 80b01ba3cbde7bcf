"""Selection collector: classify every selection of one selection set.

Each selection becomes a small :class:`SelectionResult`; the results are
merged in document order. Object-valued fields and inline fragments are
handed back to the builder, which synthesizes them as declarations of their
own and returns the name to link to.
"""

from functools import reduce
from typing import TYPE_CHECKING, Iterable

from graphql import (
    FieldNode,
    FragmentSpreadNode,
    GraphQLNamedType,
    InlineFragmentNode,
    SelectionNode,
    SelectionSetNode,
    is_abstract_type,
)

from .classifier import classify
from .ir import TYPENAME, AliasedLeaf, DeclarationKind, LinkField, SelectionResult

if TYPE_CHECKING:
    from .synthesizer import DeclarationSetBuilder


def response_key(node: FieldNode) -> str:
    return node.alias.value if node.alias else node.name.value


def merge_fields(selections: Iterable[SelectionNode]) -> list[SelectionNode]:
    """Combine fields that share a response key into the first of them.

    The sub-selections of later fields are appended to the first one's, the
    same way a server merges them into a single response value.
    """
    merged: list[SelectionNode] = []
    positions: dict[str, int] = {}
    for node in selections:
        if not isinstance(node, FieldNode):
            merged.append(node)
            continue
        key = response_key(node)
        if key not in positions:
            positions[key] = len(merged)
            merged.append(node)
            continue
        first = merged[positions[key]]
        if node.selection_set is None:
            continue
        if first.selection_set is not None:
            combined = (*first.selection_set.selections, *node.selection_set.selections)
        else:
            combined = tuple(node.selection_set.selections)
        merged[positions[key]] = FieldNode(
            alias=first.alias,
            name=first.name,
            arguments=first.arguments,
            directives=first.directives,
            selection_set=SelectionSetNode(selections=combined),
        )
    return merged


class SelectionCollector:
    """Collects leaf, aliased, link, spread and inline-fragment selections."""

    def __init__(self, builder: "DeclarationSetBuilder"):
        self.builder = builder

    def collect(
        self,
        parent_type: GraphQLNamedType,
        selection_set: SelectionSetNode | None,
        declaration_name: str,
        typename_keys: tuple[str, ...] = (),
    ) -> SelectionResult:
        """Collect a selection set made against ``parent_type``.

        Args:
            parent_type: The schema type the selections are made on
            selection_set: The selections; None counts as empty
            declaration_name: Name of the declaration being built, used to
                derive names for nested declarations
            typename_keys: ``__typename`` response keys selected on an
                enclosing abstract type, which this selection must carry

        Returns:
            The merged result of every selection
        """
        selections = merge_fields(selection_set.selections if selection_set else ())
        # On an abstract type only the concrete branches can state the literal
        if is_abstract_type(parent_type):
            branch_keys = typename_keys + tuple(
                response_key(s)
                for s in selections
                if isinstance(s, FieldNode) and s.name.value == TYPENAME
            )
        else:
            branch_keys = ()
        return reduce(
            SelectionResult.merge,
            (self._collect_selection(parent_type, s, declaration_name, branch_keys) for s in selections),
            SelectionResult(typename_keys=typename_keys),
        )

    def _collect_selection(
        self,
        parent_type: GraphQLNamedType,
        node: SelectionNode,
        declaration_name: str,
        branch_keys: tuple[str, ...],
    ) -> SelectionResult:
        if isinstance(node, FieldNode):
            return self._collect_field(parent_type, node, declaration_name)
        if isinstance(node, FragmentSpreadNode):
            return self._collect_fragment_spread(node)
        if isinstance(node, InlineFragmentNode):
            return self._collect_inline_fragment(parent_type, node, declaration_name, branch_keys)
        return SelectionResult()

    def _collect_field(
        self, parent_type: GraphQLNamedType, node: FieldNode, declaration_name: str
    ) -> SelectionResult:
        field_name = node.name.value
        alias = node.alias.value if node.alias else None
        if field_name == TYPENAME:
            return SelectionResult(typename_keys=(alias or TYPENAME,))

        field_def = self.builder.field_def(parent_type, field_name)
        classified = classify(field_def.type, self.builder.scalars)

        if classified.is_leaf:
            if alias:
                return SelectionResult(aliased_fields=(AliasedLeaf(alias, field_name),))
            return SelectionResult(leaf_fields=(field_name,))

        sub_name = self.builder.declare(
            classified.base_type,
            node.selection_set,
            self.builder.policy.nested_name(declaration_name, alias or field_name),
            DeclarationKind.SELECTION,
        )
        link = LinkField(
            alias=alias,
            field_name=field_name,
            base_type_name=classified.base_type.name,
            type_ref=classified.ref(sub_name),
        )
        return SelectionResult(link_fields=(link,))

    def _collect_fragment_spread(self, node: FragmentSpreadNode) -> SelectionResult:
        return SelectionResult(fragment_spreads=(self.builder.spread(node.name.value),))

    def _collect_inline_fragment(
        self,
        parent_type: GraphQLNamedType,
        node: InlineFragmentNode,
        declaration_name: str,
        typename_keys: tuple[str, ...],
    ) -> SelectionResult:
        # A fragment without a type condition applies to the enclosing type
        on_type = node.type_condition.name.value if node.type_condition else parent_type.name
        schema_type = self.builder.fragments.resolve_inline(on_type)
        branch = self.builder.declare(
            schema_type,
            node.selection_set,
            self.builder.policy.inline_fragment_name(declaration_name, on_type),
            DeclarationKind.INLINE_FRAGMENT,
            typename_keys=typename_keys,
        )
        if branch is None:
            return SelectionResult()
        return SelectionResult(inline_fragments=((on_type, (branch,)),))
