"""Fold a collected selection into the parts of one declaration body.

Parts are always produced in the same order: typename, leaf projection,
aliased leaves, link fields, fragment spreads, inline fragment union. The
printer joins them by intersection.
"""

from graphql import GraphQLNamedType, GraphQLSchema, is_abstract_type

from .ir import (
    TYPENAME,
    AliasedFields,
    BodyPart,
    BranchUnion,
    FragmentIntersection,
    LeafProjection,
    LinkRecord,
    SelectionResult,
    TypenameField,
)
from .naming import NamingPolicy


class TypeComposer:
    """Builds declaration bodies from selection results."""

    def __init__(self, schema: GraphQLSchema, policy: NamingPolicy, add_typename: bool = True):
        self.schema = schema
        self.policy = policy
        self.add_typename = add_typename

    def compose(self, parent_type: GraphQLNamedType, result: SelectionResult) -> tuple[BodyPart, ...]:
        parent_name = self.policy.type_name(parent_type.name)
        parts = (
            *self._typename_fields(parent_type, result),
            self._leaf_projection(parent_name, result),
            self._aliased_fields(parent_name, result),
            self._link_record(result),
            self._fragment_intersection(result),
            self._branch_union(result),
        )
        return tuple(part for part in parts if part is not None)

    def _typename_fields(
        self, parent_type: GraphQLNamedType, result: SelectionResult
    ) -> tuple[TypenameField, ...]:
        keys = tuple(dict.fromkeys(result.typename_keys))
        if is_abstract_type(parent_type):
            # Concrete branches carry the literal; without any, every possible type may answer
            if result.inline_fragments:
                return ()
            possible = tuple(t.name for t in self.schema.get_possible_types(parent_type))
            return tuple(
                TypenameField(parent_type.name, required=True, key=key, possible_types=possible) for key in keys
            )
        fields = tuple(TypenameField(parent_type.name, required=True, key=key) for key in keys)
        if self.add_typename and TYPENAME not in keys:
            fields = (TypenameField(parent_type.name, required=False),) + fields
        return fields

    @staticmethod
    def _leaf_projection(parent_name: str, result: SelectionResult) -> LeafProjection | None:
        if not result.leaf_fields:
            return None
        return LeafProjection(parent_name, tuple(dict.fromkeys(result.leaf_fields)))

    @staticmethod
    def _aliased_fields(parent_name: str, result: SelectionResult) -> AliasedFields | None:
        if not result.aliased_fields:
            return None
        return AliasedFields(parent_name, tuple(dict.fromkeys(result.aliased_fields)))

    @staticmethod
    def _link_record(result: SelectionResult) -> LinkRecord | None:
        if not result.link_fields:
            return None
        return LinkRecord(result.link_fields)

    @staticmethod
    def _fragment_intersection(result: SelectionResult) -> FragmentIntersection | None:
        if not result.fragment_spreads:
            return None
        return FragmentIntersection(tuple(dict.fromkeys(result.fragment_spreads)))

    @staticmethod
    def _branch_union(result: SelectionResult) -> BranchUnion | None:
        if not result.inline_fragments:
            return None
        return BranchUnion(tuple(names for _, names in result.inline_fragments))
