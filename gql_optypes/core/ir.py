"""Intermediate representation for synthesized result types.

This module defines immutable dataclasses describing what a selection set
collected and the named declarations built from it, independent of the
target type language they are eventually printed in.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Union

TYPENAME = "__typename"


class Wrapper(Enum):
    """A GraphQL type modifier."""
    LIST = "list"
    NON_NULL = "non_null"


@dataclass(frozen=True)
class TypeRef:
    """A named type together with its modifiers, outermost first.

    ``[Item!]!`` is ``TypeRef("Item", (NON_NULL, LIST, NON_NULL))``.
    A ``name`` of None stands for an empty record.
    """
    name: str | None
    wrappers: tuple[Wrapper, ...] = ()

    @property
    def is_list(self) -> bool:
        return Wrapper.LIST in self.wrappers

    @property
    def is_required(self) -> bool:
        return bool(self.wrappers) and self.wrappers[0] is Wrapper.NON_NULL


@dataclass(frozen=True)
class AliasedLeaf:
    """A scalar or enum field selected under an alias."""
    alias: str
    field_name: str


@dataclass(frozen=True)
class LinkField:
    """A field whose selection was synthesized into its own declaration."""
    alias: str | None
    field_name: str
    base_type_name: str
    type_ref: TypeRef  # name is the sub-declaration's name

    @property
    def key(self) -> str:
        return self.alias or self.field_name


@dataclass(frozen=True)
class SelectionResult:
    """Everything one selection set contributed, bucketed by kind.

    Results are combined with :meth:`merge`, never mutated.
    """
    leaf_fields: tuple[str, ...] = ()
    aliased_fields: tuple[AliasedLeaf, ...] = ()
    link_fields: tuple[LinkField, ...] = ()
    # Response keys __typename was selected under, aliases included
    typename_keys: tuple[str, ...] = ()
    # (type condition, branch declaration names) in first-seen order
    inline_fragments: tuple[tuple[str, tuple[str, ...]], ...] = ()
    fragment_spreads: tuple[str, ...] = ()

    def merge(self, other: "SelectionResult") -> "SelectionResult":
        """Return a new result holding this one's entries followed by other's."""
        branches = dict(self.inline_fragments)
        for on_type, names in other.inline_fragments:
            branches[on_type] = branches.get(on_type, ()) + names
        return SelectionResult(
            leaf_fields=self.leaf_fields + other.leaf_fields,
            aliased_fields=self.aliased_fields + other.aliased_fields,
            link_fields=self.link_fields + other.link_fields,
            typename_keys=self.typename_keys + other.typename_keys,
            inline_fragments=tuple(branches.items()),
            fragment_spreads=self.fragment_spreads + other.fragment_spreads,
        )

    @property
    def typename_selected(self) -> bool:
        return TYPENAME in self.typename_keys


# Body parts, in the order the composer emits them.


@dataclass(frozen=True)
class TypenameField:
    """``__typename`` as a literal of the concrete type name.

    ``key`` is the response key, which differs when the field was aliased.
    An abstract type with no concrete branches lists its possible types in
    ``possible_types`` and the literal becomes their union.
    """
    type_name: str
    required: bool
    key: str = TYPENAME
    possible_types: tuple[str, ...] = ()

    @property
    def literals(self) -> tuple[str, ...]:
        return self.possible_types or (self.type_name,)


@dataclass(frozen=True)
class LeafProjection:
    """A pick of leaf fields from the parent's schema type."""
    parent: str
    fields: tuple[str, ...]


@dataclass(frozen=True)
class AliasedFields:
    """Aliases mapped to the type of the original field on the parent."""
    parent: str
    fields: tuple[AliasedLeaf, ...]


@dataclass(frozen=True)
class LinkRecord:
    """Link fields, each pointing at its sub-declaration by name."""
    fields: tuple[LinkField, ...]


@dataclass(frozen=True)
class FragmentIntersection:
    """Named references to spread fragments' declarations."""
    names: tuple[str, ...]


@dataclass(frozen=True)
class BranchUnion:
    """One branch per type condition; names within a branch are ANDed."""
    branches: tuple[tuple[str, ...], ...]


@dataclass(frozen=True)
class VariableField:
    """An operation variable; ``type_ref.name`` is already a target type."""
    name: str
    type_ref: TypeRef


@dataclass(frozen=True)
class VariablesRecord:
    fields: tuple[VariableField, ...]


BodyPart = Union[
    TypenameField,
    LeafProjection,
    AliasedFields,
    LinkRecord,
    FragmentIntersection,
    BranchUnion,
    VariablesRecord,
]


class DeclarationKind(Enum):
    """What produced a declaration."""
    OPERATION = "operation"
    FRAGMENT = "fragment"
    SELECTION = "selection"
    INLINE_FRAGMENT = "inline_fragment"
    VARIABLES = "variables"


@dataclass(frozen=True)
class Declaration:
    """One named unit of output; its parts are combined by intersection."""
    name: str
    kind: DeclarationKind
    parts: tuple[BodyPart, ...]
    schema_type: str | None = None

    @property
    def references(self) -> tuple[str, ...]:
        """Names of other declarations this one refers to."""
        names: list[str] = []
        for part in self.parts:
            if isinstance(part, LinkRecord):
                names.extend(f.type_ref.name for f in part.fields if f.type_ref.name)
            elif isinstance(part, FragmentIntersection):
                names.extend(part.names)
            elif isinstance(part, BranchUnion):
                for branch in part.branches:
                    names.extend(branch)
        return tuple(names)
