"""Classify a schema field's declared type for synthesis.

A field is a leaf when its named type is a scalar, an enum, or a scalar the
configuration lists explicitly. Anything else (object, interface, union)
needs its own synthesized declaration.
"""

from dataclasses import dataclass

from graphql import (
    GraphQLNamedType,
    GraphQLOutputType,
    GraphQLType,
    get_named_type,
    is_enum_type,
    is_list_type,
    is_non_null_type,
    is_scalar_type,
)

from .ir import TypeRef, Wrapper
from .scalars import ScalarRegistry


@dataclass(frozen=True)
class ClassifiedType:
    """The result of classifying one declared type."""
    is_leaf: bool
    base_type: GraphQLNamedType
    wrappers: tuple[Wrapper, ...]

    @property
    def is_list(self) -> bool:
        return Wrapper.LIST in self.wrappers

    @property
    def is_required(self) -> bool:
        return bool(self.wrappers) and self.wrappers[0] is Wrapper.NON_NULL

    def ref(self, name: str | None) -> TypeRef:
        """Point these modifiers at another type name."""
        return TypeRef(name, self.wrappers)


def unwrap(type_: GraphQLType) -> tuple[Wrapper, ...]:
    """Return the modifiers around a type, outermost first."""
    wrappers = []
    while is_non_null_type(type_) or is_list_type(type_):
        wrappers.append(Wrapper.NON_NULL if is_non_null_type(type_) else Wrapper.LIST)
        type_ = type_.of_type
    return tuple(wrappers)


def is_leaf_type(named_type: GraphQLNamedType, scalars: ScalarRegistry | None = None) -> bool:
    if is_scalar_type(named_type) or is_enum_type(named_type):
        return True
    return scalars is not None and scalars.is_configured(named_type.name)


def classify(field_type: GraphQLOutputType, scalars: ScalarRegistry | None = None) -> ClassifiedType:
    """Classify a field's declared type."""
    base_type = get_named_type(field_type)
    return ClassifiedType(
        is_leaf=is_leaf_type(base_type, scalars),
        base_type=base_type,
        wrappers=unwrap(field_type),
    )
