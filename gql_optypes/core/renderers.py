"""Printers turning declarations into TypeScript or Flow source.

Both dialects implement the :class:`Renderer` protocol. The synthesis core
never looks at which one is in use.

Example usage:
    renderer = get_renderer(SynthesisConfig(dialect="flow"))
    print(renderer.render_declaration(declarations[0]))
"""

from abc import ABC, abstractmethod
from typing import Protocol, runtime_checkable

from .config import Dialect, SynthesisConfig
from .ir import (
    AliasedFields,
    BodyPart,
    BranchUnion,
    Declaration,
    FragmentIntersection,
    LeafProjection,
    LinkRecord,
    TypenameField,
    TypeRef,
    VariablesRecord,
    Wrapper,
)


@runtime_checkable
class Renderer(Protocol):
    """Protocol for target type language printers."""

    preamble: str

    def typename_field(self, part: TypenameField) -> str:
        ...

    def leaf_projection(self, part: LeafProjection) -> str:
        ...

    def aliased_fields(self, part: AliasedFields) -> str:
        ...

    def link_record(self, part: LinkRecord) -> str:
        ...

    def fragment_intersection(self, part: FragmentIntersection) -> str:
        ...

    def branch_union(self, part: BranchUnion) -> str:
        ...

    def intersection(self, members: list[str]) -> str:
        ...

    def variables_record(self, part: VariablesRecord) -> str:
        ...

    def wrap(self, type_ref: TypeRef) -> str:
        ...

    def render_declaration(self, declaration: Declaration) -> str:
        ...


class BaseRenderer(ABC):
    """Dialect-independent parts of rendering.

    Subclasses supply the syntax for records, properties, picks, nullable
    and list types.
    """

    preamble = ""
    avoid_optionals = False

    def render_declaration(self, declaration: Declaration) -> str:
        return f"export type {declaration.name} = {self.render_body(declaration.parts)};"

    def render_body(self, parts: tuple[BodyPart, ...]) -> str:
        if not parts:
            return self.record([])
        return self.intersection([self.render_part(part) for part in parts])

    def render_part(self, part: BodyPart) -> str:
        if isinstance(part, TypenameField):
            return self.typename_field(part)
        if isinstance(part, LeafProjection):
            return self.leaf_projection(part)
        if isinstance(part, AliasedFields):
            return self.aliased_fields(part)
        if isinstance(part, LinkRecord):
            return self.link_record(part)
        if isinstance(part, FragmentIntersection):
            return self.fragment_intersection(part)
        if isinstance(part, BranchUnion):
            return self.branch_union(part)
        if isinstance(part, VariablesRecord):
            return self.variables_record(part)
        raise TypeError(f"Cannot render {type(part).__name__}")

    # Composition

    @staticmethod
    def intersection(members: list[str]) -> str:
        return " & ".join(members)

    def branch_union(self, part: BranchUnion) -> str:
        if len(part.branches) == 1:
            return self.intersection(list(part.branches[0]))
        branches = [
            names[0] if len(names) == 1 else f"({self.intersection(list(names))})"
            for names in part.branches
        ]
        return f"({' | '.join(branches)})"

    def fragment_intersection(self, part: FragmentIntersection) -> str:
        return self.intersection(list(part.names))

    # Records

    def typename_field(self, part: TypenameField) -> str:
        literal = " | ".join(f"'{name}'" for name in part.literals)
        return self.record([self.prop(part.key, literal, optional=not part.required)])

    def aliased_fields(self, part: AliasedFields) -> str:
        return self.record(
            [self.prop(f.alias, self.field_type(part.parent, f.field_name)) for f in part.fields]
        )

    def link_record(self, part: LinkRecord) -> str:
        return self.record([self.prop(f.key, self.wrap(f.type_ref)) for f in part.fields])

    def variables_record(self, part: VariablesRecord) -> str:
        return self.record(
            [
                self.prop(
                    f.name,
                    self.wrap(f.type_ref),
                    optional=not f.type_ref.is_required and not self.avoid_optionals,
                )
                for f in part.fields
            ]
        )

    # Modifiers

    def wrap(self, type_ref: TypeRef) -> str:
        """Render a type with its list and non-null modifiers."""
        return self._wrap(type_ref.name, type_ref.wrappers, nullable=True)

    def _wrap(self, name: str | None, wrappers: tuple[Wrapper, ...], nullable: bool) -> str:
        if wrappers and wrappers[0] is Wrapper.NON_NULL:
            return self._wrap(name, wrappers[1:], nullable=False)
        if wrappers:
            inner = self.list_of(self._wrap(name, wrappers[1:], nullable=True))
        else:
            inner = name if name is not None else self.record([])
        return self.nullable(inner) if nullable else inner

    # Dialect syntax

    @abstractmethod
    def record(self, props: list[str]) -> str:
        ...

    @abstractmethod
    def prop(self, name: str, type_str: str, optional: bool = False) -> str:
        ...

    @abstractmethod
    def nullable(self, type_str: str) -> str:
        ...

    @abstractmethod
    def list_of(self, type_str: str) -> str:
        ...

    @abstractmethod
    def leaf_projection(self, part: LeafProjection) -> str:
        ...

    @abstractmethod
    def field_type(self, parent: str, field_name: str) -> str:
        ...


class TypeScriptRenderer(BaseRenderer):
    """TypeScript: ``Pick``, ``Maybe``, optional ``?`` and ``readonly``."""

    def __init__(self, avoid_optionals: bool = False, immutable_types: bool = False):
        self.avoid_optionals = avoid_optionals
        self.immutable_types = immutable_types

    def record(self, props: list[str]) -> str:
        if not props:
            return "{}"
        return f"{{ {', '.join(props)} }}"

    def prop(self, name: str, type_str: str, optional: bool = False) -> str:
        readonly = "readonly " if self.immutable_types else ""
        return f"{readonly}{name}{'?' if optional else ''}: {type_str}"

    def nullable(self, type_str: str) -> str:
        return f"Maybe<{type_str}>"

    def list_of(self, type_str: str) -> str:
        return f"{'ReadonlyArray' if self.immutable_types else 'Array'}<{type_str}>"

    def leaf_projection(self, part: LeafProjection) -> str:
        keys = " | ".join(f"'{name}'" for name in part.fields)
        return f"Pick<{part.parent}, {keys}>"

    def field_type(self, parent: str, field_name: str) -> str:
        return f"{parent}['{field_name}']"


FLOW_PICK_HELPER = (
    "type $Pick<Origin: Object, Keys: Object> = "
    "$ObjMapi<Keys, <Key>(k: Key) => $ElementType<Origin, Key>>;"
)


class FlowRenderer(BaseRenderer):
    """Flow: ``$Pick``, ``?T``, exact objects and ``+`` read-only properties."""

    preamble = FLOW_PICK_HELPER

    def __init__(self, exact_objects: bool = False, read_only: bool = False):
        self.exact_objects = exact_objects
        self.read_only = read_only

    def record(self, props: list[str]) -> str:
        left, right = ("{|", "|}") if self.exact_objects else ("{", "}")
        if not props:
            return f"{left}{right}"
        return f"{left} {', '.join(props)} {right}"

    def prop(self, name: str, type_str: str, optional: bool = False) -> str:
        return f"{'+' if self.read_only else ''}{name}{'?' if optional else ''}: {type_str}"

    def nullable(self, type_str: str) -> str:
        return f"?{type_str}"

    def list_of(self, type_str: str) -> str:
        return f"{'$ReadOnlyArray' if self.read_only else 'Array'}<{type_str}>"

    def leaf_projection(self, part: LeafProjection) -> str:
        keys = ", ".join(f"{name}: *" for name in part.fields)
        return f"$Pick<{part.parent}, {{ {keys} }}>"

    def field_type(self, parent: str, field_name: str) -> str:
        return f"$ElementType<{parent}, '{field_name}'>"


def get_renderer(config: SynthesisConfig) -> Renderer:
    """Build the renderer for the configured dialect."""
    if config.dialect is Dialect.FLOW:
        return FlowRenderer(
            exact_objects=config.use_flow_exact_objects,
            read_only=config.use_flow_read_only_types,
        )
    return TypeScriptRenderer(
        avoid_optionals=config.avoid_optionals,
        immutable_types=config.immutable_types,
    )
