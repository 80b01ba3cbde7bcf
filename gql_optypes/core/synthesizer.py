"""Declaration set builder: synthesize result types for a whole document set.

Example usage:
    from graphql import build_schema, parse
    from gql_optypes.core.synthesizer import synthesize

    declarations = synthesize(build_schema(sdl), parse(query))
    for decl in declarations:
        print(decl.name, decl.kind.value)
"""

import logging

from graphql import (
    DocumentNode,
    FragmentDefinitionNode,
    GraphQLField,
    GraphQLNamedType,
    GraphQLObjectType,
    GraphQLSchema,
    NamedTypeNode,
    OperationDefinitionNode,
    OperationType,
    SchemaMetaFieldDef,
    SelectionSetNode,
    TypeMetaFieldDef,
    TypeNode,
    VariableDefinitionNode,
    get_named_type,
    is_interface_type,
    is_object_type,
    is_scalar_type,
    type_from_ast,
)

from .classifier import unwrap
from .collector import SelectionCollector
from .composer import TypeComposer
from .config import SynthesisConfig
from .errors import UnknownFieldError, UnknownTypeError
from .fragments import FragmentRegistry
from .ir import (
    Declaration,
    DeclarationKind,
    TypeRef,
    VariableField,
    VariablesRecord,
)
from .naming import NameAllocator, NamingPolicy, to_pascal_case
from .scalars import ScalarRegistry

log = logging.getLogger(__name__)

# Introspection fields only root operation types expose
META_FIELDS: dict[str, GraphQLField] = {
    "__schema": SchemaMetaFieldDef,
    "__type": TypeMetaFieldDef,
}


class DeclarationSetBuilder:
    """Owns the state of exactly one synthesis run.

    Names handed out and declarations emitted live here and nowhere else, so
    independent runs never see each other. Use :meth:`build` once.
    """

    def __init__(
        self,
        schema: GraphQLSchema,
        document: DocumentNode,
        config: SynthesisConfig | None = None,
    ):
        self.schema = schema
        self.document = document
        self.config = config or SynthesisConfig()
        self.scalars = ScalarRegistry(self.config.scalars)
        self.policy = NamingPolicy(
            convention=self.config.naming_convention,
            types_prefix=self.config.types_prefix,
            fragment_suffix=self.config.fragment_suffix,
        )
        # Schema type names are taken so declarations never shadow them
        self.allocator = NameAllocator(self.policy.type_name(name) for name in schema.type_map)
        self.fragments = FragmentRegistry(
            schema,
            (d for d in document.definitions if isinstance(d, FragmentDefinitionNode)),
            self.policy,
            self.allocator,
        )
        self.collector = SelectionCollector(self)
        self.composer = TypeComposer(schema, self.policy, add_typename=self.config.add_typename)
        self._declarations: list[Declaration] = []
        self._fragments_started: set[str] = set()

    def build(self) -> tuple[Declaration, ...]:
        """Synthesize every operation and fragment, in document order."""
        for definition in self.document.definitions:
            if isinstance(definition, FragmentDefinitionNode):
                self._synthesize_fragment(definition.name.value)
            elif isinstance(definition, OperationDefinitionNode):
                self._synthesize_operation(definition)
        return tuple(self._declarations)

    # Services for the collector

    def declare(
        self,
        parent_type: GraphQLNamedType,
        selection_set: SelectionSetNode | None,
        candidate: str | None,
        kind: DeclarationKind,
        name: str | None = None,
        typename_keys: tuple[str, ...] = (),
    ) -> str | None:
        """Synthesize one declaration and return its name.

        Nested declarations are emitted before the one that refers to them.
        An empty selection set produces nothing and returns None.
        """
        if selection_set is None or not selection_set.selections:
            return None
        if name is None:
            name = self.allocator.allocate(candidate)
        result = self.collector.collect(parent_type, selection_set, name, typename_keys)
        parts = self.composer.compose(parent_type, result)
        self._emit(Declaration(name, kind, parts, schema_type=parent_type.name))
        return name

    def spread(self, fragment_name: str) -> str:
        """Resolve a fragment spread, synthesizing the fragment on first use."""
        name = self.fragments.record_spread(fragment_name)
        self._synthesize_fragment(fragment_name)
        return name

    def field_def(self, parent_type: GraphQLNamedType, field_name: str) -> GraphQLField:
        """Look up the definition of a selected field."""
        if field_name in META_FIELDS and self._is_root_type(parent_type):
            return META_FIELDS[field_name]
        if not (is_object_type(parent_type) or is_interface_type(parent_type)):
            raise UnknownFieldError(parent_type.name, field_name)
        field = parent_type.fields.get(field_name)
        if field is None:
            raise UnknownFieldError(parent_type.name, field_name)
        return field

    # Definitions

    def _synthesize_fragment(self, fragment_name: str):
        if fragment_name in self._fragments_started:
            return
        self._fragments_started.add(fragment_name)
        node = self.fragments.definition(fragment_name)
        on_type = self.fragments.resolve_inline(node.type_condition.name.value)
        log.debug("Synthesizing fragment %s on %s", fragment_name, on_type.name)
        self.declare(
            on_type,
            node.selection_set,
            None,
            DeclarationKind.FRAGMENT,
            name=self.fragments.record_spread(fragment_name),
        )

    def _synthesize_operation(self, node: OperationDefinitionNode):
        root_type = self._root_type(node.operation)
        name = self.allocator.allocate(
            self.policy.operation_name(node.name.value if node.name else None, node.operation)
        )
        log.debug("Synthesizing %s %s", node.operation.value, name)
        self.declare(root_type, node.selection_set, None, DeclarationKind.OPERATION, name=name)
        if self.config.emit_variables:
            self._emit(self._variables_declaration(node, name))

    def _variables_declaration(self, node: OperationDefinitionNode, operation_name: str) -> Declaration:
        fields = tuple(self._variable_field(v) for v in node.variable_definitions or ())
        return Declaration(
            self.allocator.allocate(self.policy.variables_name(operation_name)),
            DeclarationKind.VARIABLES,
            (VariablesRecord(fields),),
        )

    def _variable_field(self, node: VariableDefinitionNode) -> VariableField:
        var_type = type_from_ast(self.schema, node.type)
        if var_type is None:
            raise UnknownTypeError(self._named_type_node(node.type).name.value)
        named_type = get_named_type(var_type)
        if is_scalar_type(named_type) or self.scalars.is_configured(named_type.name):
            target = self.scalars.get(named_type.name)
        else:
            target = self.policy.type_name(named_type.name)
        return VariableField(node.variable.name.value, TypeRef(target, unwrap(var_type)))

    # Helpers

    def _emit(self, declaration: Declaration):
        log.debug("Declared %s (%s)", declaration.name, declaration.kind.value)
        self._declarations.append(declaration)

    def _root_type(self, operation: OperationType) -> GraphQLObjectType:
        root_type = self.schema.get_root_type(operation)
        if root_type is None:
            raise UnknownTypeError(to_pascal_case(operation.value))
        return root_type

    def _is_root_type(self, type_: GraphQLNamedType) -> bool:
        return type_ in (
            self.schema.query_type,
            self.schema.mutation_type,
            self.schema.subscription_type,
        )

    @staticmethod
    def _named_type_node(type_node: TypeNode) -> NamedTypeNode:
        while not isinstance(type_node, NamedTypeNode):
            type_node = type_node.type
        return type_node


def synthesize(
    schema: GraphQLSchema,
    document: DocumentNode,
    config: SynthesisConfig | None = None,
) -> tuple[Declaration, ...]:
    """Synthesize the result type declarations for a merged document set.

    Args:
        schema: The schema the documents were validated against
        document: All operations and fragments, merged into one document
        config: Naming, scalar and typename options

    Returns:
        The declarations in emission order; a declaration only refers to
        declarations before it, except for fragments referenced from their
        own nested selections

    Raises:
        UnknownFieldError: A selection names a field its type lacks
        UnknownTypeError: A type condition or variable names a missing type
        UnresolvedFragmentError: A spread names an undefined fragment
    """
    return DeclarationSetBuilder(schema, document, config).build()
