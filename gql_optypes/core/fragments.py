"""Fragment and type-condition lookups for one document set."""

import logging
from typing import Iterable

from graphql import FragmentDefinitionNode, GraphQLNamedType, GraphQLSchema

from .errors import UnknownTypeError, UnresolvedFragmentError
from .naming import NameAllocator, NamingPolicy

log = logging.getLogger(__name__)


class FragmentRegistry:
    """Knows every fragment defined in the documents and its declaration name.

    Declaration names are reserved up front, in document order, so a spread
    can reference a fragment before (or without) its declaration having been
    emitted.
    """

    def __init__(
        self,
        schema: GraphQLSchema,
        definitions: Iterable[FragmentDefinitionNode],
        policy: NamingPolicy,
        allocator: NameAllocator,
    ):
        self.schema = schema
        self._definitions: dict[str, FragmentDefinitionNode] = {}
        self._names: dict[str, str] = {}
        for node in definitions:
            name = node.name.value
            if name in self._definitions:
                log.debug("Ignoring duplicate definition of fragment %s", name)
                continue
            self._definitions[name] = node
            self._names[name] = allocator.allocate(policy.fragment_name(name))

    def definition(self, fragment_name: str) -> FragmentDefinitionNode:
        try:
            return self._definitions[fragment_name]
        except KeyError:
            raise UnresolvedFragmentError(fragment_name) from None

    def record_spread(self, fragment_name: str) -> str:
        """Return the declaration name a spread of ``fragment_name`` refers to."""
        try:
            return self._names[fragment_name]
        except KeyError:
            raise UnresolvedFragmentError(fragment_name) from None

    def resolve_inline(self, type_condition: str) -> GraphQLNamedType:
        """Look up the schema type named by a type condition."""
        schema_type = self.schema.get_type(type_condition)
        if schema_type is None:
            raise UnknownTypeError(type_condition)
        return schema_type
