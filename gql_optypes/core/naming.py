"""Naming policy and run-scoped name allocation for declarations."""

import re
from enum import Enum
from typing import Iterable

from graphql import OperationType


class CaseFormat(str, Enum):
    PASCAL_CASE = "PascalCase"
    KEEP = "keep"


def to_snake_case(name: str) -> str:
    """Convert camelCase or PascalCase to snake_case."""
    s1 = re.sub('(.)([A-Z][a-z]+)', r'\1_\2', name)
    return re.sub('([a-z0-9])([A-Z])', r'\1_\2', s1).lower()


def to_pascal_case(name: str) -> str:
    """Convert snake_case or camelCase to PascalCase."""
    snake = to_snake_case(name)
    return "".join(word.capitalize() for word in snake.split("_"))


class NamingPolicy:
    """Builds candidate declaration names and schema type references.

    Example:
        policy = NamingPolicy(types_prefix="I")
        policy.operation_name("getUser", OperationType.QUERY)  # "IGetUserQuery"
        policy.type_name("User")                               # "IUser"
    """

    def __init__(
        self,
        convention: CaseFormat = CaseFormat.PASCAL_CASE,
        types_prefix: str = "",
        fragment_suffix: str = "Fragment",
    ):
        self.convention = CaseFormat(convention)
        self.types_prefix = types_prefix
        self.fragment_suffix = fragment_suffix

    def convert(self, name: str) -> str:
        if self.convention is CaseFormat.KEEP:
            return name
        return to_pascal_case(name)

    def type_name(self, schema_name: str) -> str:
        """Name under which a schema type is declared by the schema types."""
        return f"{self.types_prefix}{self.convert(schema_name)}"

    def operation_name(self, name: str | None, operation: OperationType) -> str:
        return f"{self.types_prefix}{self.convert(name or 'Unnamed')}{to_pascal_case(operation.value)}"

    def fragment_name(self, name: str) -> str:
        return f"{self.types_prefix}{self.convert(name)}{self.fragment_suffix}"

    def nested_name(self, parent_name: str, field_key: str) -> str:
        return f"{parent_name}{self.convert(field_key)}"

    def inline_fragment_name(self, parent_name: str, type_condition: str) -> str:
        return f"{parent_name}{self.convert(type_condition)}InlineFragment"

    @staticmethod
    def variables_name(operation_name: str) -> str:
        return f"{operation_name}Variables"


class NameAllocator:
    """Hands out unique names within one synthesis run.

    A name already taken gets a numeric suffix: ``User``, ``User2``,
    ``User3``. Allocation order decides who gets the bare name, so the same
    input in the same order always yields the same names.
    """

    def __init__(self, reserved: Iterable[str] = ()):
        self._taken: set[str] = set(reserved)

    def allocate(self, candidate: str) -> str:
        if candidate not in self._taken:
            self._taken.add(candidate)
            return candidate
        counter = 2
        while f"{candidate}{counter}" in self._taken:
            counter += 1
        name = f"{candidate}{counter}"
        self._taken.add(name)
        return name

    def __contains__(self, name: str) -> bool:
        return name in self._taken
