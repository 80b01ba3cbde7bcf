"""Errors raised while synthesizing result types.

All of them mean the selection tree does not match its schema. They abort
the whole run; no partial declaration set is ever returned.
"""


class SynthesisError(Exception):
    """Base class for synthesis failures."""


class UnknownFieldError(SynthesisError):
    """A selection names a field that its resolved type does not have."""

    def __init__(self, type_name: str, field_name: str):
        self.type_name = type_name
        self.field_name = field_name
        super().__init__(f"Type '{type_name}' has no field '{field_name}'")


class UnknownTypeError(SynthesisError):
    """A type condition or variable references a type missing from the schema."""

    def __init__(self, type_name: str):
        self.type_name = type_name
        super().__init__(f"Unknown type '{type_name}'")


class UnresolvedFragmentError(SynthesisError):
    """A spread references a fragment that is never defined."""

    def __init__(self, fragment_name: str):
        self.fragment_name = fragment_name
        super().__init__(f"Unknown fragment '{fragment_name}'")
