"""Scalar table for result type synthesis.

Maps GraphQL scalar names to the type they are printed as in the target
language. Every scalar registered here is treated as a leaf, even if the
schema does not declare it as a scalar.

Example usage:
    from gql_optypes.core.scalars import ScalarRegistry

    registry = ScalarRegistry()
    registry.register("Money", "string")

    registry.get("Money")   # "string"
    registry.get("Int")     # "number"
"""

BUILTIN_SCALARS = {
    "ID": "string",
    "String": "string",
    "Int": "number",
    "Float": "number",
    "Boolean": "boolean",
}

DEFAULT_SCALARS = {
    "DateTime": "string",
    "Date": "string",
    "UUID": "string",
    "JSON": "any",
    "JSONObject": "any",
}

# Target type for custom scalars nobody registered
FALLBACK_TYPE = "any"


class ScalarRegistry:
    """Registry of scalar name to target type.

    Example:
        registry = ScalarRegistry({"Money": "string"})
        registry.is_configured("Money")  # True
    """

    def __init__(self, custom: dict[str, str] | None = None):
        self._types: dict[str, str] = {}
        self._configured: set[str] = set()
        self._register_defaults()
        for name, target_type in (custom or {}).items():
            self.register(name, target_type)

    def _register_defaults(self):
        """Register built-in and commonly used scalars."""
        self._types.update(BUILTIN_SCALARS)
        self._types.update(DEFAULT_SCALARS)

    def register(self, scalar_name: str, target_type: str):
        """Register (or override) the target type for a scalar."""
        self._types[scalar_name] = target_type
        self._configured.add(scalar_name)

    def get(self, scalar_name: str) -> str:
        """Get the target type for a scalar, falling back to ``any``."""
        return self._types.get(scalar_name, FALLBACK_TYPE)

    def is_configured(self, scalar_name: str) -> bool:
        """Check if a scalar was registered explicitly rather than by default."""
        return scalar_name in self._configured
