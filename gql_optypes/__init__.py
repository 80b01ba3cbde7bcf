"""Generate TypeScript and Flow result types for GraphQL operations."""

from .core import CodeGenerator, SynthesisConfig, synthesize

__version__ = "0.1.0"

__all__ = ["CodeGenerator", "SynthesisConfig", "synthesize", "__version__"]
