"""Core modules for operation result type synthesis."""

from .classifier import ClassifiedType, classify
from .collector import SelectionCollector
from .composer import TypeComposer
from .config import Dialect, SynthesisConfig, load_config
from .errors import (
    SynthesisError,
    UnknownFieldError,
    UnknownTypeError,
    UnresolvedFragmentError,
)
from .fragments import FragmentRegistry
from .generator import CodeGenerator
from .ir import (
    AliasedFields,
    AliasedLeaf,
    BranchUnion,
    Declaration,
    DeclarationKind,
    FragmentIntersection,
    LeafProjection,
    LinkField,
    LinkRecord,
    SelectionResult,
    TypenameField,
    TypeRef,
    VariableField,
    VariablesRecord,
    Wrapper,
)
from .loader import load_documents, load_schema
from .naming import CaseFormat, NameAllocator, NamingPolicy
from .renderers import FlowRenderer, Renderer, TypeScriptRenderer, get_renderer
from .scalars import ScalarRegistry
from .synthesizer import DeclarationSetBuilder, synthesize

__all__ = [
    # Config
    "Dialect",
    "SynthesisConfig",
    "load_config",
    # Errors
    "SynthesisError",
    "UnknownFieldError",
    "UnknownTypeError",
    "UnresolvedFragmentError",
    # IR types
    "AliasedFields",
    "AliasedLeaf",
    "BranchUnion",
    "Declaration",
    "DeclarationKind",
    "FragmentIntersection",
    "LeafProjection",
    "LinkField",
    "LinkRecord",
    "SelectionResult",
    "TypenameField",
    "TypeRef",
    "VariableField",
    "VariablesRecord",
    "Wrapper",
    # Synthesis
    "ClassifiedType",
    "classify",
    "CaseFormat",
    "NameAllocator",
    "NamingPolicy",
    "FragmentRegistry",
    "ScalarRegistry",
    "SelectionCollector",
    "TypeComposer",
    "DeclarationSetBuilder",
    "synthesize",
    # Printing
    "Renderer",
    "TypeScriptRenderer",
    "FlowRenderer",
    "get_renderer",
    "CodeGenerator",
    # Loading
    "load_documents",
    "load_schema",
]
