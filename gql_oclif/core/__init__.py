"""Core modules for oclif command generation."""

from .collector import OperationCollector
from .config import OclifConfig
from .directive import (
    OCLIF_DIRECTIVE,
    OCLIF_DIRECTIVE_SDL,
    extract_directive_config,
    find_directive,
    omit_directive,
)
from .errors import (
    AnonymousOperationError,
    CodegenError,
    DocumentLoadError,
    InvalidDirectiveValueError,
    OperationCountError,
    UnknownDirectiveArgumentError,
    UnsupportedFlagTypeError,
)
from .generator import CommandGenerator, GeneratedCommand, generate_command
from .hooks import AddHeaderHook, HookRunner, PostGenerateHook
from .ir import (
    DirectiveConfig,
    FlagDeclaration,
    FlagKind,
    Operation,
    TypeShape,
)
from .loader import SchemaLoader, collect_documents
from .scalars import (
    BooleanHandler,
    FlagTypeHandler,
    FloatHandler,
    IntegerHandler,
    ScalarRegistry,
    StringHandler,
    get_parser,
    map_base_type,
)
from .types import flag_for_variable, unwrap_type

__all__ = [
    # Errors
    "CodegenError",
    "OperationCountError",
    "AnonymousOperationError",
    "UnknownDirectiveArgumentError",
    "InvalidDirectiveValueError",
    "UnsupportedFlagTypeError",
    "DocumentLoadError",
    # IR types
    "DirectiveConfig",
    "FlagDeclaration",
    "FlagKind",
    "Operation",
    "TypeShape",
    # Type mapping
    "unwrap_type",
    "flag_for_variable",
    "map_base_type",
    "get_parser",
    "FlagTypeHandler",
    "BooleanHandler",
    "IntegerHandler",
    "FloatHandler",
    "StringHandler",
    "ScalarRegistry",
    # Directive
    "OCLIF_DIRECTIVE",
    "OCLIF_DIRECTIVE_SDL",
    "find_directive",
    "extract_directive_config",
    "omit_directive",
    # Collection and generation
    "OperationCollector",
    "CommandGenerator",
    "GeneratedCommand",
    "generate_command",
    "OclifConfig",
    # Hooks
    "PostGenerateHook",
    "AddHeaderHook",
    "HookRunner",
    # Loading
    "SchemaLoader",
    "collect_documents",
]
