"""Core domain types and logic."""

from .config import PackageConfig, default_config, parse_file_to_config
from .errors import (
    AssemblyError,
    ConfigBuildError,
    ConfigParseError,
    ErrorCode,
    FetchError,
    MissingParameter,
    PackagingError,
    SelectionError,
)
from .resolver import resolve_config
from .result import Err, Ok, Result
from .version import derive_upstream, with_version

__all__ = [
    # config
    "PackageConfig",
    "default_config",
    "parse_file_to_config",
    # errors
    "AssemblyError",
    "ConfigBuildError",
    "ConfigParseError",
    "ErrorCode",
    "FetchError",
    "MissingParameter",
    "PackagingError",
    "SelectionError",
    # resolver
    "resolve_config",
    # result
    "Err",
    "Ok",
    "Result",
    # version
    "derive_upstream",
    "with_version",
]
