"""Layout reconciliation engine.

This module provides the declarative layout schema, expected-path
resolution, the filesystem adapter and the reconciler that creates,
validates and remediates a directory tree.
"""

from layoutctl.layout.adapter import FilesystemAdapter, LocalFilesystem
from layoutctl.layout.catalog import DEFAULT_SCHEMA, DEFAULT_TREE_ROOT
from layoutctl.layout.errors import (
    ConflictError,
    ErrorKind,
    InvalidInputError,
    IOFailureError,
    LayoutError,
    PathNotFoundError,
)
from layoutctl.layout.models import (
    CreateSummary,
    Finding,
    FindingKind,
    GroupSpec,
    LayoutSchema,
    MoveResult,
    RemediationSummary,
    ValidationReport,
)
from layoutctl.layout.reconciler import Reconciler
from layoutctl.layout.resolver import ResolvedLayout, resolve, validate_base_name

__all__ = [
    "DEFAULT_SCHEMA",
    "DEFAULT_TREE_ROOT",
    "ConflictError",
    "CreateSummary",
    "ErrorKind",
    "FilesystemAdapter",
    "Finding",
    "FindingKind",
    "GroupSpec",
    "IOFailureError",
    "InvalidInputError",
    "LayoutError",
    "LayoutSchema",
    "LocalFilesystem",
    "MoveResult",
    "PathNotFoundError",
    "Reconciler",
    "RemediationSummary",
    "ResolvedLayout",
    "ValidationReport",
    "resolve",
    "validate_base_name",
]
