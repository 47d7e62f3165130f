from importlib.metadata import version

from checkmeta.core._types import LinkPolicy, Severity, SuppressionPolicy
from checkmeta.core.config import CheckmetaConfig, ConfigError
from checkmeta.core.errors import (
    InconsistentMetadataError,
    MetadataValidationError,
    MissingMetadataError,
)
from checkmeta.core.metadata import GENERIC_SUPPRESSION_MARKER, CheckMetadata
from checkmeta.core.validator import is_valid, validate

__version__ = version("checkmeta")


__all__ = [
    "GENERIC_SUPPRESSION_MARKER",
    "CheckMetadata",
    "CheckmetaConfig",
    "ConfigError",
    "InconsistentMetadataError",
    "LinkPolicy",
    "MetadataValidationError",
    "MissingMetadataError",
    "Severity",
    "SuppressionPolicy",
    "__version__",
    "is_valid",
    "validate",
]
