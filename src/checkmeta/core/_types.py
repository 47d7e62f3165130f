from enum import StrEnum


class LinkPolicy(StrEnum):
    """How a check's documentation link is produced."""

    CUSTOM = "custom"
    AUTOGENERATED = "autogenerated"
    NONE = "none"


class SuppressionPolicy(StrEnum):
    """How a single finding of a check may be silenced."""

    CUSTOM_ANNOTATION = "custom_annotation"
    ANNOTATION_BASED = "annotation_based"
    UNSUPPRESSIBLE = "unsuppressible"


class Severity(StrEnum):
    """Check severity levels (ordered lowest → highest)."""

    SUGGESTION = "suggestion"
    WARNING = "warning"
    ERROR = "error"
