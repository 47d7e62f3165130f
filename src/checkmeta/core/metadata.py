from dataclasses import dataclass

from checkmeta.core._types import LinkPolicy, Severity, SuppressionPolicy

GENERIC_SUPPRESSION_MARKER = "SuppressWarnings"
"""The framework's built-in suppression marker. Custom markers may not reuse it."""


@dataclass(frozen=True, slots=True)
class CheckMetadata:
    """Declarative metadata for a single static-analysis check.

    Instances are pure data - they describe how a check is documented and
    silenced, not what it detects. Run :func:`checkmeta.validate` on them
    before registering the check.

    Example::

        DEAD_EXCEPTION = CheckMetadata(
            name="DeadException",
            summary="Exception created but not thrown",
            severity=Severity.ERROR,
            suppression_policy=SuppressionPolicy.CUSTOM_ANNOTATION,
            custom_suppression_markers=("AllowDeadException",),
        )
    """

    name: str
    summary: str
    severity: Severity = Severity.WARNING
    link_policy: LinkPolicy = LinkPolicy.AUTOGENERATED
    link: str = ""
    suppression_policy: SuppressionPolicy = SuppressionPolicy.ANNOTATION_BASED
    custom_suppression_markers: tuple[str, ...] = ()
    tags: tuple[str, ...] = ()

    def __str__(self) -> str:
        return f"[{self.name}] {self.summary}"
