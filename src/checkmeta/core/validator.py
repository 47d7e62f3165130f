"""Wellformedness checks for :class:`CheckMetadata` records."""

from __future__ import annotations

from typing import TYPE_CHECKING, assert_never

from checkmeta.core._types import LinkPolicy, SuppressionPolicy
from checkmeta.core.errors import (
    InconsistentMetadataError,
    MetadataValidationError,
    MissingMetadataError,
)
from checkmeta.core.metadata import GENERIC_SUPPRESSION_MARKER

if TYPE_CHECKING:
    from checkmeta.core.metadata import CheckMetadata

_LINK_FIELDS = ("link_policy", "link")
_SUPPRESSION_FIELDS = ("suppression_policy", "custom_suppression_markers")


def validate(metadata: CheckMetadata | None) -> None:
    """Validate *metadata* for internal consistency.

    Link fields are checked before suppression fields and only the first
    violation is reported.

    Raises:
        :class:`MissingMetadataError`: If *metadata* is ``None``.
        :class:`InconsistentMetadataError`: If a pair of fields contradicts
            each other.

    """
    if metadata is None:
        raise MissingMetadataError("No metadata provided")

    _check_link(metadata)
    _check_suppression(metadata)


def is_valid(metadata: CheckMetadata | None) -> bool:
    """Return ``True`` if :func:`validate` accepts *metadata*."""
    try:
        validate(metadata)
    except MetadataValidationError:
        return False
    return True


def _check_link(metadata: CheckMetadata) -> None:
    match metadata.link_policy:
        case LinkPolicy.CUSTOM:
            if not metadata.link:
                msg = "Expected a custom link but none was provided"
                raise InconsistentMetadataError(msg, _LINK_FIELDS)
        case LinkPolicy.AUTOGENERATED | LinkPolicy.NONE:
            if metadata.link:
                msg = f"Expected no custom link but found: {metadata.link}"
                raise InconsistentMetadataError(msg, _LINK_FIELDS)
        case _:
            assert_never(metadata.link_policy)


def _check_suppression(metadata: CheckMetadata) -> None:
    markers = frozenset(metadata.custom_suppression_markers)
    match metadata.suppression_policy:
        case SuppressionPolicy.CUSTOM_ANNOTATION:
            if not markers:
                msg = "Expected a custom suppression annotation but none was provided"
                raise InconsistentMetadataError(msg, _SUPPRESSION_FIELDS)
            if GENERIC_SUPPRESSION_MARKER in markers:
                msg = (
                    "Custom suppression annotation may not use "
                    "the built-in generic-suppression marker"
                )
                raise InconsistentMetadataError(msg, _SUPPRESSION_FIELDS)
        case SuppressionPolicy.ANNOTATION_BASED | SuppressionPolicy.UNSUPPRESSIBLE:
            if markers:
                # Set iteration order is not stable across runs.
                found = ", ".join(sorted(markers))
                msg = f"Expected no custom suppression annotations but found these: {found}"
                raise InconsistentMetadataError(msg, _SUPPRESSION_FIELDS)
        case _:
            assert_never(metadata.suppression_policy)
