class MetadataValidationError(ValueError):
    """Base class for check metadata validation failures."""


class MissingMetadataError(MetadataValidationError):
    """Raised when no metadata record was supplied at all."""


class InconsistentMetadataError(MetadataValidationError):
    """Raised when two metadata fields contradict each other.

    ``fields`` names the conflicting pair, e.g. ``("link_policy", "link")``.
    """

    def __init__(self, message: str, fields: tuple[str, str]) -> None:
        self.fields = fields
        super().__init__(message)
