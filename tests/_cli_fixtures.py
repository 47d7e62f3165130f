from checkmeta import CheckMetadata, LinkPolicy, Severity, SuppressionPolicy

GOOD = CheckMetadata(
    name="GoodCheck",
    summary="Well-formed declaration",
    severity=Severity.ERROR,
    link_policy=LinkPolicy.CUSTOM,
    link="https://example.com/GoodCheck",
    tags=("style", "docs"),
)
GOOD_ALIAS = GOOD

BAD_LINK = CheckMetadata(
    name="BadLink",
    summary="Custom link policy without a link",
    link_policy=LinkPolicy.CUSTOM,
)

BAD_MARKERS = CheckMetadata(
    name="BadMarkers",
    summary="Unsuppressible check with custom markers",
    suppression_policy=SuppressionPolicy.UNSUPPRESSIBLE,
    custom_suppression_markers=("Foo", "Bar"),
)

not_metadata = "i am a string"
