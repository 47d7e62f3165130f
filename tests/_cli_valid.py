from checkmeta import CheckMetadata, LinkPolicy, SuppressionPolicy

DEAD_EXCEPTION = CheckMetadata(
    name="DeadException",
    summary="Exception created but not thrown",
    suppression_policy=SuppressionPolicy.CUSTOM_ANNOTATION,
    custom_suppression_markers=("AllowDeadException",),
)

RETURN_VALUE_IGNORED = CheckMetadata(
    name="ReturnValueIgnored",
    summary="Return value of a pure method is ignored",
    link_policy=LinkPolicy.NONE,
)
