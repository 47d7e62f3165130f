from checkmeta import CheckMetadata

DEAD_EXCEPTION = CheckMetadata(name="DeadException", summary="Same name as in _cli_valid")
