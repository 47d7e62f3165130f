import dataclasses
from typing import Any

import pytest

from checkmeta.core.errors import InconsistentMetadataError
from checkmeta.core.metadata import CheckMetadata
from checkmeta.core.validator import validate

BASE_METADATA = CheckMetadata(name="SampleCheck", summary="A sample check")


def make_metadata(**overrides: Any) -> CheckMetadata:
    return dataclasses.replace(BASE_METADATA, **overrides)


def assert_inconsistent(metadata: CheckMetadata, message: str) -> InconsistentMetadataError:
    with pytest.raises(InconsistentMetadataError) as excinfo:
        validate(metadata)
    assert str(excinfo.value) == message, f"Expected {message!r}, got {str(excinfo.value)!r}"
    return excinfo.value
