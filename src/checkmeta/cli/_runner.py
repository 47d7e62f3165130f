from __future__ import annotations

import dataclasses
import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from checkmeta.cli._loader import LoadError, load_declarations
from checkmeta.core.config import CheckmetaConfig
from checkmeta.core.errors import MetadataValidationError
from checkmeta.core.validator import validate

if TYPE_CHECKING:
    from checkmeta.core.metadata import CheckMetadata

logger = logging.getLogger("checkmeta")


@dataclass
class CheckResult:
    metadata: CheckMetadata
    module: str
    error: MetadataValidationError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass
class CheckReport:
    modules: tuple[str, ...]
    results: list[CheckResult] = field(default_factory=list)
    skipped: list[str] = field(default_factory=list)
    empty_modules: list[str] = field(default_factory=list)
    reexported: list[tuple[str, str]] = field(default_factory=list)
    """``(module, name)`` of declarations already validated via an earlier module."""

    @property
    def failures(self) -> list[CheckResult]:
        return [r for r in self.results if not r.ok]


def run_check(
    modules: tuple[str, ...],
    *,
    config: CheckmetaConfig | None = None,
    exclude: set[str] | None = None,
) -> CheckReport:
    """Load every declaration from *modules* and validate each one.

    Raises:
        :class:`LoadError`: If a module cannot be imported or two different
            declarations share a name. The same declaration re-exported by
            another module is validated once.

    """
    if exclude:
        base = config or CheckmetaConfig()
        config = dataclasses.replace(base, exclude=base.exclude | frozenset(exclude))

    report = CheckReport(modules=modules)
    owners: dict[str, tuple[str, CheckMetadata]] = {}
    for module in modules:
        declarations = load_declarations(module)
        if not declarations:
            report.empty_modules.append(module)

        for metadata in declarations:
            if (seen := owners.get(metadata.name)) is not None:
                owner, first = seen
                if first is metadata:
                    logger.debug("%s.%s already checked in %s", module, metadata.name, owner)
                    report.reexported.append((module, metadata.name))
                    continue
                msg = f"Duplicate check name {metadata.name!r} in {owner!r} and {module!r}"
                raise LoadError(msg)
            owners[metadata.name] = (module, metadata)

            if config is not None and not config.allows(metadata):
                logger.debug("Skipping %s (excluded by config)", metadata.name)
                report.skipped.append(metadata.name)
                continue

            result = CheckResult(metadata=metadata, module=module)
            try:
                validate(metadata)
            except MetadataValidationError as exc:
                result.error = exc
            logger.debug(
                "%s.%s: %s", module, metadata.name, "ok" if result.ok else result.error
            )
            report.results.append(result)

    return report
