from __future__ import annotations

import json
import os
from typing import TYPE_CHECKING

from checkmeta import __version__
from checkmeta.core._types import LinkPolicy, Severity, SuppressionPolicy
from checkmeta.core.errors import InconsistentMetadataError
from checkmeta.core.metadata import GENERIC_SUPPRESSION_MARKER

if TYPE_CHECKING:
    from checkmeta.cli._runner import CheckReport, CheckResult

_SEVERITY_COLORS: dict[Severity, str] = {
    Severity.ERROR: "\033[31m",  # red
    Severity.WARNING: "\033[33m",  # yellow
    Severity.SUGGESTION: "\033[36m",  # cyan
}
_RED = "\033[31m"
_GREEN = "\033[32m"
_BOLD = "\033[1m"
_DIM = "\033[2m"
_RESET = "\033[0m"

_LINE_WIDTH = 66


def _use_color(no_color_flag: bool) -> bool:
    if no_color_flag:
        return False
    return not os.environ.get("NO_COLOR", "")


def _c(text: str, code: str, *, color: bool) -> str:
    if not color:
        return text
    return f"{code}{text}{_RESET}"


def format_text(report: CheckReport, *, no_color: bool = False) -> str:
    color = _use_color(no_color)
    lines: list[str] = []
    w = lines.append

    w(f"checkmeta {__version__}")
    w("")
    w(f"Checking {', '.join(report.modules)} ...")

    by_module: dict[str, list[CheckResult]] = {}
    for result in report.results:
        by_module.setdefault(result.module, []).append(result)

    for module in report.modules:
        header = f"── {module} "
        fill = "─" * max(0, _LINE_WIDTH - len(header))
        w("")
        w(_c(header + fill, _BOLD, color=color))

        results = by_module.get(module, [])
        shared = [name for m, name in report.reexported if m == module]
        if module in report.empty_modules:
            w(f"  {_c('no checks declared', _DIM, color=color)}")
            continue
        if not results and not shared:
            w(f"  {_c('all checks skipped', _DIM, color=color)}")
            continue

        name_w = max(len(n) for n in [*(r.metadata.name for r in results), *shared])
        sev_w = max(len(s) for s in Severity)
        for r in results:
            name = _c(r.metadata.name.ljust(name_w), _BOLD, color=color)
            sev_color = _SEVERITY_COLORS.get(r.metadata.severity, "")
            sev = _c(str(r.metadata.severity).ljust(sev_w), sev_color, color=color)
            if r.ok:
                w(f"  {name}  {sev}  {_c('OK', _GREEN, color=color)}")
            else:
                w(f"  {name}  {sev}  {_c('INVALID', _RED, color=color)}: {r.error}")
        for n in shared:
            note = _c("already checked", _DIM, color=color)
            w(f"  {n.ljust(name_w)}  {' ' * sev_w}  {note}")

    w("")
    w(_summary_line(report, color=color))
    return "\n".join(lines)


def _summary_line(report: CheckReport, *, color: bool) -> str:
    total = len(report.results)
    failed = len(report.failures)
    noun = "check" if total == 1 else "checks"
    line = f"{total} {noun} validated"
    if report.skipped:
        line += f", {len(report.skipped)} skipped"
    if failed == 0:
        return _c(f"{line}, all valid.", _GREEN, color=color)
    return f"{line}, {_c(f'{failed} invalid', _RED, color=color)}."


def format_json(report: CheckReport) -> str:
    data = {
        "version": __version__,
        "modules": list(report.modules),
        "checks": [_result_json(r) for r in report.results],
        "skipped": report.skipped,
        "empty_modules": report.empty_modules,
        "reexported": [{"module": m, "name": n} for m, n in report.reexported],
        "summary": {
            "total": len(report.results),
            "invalid": len(report.failures),
            "skipped": len(report.skipped),
            "empty_modules": len(report.empty_modules),
        },
    }
    return json.dumps(data, indent=2)


def _result_json(result: CheckResult) -> dict[str, object]:
    error = result.error
    return {
        "name": result.metadata.name,
        "module": result.module,
        "severity": str(result.metadata.severity),
        "tags": list(result.metadata.tags),
        "valid": result.ok,
        "error": str(error) if error is not None else None,
        "fields": list(error.fields) if isinstance(error, InconsistentMetadataError) else [],
    }


def format_policies_text(*, no_color: bool = False) -> str:
    color = _use_color(no_color)
    lines: list[str] = [f"checkmeta {__version__}"]
    w = lines.append

    for title, values in (
        ("Link policies", list(LinkPolicy)),
        ("Suppression policies", list(SuppressionPolicy)),
    ):
        header = f"── {title} ({len(values)}) "
        w("")
        w(_c(header + "─" * max(0, _LINE_WIDTH - len(header)), _BOLD, color=color))
        w("")
        for v in values:
            w(f"  {v}")

    w("")
    w(f"Reserved suppression marker: {_c(GENERIC_SUPPRESSION_MARKER, _BOLD, color=color)}")
    return "\n".join(lines)


def format_policies_json() -> str:
    data = {
        "version": __version__,
        "link_policies": [str(p) for p in LinkPolicy],
        "suppression_policies": [str(p) for p in SuppressionPolicy],
        "reserved_marker": GENERIC_SUPPRESSION_MARKER,
    }
    return json.dumps(data, indent=2)
