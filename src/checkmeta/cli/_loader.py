import importlib
import sys
from pathlib import Path

from checkmeta.core.metadata import CheckMetadata


class LoadError(Exception):
    """Raised when check declarations cannot be loaded."""


def load_declarations(module_str: str, *, cwd: str | None = None) -> list[CheckMetadata]:
    """Import *module_str* and collect its module-level :class:`CheckMetadata`.

    Adds *cwd* (default: current directory) to ``sys.path[0]`` so that
    local modules can be imported.
    """
    if not module_str or ":" in module_str:
        msg = (
            f"Invalid module {module_str!r} - "
            "expected a dotted module path (e.g. 'myproject.checks')"
        )
        raise LoadError(msg)

    target = str(Path(cwd).resolve()) if cwd else str(Path.cwd())
    if sys.path[0] != target:
        sys.path.insert(0, target)

    try:
        module = importlib.import_module(module_str)
    except ImportError as exc:
        msg = f"Could not import module {module_str!r}: {exc}"
        raise LoadError(msg) from exc

    declarations: list[CheckMetadata] = []
    seen: set[int] = set()
    for name in dir(module):
        obj = getattr(module, name)
        if isinstance(obj, CheckMetadata) and id(obj) not in seen:
            seen.add(id(obj))
            declarations.append(obj)
    return sorted(declarations, key=lambda m: m.name)
