from __future__ import annotations

import fnmatch
import re
import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from checkmeta.core.metadata import CheckMetadata


class ConfigError(ValueError):
    """Raised when a config file contains an invalid value."""


def _is_glob(pattern: str) -> bool:
    return any(c in pattern for c in "*?[")


@dataclass(frozen=True)
class CheckmetaConfig:
    """Configuration for the ``checkmeta`` command.

    Can be loaded from ``.checkmeta.toml`` or ``pyproject.toml [tool.checkmeta]``
    via :func:`load_config`.

    Example ``pyproject.toml``::

        [tool.checkmeta]
        modules = ["myproject.checks"]
        exclude = ["Experimental*"]

    """

    include: frozenset[str] = field(default_factory=frozenset)
    """Allowlist: if non-empty, only checks whose name matches are validated.
    Applied before ``exclude``.

    Supports both exact names (``"DeadException"``) and glob patterns (``"Dead*"``).
    """

    exclude: frozenset[str] = field(default_factory=frozenset)
    """Denylist: check names to skip. Applied after ``include``."""

    modules: tuple[str, ...] = ()
    """Modules to scan when ``checkmeta check`` is run without arguments."""

    # Derived from include/exclude; excluded from __eq__ / __hash__ / __repr__.

    _exact_include: frozenset[str] = field(
        default_factory=frozenset, init=False, compare=False, hash=False, repr=False
    )
    _glob_include: tuple[re.Pattern[str], ...] = field(
        default=(), init=False, compare=False, hash=False, repr=False
    )
    _exact_exclude: frozenset[str] = field(
        default_factory=frozenset, init=False, compare=False, hash=False, repr=False
    )
    _glob_exclude: tuple[re.Pattern[str], ...] = field(
        default=(), init=False, compare=False, hash=False, repr=False
    )

    def __post_init__(self) -> None:
        object.__setattr__(
            self, "_exact_include", frozenset(p for p in self.include if not _is_glob(p))
        )
        object.__setattr__(
            self,
            "_glob_include",
            tuple(re.compile(fnmatch.translate(p)) for p in self.include if _is_glob(p)),
        )
        object.__setattr__(
            self, "_exact_exclude", frozenset(p for p in self.exclude if not _is_glob(p))
        )
        object.__setattr__(
            self,
            "_glob_exclude",
            tuple(re.compile(fnmatch.translate(p)) for p in self.exclude if _is_glob(p)),
        )

    def allows(self, metadata: CheckMetadata) -> bool:
        """Return ``True`` if *metadata* should be validated under this config."""
        name = metadata.name
        if self.include and (
            name not in self._exact_include
            and not any(p.match(name) for p in self._glob_include)
        ):
            return False

        if name in self._exact_exclude:
            return False

        return not any(p.match(name) for p in self._glob_exclude)


_CONFIG_NAMES = (".checkmeta.toml", "pyproject.toml")


def load_config(path: Path | str | None = None) -> CheckmetaConfig:
    """Load the ``checkmeta check`` defaults.

    An explicit *path* may point at a ``.checkmeta.toml`` file or at a
    ``pyproject.toml``, in which case only ``[tool.checkmeta]`` is read. A
    missing file yields the defaults, so ``--config`` can name a file the
    project has not created yet.

    Without *path*, the nearest directory from the cwd upwards that holds
    either file decides, with ``.checkmeta.toml`` preferred. That directory is
    treated as the project root even when its ``pyproject.toml`` has no
    ``[tool.checkmeta]`` table, so declarations are never checked against a
    parent project's filters.

    Raises:
        :class:`ConfigError`: If the file is not valid TOML or holds a value
            of the wrong type.

    """
    if path is None:
        found = _discover(Path.cwd())
        return _parse_config(_read_section(found) if found is not None else {})

    resolved = Path(path)
    return _parse_config(_read_section(resolved) if resolved.exists() else {})


def _discover(start: Path) -> Path | None:
    for directory in (start, *start.parents):
        for name in _CONFIG_NAMES:
            if (candidate := directory / name).exists():
                return candidate
    return None


def _read_section(path: Path) -> dict[str, Any]:
    """Return the checkmeta table of *path*: the whole file, or ``[tool.checkmeta]``."""
    try:
        raw: dict[str, Any] = tomllib.loads(path.read_text(encoding="utf-8"))
    except tomllib.TOMLDecodeError as exc:
        raise ConfigError(f"Invalid TOML in {path}: {exc}") from exc
    if path.name != "pyproject.toml":
        return raw
    section = raw.get("tool", {})
    if isinstance(section, dict):
        section = section.get("checkmeta", {})
    if not isinstance(section, dict):
        raise ConfigError(f"[tool.checkmeta] in {path} must be a table")
    return section


def _string_list(data: dict[str, Any], key: str) -> list[str] | None:
    value = data.get(key)
    if value is None:
        return None
    if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
        raise ConfigError(f"{key!r} must be a list of strings, got {value!r}")
    return value


def _parse_config(data: dict[str, Any]) -> CheckmetaConfig:
    """Parse raw key/value dict into :class:`CheckmetaConfig`."""
    kwargs: dict[str, Any] = {}
    if (names := _string_list(data, "include")) is not None:
        kwargs["include"] = frozenset(names)
    if (names := _string_list(data, "exclude")) is not None:
        kwargs["exclude"] = frozenset(names)
    if (modules := _string_list(data, "modules")) is not None:
        kwargs["modules"] = tuple(modules)
    return CheckmetaConfig(**kwargs)
