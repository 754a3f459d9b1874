"""
Generation configuration.

Values are resolved with the precedence: explicit overrides, then environment
variables, then the ``generation`` section of the project config file, then
built-in defaults.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any, Dict, FrozenSet, Mapping, Optional

from fakeframe.python_libs.common.constants import (
    DEFAULT_CHUNK_SIZE,
    DEFAULT_NUM_THREADS,
    DEFAULT_ROW_COUNT,
    TypeFamily,
)
from fakeframe.python_libs.common.exceptions import ConfigurationError, ErrorContext

logger = logging.getLogger(__name__)

ENV_NUM_ROWS = "FAKER_NUM_ROWS"
ENV_NUM_THREADS = "FAKER_NUM_THREADS"
# Read for num_threads when FAKER_NUM_THREADS is unset
ENV_RAYON_NUM_THREADS = "RAYON_NUM_THREADS"
ENV_CHUNK_SIZE = "FAKER_CHUNK_SIZE"
ENV_SEED = "FAKER_SEED"
ENV_DISABLED_FAMILIES = "FAKER_DISABLED_FAMILIES"

PROJECT_SECTION = "generation"

# Environment variables per setting, first set one wins
_ENV_KEYS = {
    "row_count": (ENV_NUM_ROWS,),
    "num_threads": (ENV_NUM_THREADS, ENV_RAYON_NUM_THREADS),
    "chunk_size": (ENV_CHUNK_SIZE,),
    "seed": (ENV_SEED,),
    "disabled_families": (ENV_DISABLED_FAMILIES,),
}


def _parse_int(key: str, value: Any, minimum: int) -> int:
    if isinstance(value, bool):
        raise ConfigurationError(
            f"'{key}' must be an integer, got {value!r}", ErrorContext(argument=key)
        )
    if isinstance(value, str):
        try:
            value = int(value.strip())
        except ValueError:
            raise ConfigurationError(
                f"'{key}' must be an integer, got {value!r}", ErrorContext(argument=key)
            ) from None
    if not isinstance(value, int):
        raise ConfigurationError(
            f"'{key}' must be an integer, got {value!r}", ErrorContext(argument=key)
        )
    if value < minimum:
        raise ConfigurationError(
            f"'{key}' must be at least {minimum}, got {value}", ErrorContext(argument=key)
        )
    return value


def _parse_families(value: Any) -> FrozenSet[TypeFamily]:
    if isinstance(value, str):
        names = [name.strip() for name in value.split(",") if name.strip()]
    elif isinstance(value, (list, tuple, set, frozenset)):
        names = list(value)
    else:
        raise ConfigurationError(
            f"'disabled_families' must be a list of family names, got {value!r}",
            ErrorContext(argument="disabled_families"),
        )

    families = set()
    for name in names:
        try:
            families.add(TypeFamily(name))
        except ValueError:
            raise ConfigurationError(
                f"Unknown type family '{name}'. Valid families: "
                f"{', '.join(family.value for family in TypeFamily)}",
                ErrorContext(argument="disabled_families"),
            ) from None
    if TypeFamily.CORE in families:
        raise ConfigurationError(
            "The 'core' type family cannot be disabled",
            ErrorContext(argument="disabled_families"),
        )
    return frozenset(families)


@dataclass(frozen=True)
class GenerationConfig:
    """Settings for one generation run."""

    row_count: int = DEFAULT_ROW_COUNT
    num_threads: int = DEFAULT_NUM_THREADS
    chunk_size: int = DEFAULT_CHUNK_SIZE
    seed: Optional[int] = None
    disabled_families: FrozenSet[TypeFamily] = field(default_factory=frozenset)

    def __post_init__(self):
        object.__setattr__(self, "row_count", _parse_int("row_count", self.row_count, 0))
        object.__setattr__(self, "num_threads", _parse_int("num_threads", self.num_threads, 1))
        object.__setattr__(self, "chunk_size", _parse_int("chunk_size", self.chunk_size, 1))
        if self.seed is not None:
            object.__setattr__(self, "seed", _parse_int("seed", self.seed, 0))
        object.__setattr__(
            self, "disabled_families", _parse_families(self.disabled_families)
        )

    @property
    def enabled_families(self) -> FrozenSet[TypeFamily]:
        return frozenset(TypeFamily) - self.disabled_families

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "GenerationConfig":
        """Create a config from a mapping, ignoring ``None`` values."""
        known = {f.name for f in fields(cls)}
        unknown = set(data) - known
        if unknown:
            raise ConfigurationError(
                f"Unknown generation settings: {', '.join(sorted(unknown))}",
                ErrorContext(additional_info={"unknown": sorted(unknown)}),
            )
        return cls(**{key: value for key, value in data.items() if value is not None})

    def to_dict(self) -> Dict[str, Any]:
        return {
            "row_count": self.row_count,
            "num_threads": self.num_threads,
            "chunk_size": self.chunk_size,
            "seed": self.seed,
            "disabled_families": sorted(family.value for family in self.disabled_families),
        }

    @classmethod
    def resolve(
        cls,
        overrides: Optional[Mapping[str, Any]] = None,
        environ: Optional[Mapping[str, str]] = None,
        config_dir: Optional[Path] = None,
    ) -> "GenerationConfig":
        """
        Build a config from every configuration source.

        Args:
            overrides: explicit values, e.g. from CLI options; ``None`` values are skipped
            environ: environment mapping, defaults to ``os.environ``
            config_dir: directory or file holding the project config

        Raises:
            ConfigurationError: a value from any source is invalid
        """
        from fakeframe.project_config import load_project_config

        environ = os.environ if environ is None else environ
        settings: Dict[str, Any] = {}

        project_section = load_project_config(config_dir).get(PROJECT_SECTION) or {}
        if not isinstance(project_section, Mapping):
            raise ConfigurationError(f"Project config '{PROJECT_SECTION}' section must be a mapping")
        settings.update(project_section)

        for key, env_vars in _ENV_KEYS.items():
            for env_var in env_vars:
                value = environ.get(env_var)
                if value not in (None, ""):
                    logger.debug(f"Using {env_var} for {key}")
                    settings[key] = value
                    break

        for key, value in (overrides or {}).items():
            if value is not None:
                settings[key] = value

        return cls.from_dict(settings)
