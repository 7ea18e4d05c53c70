"""Generation context passed to every section generator.

A context is built once per file-creation request and never mutated. Every
generator receives it as an explicit parameter; there is no module-level
state, so contexts for different files can be used side by side.
"""

from dataclasses import dataclass, field, replace
from typing import Protocol, TypeVar

from vue_generator.core.feature_keys import (
    FEATURE_DEFAULTS,
    FeatureKey,
    default_enabled_features,
)
from vue_generator.helpers.config_source import (
    DEFAULT_TAB_SIZE,
    INSERT_SPACES_KEY,
    TAB_SIZE_KEY,
    ConfigError,
)

_T = TypeVar("_T")


class ConfigSource(Protocol):
    """Key lookup with typed defaults (settings file, mapping, ...)."""

    def get(self, key: str, default: _T) -> _T:
        """Return the configured value for ``key`` or ``default``."""
        ...


@dataclass(frozen=True)
class Indentation:
    """Indentation unit from editor settings.

    Calling the instance returns the unit repeated ``level`` times.
    """

    use_tabs: bool = False
    tab_size: int = DEFAULT_TAB_SIZE

    def __call__(self, level: int = 1) -> str:
        if self.use_tabs:
            return "\t" * level
        return " " * (self.tab_size * level)


@dataclass(frozen=True)
class GenerationContext:
    """Immutable snapshot of everything a generator may read.

    Attributes:
        is_typed: Emit TypeScript annotations and generics.
        enabled: Toggles that are switched on; anything absent is off.
        indent: Indentation function.
        component_name: Used by the Options API ``name`` field only.
    """

    is_typed: bool
    enabled: frozenset[FeatureKey] = field(default_factory=default_enabled_features)
    indent: Indentation = field(default_factory=Indentation)
    component_name: str = ""

    def is_enabled(self, key: FeatureKey) -> bool:
        return key in self.enabled

    @property
    def toggles(self) -> dict[FeatureKey, bool]:
        """Every toggle mapped to its state."""
        return {key: key in self.enabled for key in FeatureKey}

    def with_features(
        self,
        enable: tuple[FeatureKey, ...] | list[FeatureKey] = (),
        disable: tuple[FeatureKey, ...] | list[FeatureKey] = (),
    ) -> "GenerationContext":
        """Return a copy with the given toggles switched on/off."""
        enabled = (self.enabled | frozenset(enable)) - frozenset(disable)
        return replace(self, enabled=enabled)


def _resolve_bool(config: ConfigSource, key: str, default: bool) -> bool:
    value = config.get(key, default)
    if not isinstance(value, bool):
        raise ConfigError(f"'{key}' must be true or false, got {value!r}")
    return value


def _resolve_indentation(config: ConfigSource) -> Indentation:
    insert_spaces = _resolve_bool(config, INSERT_SPACES_KEY, True)
    tab_size = config.get(TAB_SIZE_KEY, DEFAULT_TAB_SIZE)
    # bool is an int subclass; reject it explicitly
    if isinstance(tab_size, bool) or not isinstance(tab_size, int) or tab_size < 1:
        raise ConfigError(
            f"'{TAB_SIZE_KEY}' must be a positive integer, got {tab_size!r}"
        )
    return Indentation(use_tabs=not insert_spaces, tab_size=tab_size)


def create_context(
    is_typed: bool,
    config: ConfigSource,
    component_name: str = "",
) -> GenerationContext:
    """Resolve every toggle from ``config`` into a GenerationContext.

    Args:
        is_typed: Generate TypeScript instead of JavaScript.
        config: Settings lookup; missing keys fall back to FEATURE_DEFAULTS.
        component_name: Name for the Options API ``name`` field.

    Returns:
        Fully resolved context.

    Raises:
        ConfigError: If a toggle is not a boolean or the tab size is invalid.
    """
    enabled = frozenset(
        key
        for key, default in FEATURE_DEFAULTS.items()
        if _resolve_bool(config, key.config_key, default)
    )
    return GenerationContext(
        is_typed=is_typed,
        enabled=enabled,
        indent=_resolve_indentation(config),
        component_name=component_name,
    )
