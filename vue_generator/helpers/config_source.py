"""Settings sources for script generation.

Settings live in a ``vuegen.yaml`` file. Keys can be written flat or nested,
and may sit under a top-level ``vue-files`` section:

    vue-files:
      template:
        showV-ModelTemplate: true
      scriptSetup.useDefineModel: false
    editor:
      insertSpaces: false

Both sources below answer ``get(key, default)`` with dotted keys and check
that a configured value has the same type as its default.
"""

from collections.abc import Mapping
from pathlib import Path
from typing import TypeVar, cast

from vue_generator.core.feature_keys import FEATURE_DEFAULTS, FeatureKey
from vue_generator.helpers.helpers_logging import print_warning
from vue_generator.helpers.yaml_loader import ConfigDict, load_yaml_file, save_yaml_file

_T = TypeVar("_T")

CONFIG_FILE_NAME = "vuegen.yaml"
ROOT_SECTION = "vue-files"

INSERT_SPACES_KEY = "editor.insertSpaces"
TAB_SIZE_KEY = "editor.tabSize"
DEFAULT_TAB_SIZE = 2

EDITOR_DEFAULTS: dict[str, object] = {
    INSERT_SPACES_KEY: True,
    TAB_SIZE_KEY: DEFAULT_TAB_SIZE,
}

# Namespaces whose keys are all known; anything else in them is a typo
_CHECKED_NAMESPACES = ("template", "option", "lifecycle", "scriptSetup", "editor")


class ConfigError(Exception):
    """Raised when a settings value cannot be used."""


def known_keys() -> set[str]:
    """Return every settings key vuegen reads."""
    return {key.config_key for key in FeatureKey} | set(EDITOR_DEFAULTS)


def flatten_settings(data: Mapping[str, object], prefix: str = "") -> dict[str, object]:
    """Flatten nested mappings into dotted keys.

    Example:
        {"option": {"showPropsScriptOption": False}}
            → {"option.showPropsScriptOption": False}
    """
    flat: dict[str, object] = {}
    for raw_key, value in data.items():
        key = f"{prefix}{raw_key}"
        if isinstance(value, Mapping):
            flat.update(flatten_settings(cast(Mapping[str, object], value), f"{key}."))
        else:
            flat[key] = value
    return flat


def _flatten_with_root_section(data: Mapping[str, object]) -> dict[str, object]:
    """Flatten the top level and the optional ``vue-files`` section.

    Both are flattened before merging, so a namespace present at both levels
    keeps its keys from each; the section wins for the same dotted key.
    """
    top = {key: value for key, value in data.items() if key != ROOT_SECTION}
    section = data.get(ROOT_SECTION)
    if section is None:
        return flatten_settings(top)
    if not isinstance(section, Mapping):
        raise ConfigError(f"'{ROOT_SECTION}' must be a mapping")
    return flatten_settings(top) | flatten_settings(cast(Mapping[str, object], section))


def _type_name(value: object) -> str:
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, int):
        return "integer"
    return type(value).__name__


def _check_type(key: str, value: object, default: object) -> None:
    if default is None or value is None:
        return
    # bool is an int subclass, compare the exact kinds
    if isinstance(default, bool) != isinstance(value, bool) or not isinstance(
        value, type(default)
    ):
        raise ConfigError(
            f"'{key}' must be a {_type_name(default)}, got {value!r}"
        )


class MappingConfigSource:
    """ConfigSource backed by an in-memory mapping (flat or nested)."""

    def __init__(self, data: Mapping[str, object] | None = None) -> None:
        self._values = _flatten_with_root_section(data or {})

    def get(self, key: str, default: _T) -> _T:
        """Return the value for ``key`` or ``default`` when it is not set.

        Raises:
            ConfigError: If the configured value's type differs from the default's.
        """
        if key not in self._values:
            return default
        value = self._values[key]
        if value is None:
            return default
        _check_type(key, value, default)
        return cast(_T, value)

    def unknown_keys(self) -> list[str]:
        """Configured keys in vuegen namespaces that vuegen does not read."""
        known = known_keys()
        return sorted(
            key
            for key, value in self._values.items()
            if value is not None
            and key.split(".", 1)[0] in _CHECKED_NAMESPACES and key not in known
        )


class YamlConfigSource(MappingConfigSource):
    """ConfigSource backed by a ``vuegen.yaml`` file."""

    def __init__(self, path: Path) -> None:
        raw = load_yaml_file(path)
        if not isinstance(raw, Mapping):
            raise ConfigError(f"{path} must contain a mapping at the top level")
        super().__init__(raw)
        self.path = path
        for key in self.unknown_keys():
            print_warning(f"Unknown setting '{key}' in {path.name} (ignored)")


def find_config_file(start: Path | None = None) -> Path | None:
    """Search upwards from ``start`` (default: cwd) for ``vuegen.yaml``."""
    current = start or Path.cwd()
    for parent in [current, *current.parents]:
        candidate = parent / CONFIG_FILE_NAME
        if candidate.is_file():
            return candidate
    return None


def load_config_source(path: Path | None = None) -> MappingConfigSource:
    """Load settings from ``path``, the nearest ``vuegen.yaml``, or defaults.

    Raises:
        FileNotFoundError: If an explicit ``path`` does not exist.
        ConfigError: If the file is not a mapping.
    """
    if path is not None:
        return YamlConfigSource(path)
    found = find_config_file()
    if found is None:
        return MappingConfigSource()
    return YamlConfigSource(found)


def default_settings() -> dict[str, object]:
    """Every known key mapped to its default, flat and ordered by namespace."""
    settings: dict[str, object] = {
        key.config_key: FEATURE_DEFAULTS[key] for key in FeatureKey
    }
    settings.update(EDITOR_DEFAULTS)
    return settings


def _nest(flat: Mapping[str, object]) -> ConfigDict:
    """Nest dotted keys one level deep by namespace."""
    nested: dict[str, dict[str, object]] = {}
    for key, value in flat.items():
        namespace, _, name = key.partition(".")
        nested.setdefault(namespace, {})[name] = value
    return cast(ConfigDict, nested)


def write_default_config(path: Path) -> None:
    """Write a settings file holding every default."""
    save_yaml_file(_nest(default_settings()), path)
