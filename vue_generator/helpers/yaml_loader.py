"""
YAML loader for vuegen settings files.
Provides a shared ruamel.yaml instance that keeps comments on round-trips.
"""

from pathlib import Path
from typing import Union, cast

from ruamel.yaml import YAML

# Recursive type for nested YAML structures
ConfigValue = Union[str, int, float, bool, None, 'ConfigDict', list['ConfigValue']]
ConfigDict = dict[str, ConfigValue]


def _create_yaml_loader() -> YAML:
    """Create the round-trip YAML instance.

    Returns:
        YAML loader with comment preservation
    """
    yaml_obj = YAML()
    yaml_obj.preserve_quotes = True
    yaml_obj.default_flow_style = False
    return yaml_obj


yaml: YAML = _create_yaml_loader()


def load_yaml_file(file_path: Path) -> ConfigDict:
    """Load YAML file with type safety.

    ruamel.yaml's load() is safe by default (unlike PyYAML's load()).

    Args:
        file_path: Path to YAML file to load

    Returns:
        Mapping loaded from YAML; an empty file yields an empty dict

    Raises:
        FileNotFoundError: If file does not exist
    """
    if not file_path.exists():
        raise FileNotFoundError(f"YAML file not found: {file_path}")

    with file_path.open(encoding='utf-8') as f:
        raw: ConfigValue = yaml.load(f)
        if raw is None:
            return {}
        return cast(ConfigDict, raw)


def save_yaml_file(data: ConfigDict, file_path: Path) -> None:
    """Save data to YAML file with comment preservation.

    Args:
        data: Configuration dictionary to save
        file_path: Path to YAML file to write
    """
    file_path.parent.mkdir(parents=True, exist_ok=True)

    with file_path.open('w', encoding='utf-8') as f:
        yaml.dump(data, f)
