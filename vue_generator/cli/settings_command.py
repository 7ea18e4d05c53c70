"""Show or initialise vuegen settings."""

from pathlib import Path

from vue_generator.helpers.config_source import (
    CONFIG_FILE_NAME,
    ConfigError,
    MappingConfigSource,
    YamlConfigSource,
    default_settings,
    load_config_source,
    write_default_config,
)
from vue_generator.helpers.helpers_logging import (
    Colors,
    colorize,
    print_error,
    print_header,
    print_success,
)


def _format_value(value: object) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def print_settings(config: MappingConfigSource) -> None:
    """Print every key with its effective value; changed values are highlighted."""
    source = config.path if isinstance(config, YamlConfigSource) else "defaults"
    print_header(f"vuegen settings ({source})")
    for key, default in default_settings().items():
        value = config.get(key, default)
        if value == default:
            print(f"  {key}: {_format_value(value)}")
        else:
            changed = colorize(f"{key}: {_format_value(value)}", Colors.GREEN)
            hint = colorize(f"(default: {_format_value(default)})", Colors.DIM)
            print(f"  {changed} {hint}")


def init_settings(target_dir: Path, force: bool = False) -> int:
    """Write a settings file with every default into ``target_dir``."""
    target = target_dir / CONFIG_FILE_NAME
    if target.exists() and not force:
        print_error(f"File already exists: {target} (use --force to overwrite)")
        return 1
    write_default_config(target)
    print_success(f"Created {target}")
    return 0


def show_settings(config_path: Path | None = None) -> int:
    """Handle ``vuegen settings``.

    Returns:
        Exit code (0 on success, 1 on error).
    """
    try:
        config = load_config_source(config_path)
        print_settings(config)
    except (ConfigError, FileNotFoundError) as exc:
        print_error(str(exc))
        return 1
    return 0
