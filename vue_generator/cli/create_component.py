"""Create a single Vue component file from the current settings."""

from pathlib import Path

from vue_generator.core.assembler import render_script_block
from vue_generator.core.context import create_context
from vue_generator.core.dialects import ApiType, ComponentSettings, ScriptLang
from vue_generator.helpers.component_names import (
    InvalidComponentNameError,
    normalize_component_name,
)
from vue_generator.helpers.config_source import ConfigError, load_config_source
from vue_generator.helpers.helpers_logging import print_error, print_info, print_success


def build_component_content(
    settings: ComponentSettings,
    config_path: Path | None = None,
) -> str:
    """Resolve settings and return the file content for one component.

    Raises:
        ConfigError: If the settings file holds unusable values.
        FileNotFoundError: If ``config_path`` does not exist.
    """
    config = load_config_source(config_path)
    ctx = create_context(
        settings.script_lang.is_typed,
        config,
        component_name=settings.component_name,
    )
    return render_script_block(settings, ctx)


def write_component_file(target: Path, content: str, force: bool = False) -> bool:
    """Write ``content`` to ``target`` unless it exists and ``force`` is off.

    Returns:
        True if the file was written.
    """
    if target.exists() and not force:
        return False
    target.parent.mkdir(parents=True, exist_ok=True)
    target.write_text(content, encoding="utf-8")
    return True


def create_component(
    name: str,
    api_type: ApiType,
    script_lang: ScriptLang,
    out_dir: Path,
    config_path: Path | None = None,
    to_stdout: bool = False,
    force: bool = False,
) -> int:
    """Handle ``vuegen new``.

    Returns:
        Exit code (0 on success, 1 on error).
    """
    try:
        component_name = normalize_component_name(name)
        settings = ComponentSettings(component_name, api_type, script_lang)
        content = build_component_content(settings, config_path)
    except (InvalidComponentNameError, ConfigError, FileNotFoundError) as exc:
        print_error(str(exc))
        return 1

    if to_stdout:
        print(content, end="")
        return 0

    target = out_dir / settings.file_name
    if not write_component_file(target, content, force=force):
        print_error(f"File already exists: {target} (use --force to overwrite)")
        return 1

    print_success(f"Created {target}")
    print_info(f"  {api_type.value} API, lang={script_lang.value}")
    return 0
