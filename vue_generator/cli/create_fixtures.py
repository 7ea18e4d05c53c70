"""Write one component per API type x script language for manual review.

Generated structure:
    test-output/
    └── components/
        ├── composition-api/
        │   ├── setup-ts.vue
        │   └── setup-js.vue
        └── options-api/
            ├── options-ts.vue
            └── options-js.vue
"""

from itertools import product
from pathlib import Path

from vue_generator.core.assembler import render_script_block
from vue_generator.core.context import create_context
from vue_generator.core.dialects import ApiType, ComponentSettings, ScriptLang
from vue_generator.helpers.config_source import (
    ConfigError,
    MappingConfigSource,
    load_config_source,
)
from vue_generator.helpers.helpers_logging import (
    print_dim,
    print_error,
    print_header,
    print_success,
)

FIXTURE_COMPONENT_NAME = "TestComponent"
FIXTURE_ROOT = Path("test-output") / "components"


def fixture_path(base_dir: Path, api_type: ApiType, script_lang: ScriptLang) -> Path:
    """Path of the fixture file for one combination."""
    file_name = f"{api_type.value}-{script_lang.value}.vue"
    return base_dir / FIXTURE_ROOT / api_type.folder_name / file_name


def generate_fixture_files(
    base_dir: Path,
    config: MappingConfigSource,
) -> list[Path]:
    """Write every combination and return the created paths.

    Each combination gets its own context, resolved from ``config``.
    """
    created: list[Path] = []
    for api_type, script_lang in product(ApiType, ScriptLang):
        settings = ComponentSettings(FIXTURE_COMPONENT_NAME, api_type, script_lang)
        ctx = create_context(
            script_lang.is_typed,
            config,
            component_name=FIXTURE_COMPONENT_NAME,
        )
        target = fixture_path(base_dir, api_type, script_lang)
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(render_script_block(settings, ctx), encoding="utf-8")
        created.append(target)
    return created


def create_fixtures(out_dir: Path, config_path: Path | None = None) -> int:
    """Handle ``vuegen fixtures``.

    Returns:
        Exit code (0 on success, 1 on error).
    """
    try:
        config = load_config_source(config_path)
        created = generate_fixture_files(out_dir, config)
    except (ConfigError, FileNotFoundError) as exc:
        print_error(str(exc))
        return 1

    print_header(f"Fixture files in {out_dir / FIXTURE_ROOT}")
    for path in created:
        print_dim(f"   {path}")
    print_success(f"Created {len(created)} component files")
    return 0
