"""Tests for the vuegen CLI commands and main() exit codes."""

from __future__ import annotations

from pathlib import Path
from unittest.mock import patch

import click
import pytest

from vue_generator import __version__
from vue_generator.cli import commands
from vue_generator.cli.create_fixtures import FIXTURE_ROOT, fixture_path
from vue_generator.core.dialects import ApiType, ScriptLang
from vue_generator.helpers.config_source import CONFIG_FILE_NAME


class TestNewCommand:
    """``vuegen new NAME``."""

    def test_creates_setup_ts_component(
        self,
        isolated_cwd: Path,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        result = commands.main(["new", "my-button"])

        assert result == 0
        target = isolated_cwd / "MyButton.vue"
        content = target.read_text(encoding="utf-8")
        assert content.startswith("<script setup lang='ts'>\nimport { computed, watch")
        assert content.endswith("</script>\n\n")
        assert "Created" in capsys.readouterr().out

    def test_options_js_into_out_dir(self, isolated_cwd: Path) -> None:
        out_dir = isolated_cwd / "src" / "components"
        result = commands.main([
            "new", "card", "--api", "options", "--lang", "js", "--out", str(out_dir),
        ])

        assert result == 0
        content = (out_dir / "Card.vue").read_text(encoding="utf-8")
        assert content.startswith("<script lang='js'>\nimport { defineComponent } from 'vue'")
        assert "  name: 'Card',\n" in content
        assert ": any" not in content

    def test_stdout_does_not_write(
        self,
        isolated_cwd: Path,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        result = commands.main(["new", "card", "--stdout"])

        assert result == 0
        assert capsys.readouterr().out.startswith("<script setup lang='ts'>")
        assert not (isolated_cwd / "Card.vue").exists()

    def test_existing_file_needs_force(
        self,
        isolated_cwd: Path,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        target = isolated_cwd / "Card.vue"
        target.write_text("keep me", encoding="utf-8")

        assert commands.main(["new", "card"]) == 1
        assert target.read_text(encoding="utf-8") == "keep me"
        assert "use --force" in capsys.readouterr().out

        assert commands.main(["new", "card", "--force"]) == 0
        assert target.read_text(encoding="utf-8").startswith("<script setup")

    def test_invalid_name(
        self,
        isolated_cwd: Path,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        assert commands.main(["new", "1card"]) == 1
        assert "must start with a letter" in capsys.readouterr().out
        assert list(isolated_cwd.iterdir()) == []

    def test_settings_file_is_applied(self, isolated_cwd: Path) -> None:
        (isolated_cwd / CONFIG_FILE_NAME).write_text(
            "vue-files:\n"
            "  scriptSetup:\n"
            "    useDefineModel: false\n"
            "editor:\n"
            "  tabSize: 4\n",
            encoding="utf-8",
        )

        assert commands.main(["new", "card"]) == 0
        content = (isolated_cwd / "Card.vue").read_text(encoding="utf-8")
        assert "defineModel" not in content
        assert "\n    modelValue?: string;\n" in content

    def test_invalid_settings_value(
        self,
        isolated_cwd: Path,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        (isolated_cwd / CONFIG_FILE_NAME).write_text(
            "option:\n  showPropsScriptOption: maybe\n",
            encoding="utf-8",
        )

        assert commands.main(["new", "card"]) == 1
        assert "showPropsScriptOption" in capsys.readouterr().out
        assert not (isolated_cwd / "Card.vue").exists()

    def test_missing_explicit_config(
        self,
        isolated_cwd: Path,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        assert commands.main(["new", "card", "--config", "nope.yaml"]) == 1
        assert "not found" in capsys.readouterr().out

    def test_missing_name_is_usage_error(
        self,
        isolated_cwd: Path,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        assert commands.main(["new"]) == 2
        assert "Missing argument" in capsys.readouterr().err


class TestFixturesCommand:
    def test_writes_every_combination(
        self,
        isolated_cwd: Path,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        assert commands.main(["fixtures"]) == 0

        expected = {
            isolated_cwd / FIXTURE_ROOT / "composition-api" / "setup-ts.vue",
            isolated_cwd / FIXTURE_ROOT / "composition-api" / "setup-js.vue",
            isolated_cwd / FIXTURE_ROOT / "options-api" / "options-ts.vue",
            isolated_cwd / FIXTURE_ROOT / "options-api" / "options-js.vue",
        }
        written = {path.resolve() for path in isolated_cwd.rglob("*.vue")}
        assert written == {path.resolve() for path in expected}
        assert "Created 4 component files" in capsys.readouterr().out

    def test_fixture_contents(self, isolated_cwd: Path) -> None:
        assert commands.main(["fixtures", "--out", "out"]) == 0
        base = isolated_cwd / "out"

        options_js = fixture_path(base, ApiType.OPTIONS, ScriptLang.JS).read_text(
            encoding="utf-8"
        )
        setup_ts = fixture_path(base, ApiType.SETUP, ScriptLang.TS).read_text(
            encoding="utf-8"
        )
        assert "  name: 'TestComponent',\n" in options_js
        assert "defineModel<string>" in setup_ts


class TestSettingsCommand:
    def test_shows_defaults(
        self,
        isolated_cwd: Path,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        assert commands.main(["settings"]) == 0

        output = capsys.readouterr().out
        assert "vuegen settings (defaults)" in output
        assert "  option.showPropsScriptOption: true" in output
        assert "  editor.tabSize: 2" in output

    def test_highlights_changed_values(
        self,
        isolated_cwd: Path,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        (isolated_cwd / CONFIG_FILE_NAME).write_text(
            "option:\n  showWatchScriptOption: false\n",
            encoding="utf-8",
        )

        assert commands.main(["settings"]) == 0
        output = capsys.readouterr().out
        assert "option.showWatchScriptOption: false" in output
        assert "(default: true)" in output

    def test_init_writes_file_once(
        self,
        isolated_cwd: Path,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        target = isolated_cwd / CONFIG_FILE_NAME

        assert commands.main(["settings", "--init"]) == 0
        assert target.is_file()

        assert commands.main(["settings", "--init"]) == 1
        assert "already exists" in capsys.readouterr().out

        assert commands.main(["settings", "--init", "--force"]) == 0

    def test_init_file_reproduces_defaults(
        self,
        isolated_cwd: Path,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        assert commands.main(["new", "a-card", "--stdout"]) == 0
        without_file = capsys.readouterr().out

        assert commands.main(["settings", "--init"]) == 0
        capsys.readouterr()

        assert commands.main(["new", "a-card", "--stdout"]) == 0
        assert capsys.readouterr().out == without_file


class TestCommandsMain:
    """Top-level error and abort handling."""

    def test_version(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert commands.main(["--version"]) == 0
        assert __version__ in capsys.readouterr().out

    def test_abort_returns_130(self, capsys: pytest.CaptureFixture[str]) -> None:
        with patch.object(commands._click_cli, "main", side_effect=click.Abort()):
            result = commands.main(["new", "card"])

        assert result == 130
        assert "Cancelled by user" in capsys.readouterr().out

    def test_click_exception_is_shown(self, capsys: pytest.CaptureFixture[str]) -> None:
        exc = click.ClickException("boom")
        with patch.object(commands._click_cli, "main", side_effect=exc):
            result = commands.main(["new", "card"])

        assert result == exc.exit_code
        assert "Error: boom" in capsys.readouterr().err

    def test_argv_defaults_to_sys_argv(self) -> None:
        with patch("sys.argv", ["vuegen", "new", "card", "--stdout"]), patch.object(
            commands._click_cli, "main", return_value=0,
        ) as click_main:
            assert commands.main() == 0

        assert click_main.call_args.kwargs["args"] == ["new", "card", "--stdout"]
