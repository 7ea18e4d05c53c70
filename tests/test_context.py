"""Tests for GenerationContext resolution and immutability."""

from __future__ import annotations

import dataclasses

import pytest

from vue_generator.core.context import GenerationContext, Indentation, create_context
from vue_generator.core.feature_keys import (
    COMPOSITION_HOOKS,
    FEATURE_DEFAULTS,
    LIFECYCLE_HOOKS,
    FeatureKey,
    default_enabled_features,
)
from vue_generator.helpers.config_source import ConfigError, MappingConfigSource


class TestCreateContext:
    """create_context() resolves every toggle from a config source."""

    def test_empty_config_uses_defaults(self) -> None:
        ctx = create_context(True, MappingConfigSource())

        assert ctx.is_typed is True
        assert ctx.enabled == default_enabled_features()
        assert ctx.indent == Indentation(use_tabs=False, tab_size=2)
        assert ctx.component_name == ""

    def test_flat_keys_override_defaults(self) -> None:
        config = MappingConfigSource({
            "template.showV-ModelTemplate": False,
            "option.showSetupScriptOption": True,
        })
        ctx = create_context(False, config)

        assert not ctx.is_enabled(FeatureKey.V_MODEL_TEMPLATE)
        assert ctx.is_enabled(FeatureKey.SETUP)
        assert ctx.is_typed is False

    def test_nested_keys_under_root_section(self) -> None:
        config = MappingConfigSource({
            "vue-files": {
                "option": {"showWatchScriptOption": False},
                "scriptSetup": {"showDefineSlots": True},
            },
        })
        ctx = create_context(True, config)

        assert not ctx.is_enabled(FeatureKey.WATCH)
        assert ctx.is_enabled(FeatureKey.DEFINE_SLOTS)

    def test_component_name_is_kept(self) -> None:
        ctx = create_context(True, MappingConfigSource(), component_name="Card")
        assert ctx.component_name == "Card"

    def test_non_boolean_toggle_raises(self) -> None:
        config = MappingConfigSource({"option.showPropsScriptOption": "yes"})
        with pytest.raises(ConfigError, match="showPropsScriptOption"):
            create_context(True, config)

    def test_editor_settings(self) -> None:
        config = MappingConfigSource({
            "editor": {"insertSpaces": False, "tabSize": 4},
        })
        ctx = create_context(True, config)

        assert ctx.indent == Indentation(use_tabs=True, tab_size=4)
        assert ctx.indent(2) == "\t\t"

    @pytest.mark.parametrize("tab_size", [0, -2, 2.5, True])
    def test_invalid_tab_size_raises(self, tab_size: object) -> None:
        config = MappingConfigSource({"editor.tabSize": tab_size})
        with pytest.raises(ConfigError, match="tabSize"):
            create_context(True, config)

    def test_missing_key_in_plain_object_source(self) -> None:
        class DictSource:
            def __init__(self, values: dict[str, object]) -> None:
                self.values = values

            def get(self, key, default):
                return self.values.get(key, default)

        ctx = create_context(True, DictSource({"option.showMethodsScriptOption": False}))

        assert not ctx.is_enabled(FeatureKey.METHODS)
        assert ctx.is_enabled(FeatureKey.DATA)


class TestGenerationContext:
    """Context values never change after construction."""

    def test_is_frozen(self) -> None:
        ctx = GenerationContext(is_typed=True)
        with pytest.raises(dataclasses.FrozenInstanceError):
            ctx.is_typed = False  # type: ignore[misc]

    def test_with_features_returns_new_context(self) -> None:
        ctx = GenerationContext(is_typed=True, enabled=frozenset({FeatureKey.PROPS}))
        changed = ctx.with_features(
            enable=[FeatureKey.EMITS],
            disable=[FeatureKey.PROPS],
        )

        assert ctx.enabled == frozenset({FeatureKey.PROPS})
        assert changed.enabled == frozenset({FeatureKey.EMITS})
        assert changed.is_typed is True

    def test_toggles_cover_every_key(self) -> None:
        ctx = GenerationContext(is_typed=False, enabled=frozenset({FeatureKey.NAME}))
        toggles = ctx.toggles

        assert set(toggles) == set(FeatureKey)
        assert [key for key, on in toggles.items() if on] == [FeatureKey.NAME]

    def test_contexts_are_independent(self) -> None:
        typed = GenerationContext(is_typed=True, enabled=frozenset())
        untyped = GenerationContext(is_typed=False)

        assert typed.enabled == frozenset()
        assert untyped.enabled == default_enabled_features()


class TestIndentation:
    def test_spaces(self) -> None:
        assert Indentation(tab_size=4)(2) == " " * 8

    def test_default_level(self) -> None:
        assert Indentation()() == "  "

    def test_tabs_ignore_size(self) -> None:
        assert Indentation(use_tabs=True, tab_size=8)(3) == "\t\t\t"


class TestFeatureCatalogue:
    def test_every_key_has_a_default(self) -> None:
        assert set(FEATURE_DEFAULTS) == set(FeatureKey)

    def test_config_keys_are_unique(self) -> None:
        keys = [key.config_key for key in FeatureKey]
        assert len(keys) == len(set(keys))

    def test_hook_catalogue(self) -> None:
        assert len(LIFECYCLE_HOOKS) == 13
        assert [hook.option_name for hook in LIFECYCLE_HOOKS[:2]] == [
            "beforeCreate",
            "created",
        ]
        assert len(COMPOSITION_HOOKS) == 11
        assert all(hook.composition_name for hook in COMPOSITION_HOOKS)
