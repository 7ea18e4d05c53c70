"""
Vue Script Generator

Generates the script block of Vue single-file components from a set of
feature toggles, for both the Composition API (<script setup>) and the
Options API (defineComponent).
"""

__version__ = "0.1.0"

from vue_generator.core.assembler import generate_script, render_script_block
from vue_generator.core.composition_script import generate_composition_script
from vue_generator.core.context import GenerationContext, Indentation, create_context
from vue_generator.core.dialects import ApiType, ComponentSettings, ScriptLang
from vue_generator.core.feature_keys import FEATURE_DEFAULTS, FeatureKey
from vue_generator.core.options_script import generate_options_script

__all__ = [
    "generate_composition_script",
    "generate_options_script",
    "generate_script",
    "render_script_block",
    "create_context",
    "GenerationContext",
    "Indentation",
    "FeatureKey",
    "FEATURE_DEFAULTS",
    "ApiType",
    "ScriptLang",
    "ComponentSettings",
]
