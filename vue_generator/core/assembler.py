"""Dialect selection and ``<script>`` block wrapping."""

from collections.abc import Callable
from dataclasses import replace

from vue_generator.core.composition_script import generate_composition_script
from vue_generator.core.context import GenerationContext
from vue_generator.core.dialects import ApiType, ComponentSettings
from vue_generator.core.feature_keys import FeatureKey
from vue_generator.core.options_script import generate_options_script


def _generate_options_body(ctx: GenerationContext) -> str:
    return generate_options_script(ctx.component_name, ctx)


# One entry per ApiType member
SCRIPT_GENERATORS: dict[ApiType, Callable[[GenerationContext], str]] = {
    ApiType.SETUP: generate_composition_script,
    ApiType.OPTIONS: _generate_options_body,
}


def generate_script(api_type: ApiType, ctx: GenerationContext) -> str:
    """Return the script body for ``api_type``.

    Args:
        api_type: SETUP for Composition API, OPTIONS for Options API.
        ctx: Resolved generation context.

    Returns:
        Script body without the surrounding tags.
    """
    return SCRIPT_GENERATORS[api_type](ctx)


def _generate_inherit_attrs_block(settings: ComponentSettings, ctx: GenerationContext) -> str:
    """Companion plain ``<script>`` block carrying ``inheritAttrs: false``.

    ``<script setup>`` cannot declare component options itself, so the
    option lives in a second block next to it.
    """
    if settings.api_type is not ApiType.SETUP or not ctx.is_enabled(FeatureKey.INHERIT_ATTRS):
        return ""

    ind = ctx.indent
    return (
        f"<script lang='{settings.script_lang.value}'>\n"
        f"{ind()}export default {{\n"
        f"{ind(2)}inheritAttrs: false,\n"
        f"{ind()}}};\n"
        "</script>\n\n"
    )


def render_script_block(settings: ComponentSettings, ctx: GenerationContext) -> str:
    """Wrap the generated body in its ``<script>`` tag(s).

    Example:
        <script setup lang='ts'>
        import { computed } from 'vue'
        ...
        </script>
    """
    if ctx.component_name != settings.component_name:
        ctx = replace(ctx, component_name=settings.component_name)
    setup_attr = "setup " if settings.api_type is ApiType.SETUP else ""
    body = generate_script(settings.api_type, ctx)
    return (
        f"<script {setup_attr}lang='{settings.script_lang.value}'>\n"
        f"{body}"
        "</script>\n\n"
        + _generate_inherit_attrs_block(settings, ctx)
    )
