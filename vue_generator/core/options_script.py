"""Options API (``defineComponent({...})``) script body generator.

Fields inside the object literal appear in a fixed order:
    name, components, directives, extends, mixins, provide/inject,
    inheritAttrs, props, emits, setup, data, computed, watch,
    lifecycle hooks (same canonical order as <script setup>), methods
"""

from collections.abc import Callable
from dataclasses import replace
from functools import partial

from vue_generator.core.context import GenerationContext
from vue_generator.core.feature_keys import LIFECYCLE_HOOKS, FeatureKey, LifecycleHook
from vue_generator.core.vmodel_policy import VModelPolicy

FieldGenerator = Callable[[GenerationContext, VModelPolicy], str]

IMPORT_STATEMENT = "import { defineComponent } from 'vue'\n\n"


def _empty_object_field(ctx: GenerationContext, name: str) -> str:
    ind = ctx.indent
    return f"{ind()}{name}: {{\n{ind()}}},\n"


def _object_field(ctx: GenerationContext, name: str, body: str) -> str:
    ind = ctx.indent
    return f"{ind()}{name}: {{\n{body}{ind()}}},\n"


# ---------------------------------------------------------------------------
# Component options
# ---------------------------------------------------------------------------


def generate_name(ctx: GenerationContext, policy: VModelPolicy) -> str:
    if not ctx.is_enabled(FeatureKey.NAME):
        return ""
    return f"{ctx.indent()}name: '{ctx.component_name}',\n"


def generate_components(ctx: GenerationContext, policy: VModelPolicy) -> str:
    if not ctx.is_enabled(FeatureKey.COMPONENTS):
        return ""
    return _empty_object_field(ctx, "components")


def generate_directives(ctx: GenerationContext, policy: VModelPolicy) -> str:
    if not ctx.is_enabled(FeatureKey.DIRECTIVES):
        return ""
    return _empty_object_field(ctx, "directives")


def generate_extends(ctx: GenerationContext, policy: VModelPolicy) -> str:
    if not ctx.is_enabled(FeatureKey.EXTENDS):
        return ""
    return _empty_object_field(ctx, "extends")


def generate_mixins(ctx: GenerationContext, policy: VModelPolicy) -> str:
    if not ctx.is_enabled(FeatureKey.MIXINS):
        return ""
    ind = ctx.indent
    return f"{ind()}mixins: [\n{ind()}],\n"


def generate_provide_inject(ctx: GenerationContext, policy: VModelPolicy) -> str:
    if not ctx.is_enabled(FeatureKey.PROVIDE_INJECT):
        return ""
    return _empty_object_field(ctx, "provide") + _empty_object_field(ctx, "inject")


def generate_inherit_attrs(ctx: GenerationContext, policy: VModelPolicy) -> str:
    if not ctx.is_enabled(FeatureKey.INHERIT_ATTRS):
        return ""
    return f"{ctx.indent()}inheritAttrs: false,\n"


# ---------------------------------------------------------------------------
# v-model aware fields
# ---------------------------------------------------------------------------


def generate_props(ctx: GenerationContext, policy: VModelPolicy) -> str:
    """props field; holds the modelValue prop when v-model is on."""
    if not ctx.is_enabled(FeatureKey.PROPS):
        return ""

    body = ""
    if policy.uses_prop_emit_pair:
        ind = ctx.indent
        type_line = f"{ind(3)}type: String,\n" if ctx.is_typed else ""
        body = (
            f"{ind(2)}// v-model\n"
            f"{ind(2)}modelValue: {{\n"
            f"{type_line}"
            f"{ind(3)}default: '',\n"
            f"{ind(2)}}},\n"
        )
    return _object_field(ctx, "props", body)


def generate_emits(ctx: GenerationContext, policy: VModelPolicy) -> str:
    """emits field; holds the validated update:modelValue event when v-model is on."""
    if not ctx.is_enabled(FeatureKey.EMITS):
        return ""

    body = ""
    if policy.uses_prop_emit_pair:
        ind = ctx.indent
        annotation = ": any" if ctx.is_typed else ""
        body = (
            f"{ind(2)}// v-model event with validation\n"
            f"{ind(2)}'update:modelValue': (value{annotation}) => value !== null,\n"
        )
    return _object_field(ctx, "emits", body)


def generate_setup(ctx: GenerationContext, policy: VModelPolicy) -> str:
    if not ctx.is_enabled(FeatureKey.SETUP):
        return ""
    ind = ctx.indent
    return f"{ind()}setup() {{\n{ind()}}},\n"


def generate_data(ctx: GenerationContext, policy: VModelPolicy) -> str:
    if not ctx.is_enabled(FeatureKey.DATA):
        return ""
    ind = ctx.indent
    return (
        f"{ind()}data() {{\n"
        f"{ind(2)}return {{\n"
        f"{ind(2)}}};\n"
        f"{ind()}}},\n"
    )


def generate_computed(ctx: GenerationContext, policy: VModelPolicy) -> str:
    """computed field; a ``value`` getter/setter over modelValue when v-model is on."""
    if not ctx.is_enabled(FeatureKey.COMPUTED):
        return ""

    body = ""
    if policy.uses_prop_emit_pair:
        ind = ctx.indent
        annotation = ": any" if ctx.is_typed else ""
        emit_line = (
            f"{ind(4)}this.$emit('update:modelValue', value);\n"
            if ctx.is_enabled(FeatureKey.EMITS)
            else ""
        )
        body = (
            f"{ind(2)}value: {{\n"
            f"{ind(3)}get () {{\n"
            f"{ind(4)}return this.modelValue;\n"
            f"{ind(3)}}},\n"
            f"{ind(3)}set (value{annotation}) {{\n"
            f"{emit_line}"
            f"{ind(3)}}},\n"
            f"{ind(2)}}},\n"
        )
    return _object_field(ctx, "computed", body)


def generate_watch(ctx: GenerationContext, policy: VModelPolicy) -> str:
    """watch field; an immediate modelValue handler when v-model is on."""
    if not ctx.is_enabled(FeatureKey.WATCH):
        return ""

    body = ""
    if policy.uses_prop_emit_pair:
        ind = ctx.indent
        annotation = ": any" if ctx.is_typed else ""
        body = (
            f"{ind(2)}modelValue: {{\n"
            f"{ind(3)}async handler (_newValue{annotation}, _oldValue{annotation}) {{\n"
            f"{ind(4)}// do something\n"
            f"{ind(3)}}},\n"
            f"{ind(3)}immediate: true\n"
            f"{ind(2)}}},\n"
        )
    return _object_field(ctx, "watch", body)


# ---------------------------------------------------------------------------
# Lifecycle hooks / methods
# ---------------------------------------------------------------------------


def generate_lifecycle_hook(
    hook: LifecycleHook,
    ctx: GenerationContext,
    policy: VModelPolicy,
) -> str:
    """``hook() {}`` method; gated by the master and per-hook toggles."""
    if not (
        ctx.is_enabled(FeatureKey.LIFECYCLE_HOOKS) and ctx.is_enabled(hook.feature)
    ):
        return ""

    ind = ctx.indent
    body = ""
    if hook.feature is FeatureKey.BEFORE_UNMOUNT and policy.stops_watcher:
        body = (
            f"{ind(2)}// stop the watcher on modelValue\n"
            f"{ind(2)}this.$watch('modelValue', () => {{}}, {{}});\n"
        )
    return f"{ind()}{hook.option_name}() {{\n{body}{ind()}}},\n"


def generate_methods(ctx: GenerationContext, policy: VModelPolicy) -> str:
    if not ctx.is_enabled(FeatureKey.METHODS):
        return ""
    return _empty_object_field(ctx, "methods")


OPTIONS_FIELDS: tuple[FieldGenerator, ...] = (
    generate_name,
    generate_components,
    generate_directives,
    generate_extends,
    generate_mixins,
    generate_provide_inject,
    generate_inherit_attrs,
    generate_props,
    generate_emits,
    generate_setup,
    generate_data,
    generate_computed,
    generate_watch,
    *(partial(generate_lifecycle_hook, hook) for hook in LIFECYCLE_HOOKS),
    generate_methods,
)


def generate_options_script(component_name: str, ctx: GenerationContext) -> str:
    """Generate an Options API script body wrapped in defineComponent().

    Args:
        component_name: Value of the ``name`` field.
        ctx: Resolved generation context.

    Returns:
        Script text starting with the defineComponent import.
    """
    if component_name != ctx.component_name:
        ctx = replace(ctx, component_name=component_name)
    policy = VModelPolicy.for_options(ctx)
    fields = "".join(field(ctx, policy) for field in OPTIONS_FIELDS)
    return f"{IMPORT_STATEMENT}export default defineComponent({{\n{fields}}});\n"
