"""Composition API (``<script setup>``) script body generator.

Each section generator takes the context and the precomputed v-model policy
and returns its fragment, or an empty string when its toggle is off. Every
non-empty fragment ends with a blank line.

Section order is fixed:
    imports
    defineOptions, defineProps, defineEmits, defineModel, defineSlots, defineExpose
    computed, watch
    lifecycle hooks (mount -> update -> activation -> unmount -> error/debug)
"""

from collections.abc import Callable
from functools import partial

from vue_generator.core.context import GenerationContext
from vue_generator.core.feature_keys import (
    COMPOSITION_HOOKS,
    FeatureKey,
    LifecycleHook,
)
from vue_generator.core.vmodel_policy import VModelPolicy

SectionGenerator = Callable[[GenerationContext, VModelPolicy], str]

_PLACEHOLDER_EMIT_TEXT = "'update:text': (value{annotation}) => typeof value === 'string',"


def _hooks_enabled(ctx: GenerationContext, hook: LifecycleHook) -> bool:
    return ctx.is_enabled(FeatureKey.LIFECYCLE_HOOKS) and ctx.is_enabled(hook.feature)


# ---------------------------------------------------------------------------
# Imports
# ---------------------------------------------------------------------------


def generate_imports(ctx: GenerationContext, policy: VModelPolicy) -> str:
    """Import every runtime symbol used by the enabled sections.

    Names follow the canonical section order, never insertion order.
    Macros (defineProps, ...) are compiler macros and are not imported.
    """
    names: list[str] = []
    if ctx.is_enabled(FeatureKey.COMPUTED):
        names.append("computed")
    if ctx.is_enabled(FeatureKey.WATCH):
        names.append("watch")
    for hook in COMPOSITION_HOOKS:
        if _hooks_enabled(ctx, hook) and hook.composition_name:
            names.append(hook.composition_name)

    return f"import {{ {', '.join(names)} }} from 'vue'\n\n"


# ---------------------------------------------------------------------------
# Macros
# ---------------------------------------------------------------------------


def generate_define_options(ctx: GenerationContext, policy: VModelPolicy) -> str:
    """defineOptions() macro (Vue 3.3+)."""
    if not ctx.is_enabled(FeatureKey.DEFINE_OPTIONS):
        return ""
    ind = ctx.indent
    return (
        "// Component options (Vue 3.3+)\n"
        "defineOptions({\n"
        f"{ind()}inheritAttrs: true,\n"
        f"{ind()}// name: 'ComponentName',\n"
        "});\n\n"
    )


def generate_props(ctx: GenerationContext, policy: VModelPolicy) -> str:
    """defineProps(), or withDefaults(defineProps<Props>()) for typed output."""
    if not ctx.is_enabled(FeatureKey.PROPS):
        return ""

    if ctx.is_typed and ctx.is_enabled(FeatureKey.USE_WITH_DEFAULTS):
        return _generate_props_with_defaults(ctx, policy)

    return "const props = defineProps({\n" + _generate_props_fields(ctx, policy) + "});\n\n"


def _generate_props_with_defaults(ctx: GenerationContext, policy: VModelPolicy) -> str:
    ind = ctx.indent
    if policy.uses_prop_emit_pair:
        interface_fields = f"{ind()}modelValue?: string;\n"
        default_fields = f"{ind()}modelValue: '',\n"
    else:
        interface_fields = f"{ind()}text?: string;\n{ind()}count?: number;\n"
        default_fields = f"{ind()}text: '',\n{ind()}count: 0,\n"

    return (
        "// Props with defaults (TypeScript)\n"
        "interface Props {\n"
        f"{interface_fields}"
        "}\n\n"
        "const props = withDefaults(defineProps<Props>(), {\n"
        f"{default_fields}"
        "});\n\n"
    )


def _generate_props_fields(ctx: GenerationContext, policy: VModelPolicy) -> str:
    ind = ctx.indent
    if not policy.uses_prop_emit_pair:
        return f"{ind()}text: String\n"

    type_line = f"{ind(2)}type: String,\n" if ctx.is_typed else ""
    return (
        f"{ind()}// v-model\n"
        f"{ind()}modelValue: {{\n"
        f"{type_line}"
        f"{ind(2)}default: '',\n"
        f"{ind()}}},\n"
    )


def generate_emits(ctx: GenerationContext, policy: VModelPolicy) -> str:
    """defineEmits() with a validated update event."""
    if not ctx.is_enabled(FeatureKey.EMITS):
        return ""
    return "const emit = defineEmits({\n" + _generate_emits_fields(ctx, policy) + "});\n\n"


def _generate_emits_fields(ctx: GenerationContext, policy: VModelPolicy) -> str:
    ind = ctx.indent
    string_annotation = ": string" if ctx.is_typed else ""

    if policy.uses_prop_emit_pair:
        return (
            f"{ind()}// v-model event with validation\n"
            f"{ind()}'update:modelValue': (value{string_annotation}) => typeof value === 'string',\n"
        )

    if policy.uses_define_model or ctx.is_enabled(FeatureKey.PROPS):
        return ind() + _PLACEHOLDER_EMIT_TEXT.format(annotation=string_annotation) + "\n"

    unknown_annotation = ": unknown" if ctx.is_typed else ""
    return f"{ind()}'update:foo': (value{unknown_annotation}) => value !== null,\n"


def generate_define_model(ctx: GenerationContext, policy: VModelPolicy) -> str:
    """defineModel() macro (Vue 3.4+); replaces the modelValue prop/emit pair."""
    if not policy.uses_define_model:
        return ""
    generic = "<string>" if ctx.is_typed else ""
    return (
        "// v-model binding (Vue 3.4+)\n"
        f"const model = defineModel{generic}({{ default: '' }});\n\n"
    )


def generate_define_slots(ctx: GenerationContext, policy: VModelPolicy) -> str:
    """defineSlots() macro (Vue 3.3+)."""
    if not ctx.is_enabled(FeatureKey.DEFINE_SLOTS):
        return ""
    if not ctx.is_typed:
        return "// Slots (Vue 3.3+)\nconst slots = defineSlots();\n\n"

    ind = ctx.indent
    return (
        "// Typed slots (Vue 3.3+)\n"
        "const slots = defineSlots<{\n"
        f"{ind()}default(props: {{ msg: string }}): any;\n"
        f"{ind()}// Add more slot definitions here\n"
        "}>();\n\n"
    )


def generate_define_expose(ctx: GenerationContext, policy: VModelPolicy) -> str:
    """defineExpose() macro."""
    if not ctx.is_enabled(FeatureKey.DEFINE_EXPOSE):
        return ""
    return (
        "// Expose to parent component via template ref\n"
        "defineExpose({\n"
        f"{ctx.indent()}// Add methods/properties to expose here\n"
        "});\n\n"
    )


# ---------------------------------------------------------------------------
# Computed / watch
# ---------------------------------------------------------------------------


def generate_computed(ctx: GenerationContext, policy: VModelPolicy) -> str:
    """v-model getter/setter computed, or a placeholder computed."""
    if not ctx.is_enabled(FeatureKey.COMPUTED):
        return ""
    if not policy.uses_prop_emit_pair:
        return "const now = computed(() => Date.now());\n\n"

    ind = ctx.indent
    annotation = ": string" if ctx.is_typed else ""
    emit_line = (
        f"{ind(2)}emit('update:modelValue', value);\n"
        if ctx.is_enabled(FeatureKey.EMITS)
        else ""
    )
    return (
        "const value = computed({\n"
        f"{ind()}get () {{\n"
        f"{ind(2)}return props.modelValue;\n"
        f"{ind()}}},\n"
        f"{ind()}set (value{annotation}) {{\n"
        f"{emit_line}"
        f"{ind()}}},\n"
        "});\n\n"
    )


def _watch_source(ctx: GenerationContext, policy: VModelPolicy) -> str:
    if policy.uses_define_model:
        return "model"
    if policy.uses_prop_emit_pair:
        return "() => props.modelValue"
    if ctx.is_enabled(FeatureKey.PROPS):
        return "() => props.text"
    return "() => new Date()"


def generate_watch(ctx: GenerationContext, policy: VModelPolicy) -> str:
    """Immediate watcher whose stop handle is kept as ``stopWatch``."""
    if not ctx.is_enabled(FeatureKey.WATCH):
        return ""

    ind = ctx.indent
    annotation = ": string | undefined" if ctx.is_typed else ""
    return (
        "const stopWatch = watch(\n"
        f"{ind()}{_watch_source(ctx, policy)}, "
        f"async (_newValue{annotation}, _oldValue{annotation}) => {{\n"
        f"{ind(2)}// do something\n"
        f"{ind()}}},\n"
        f"{ind()}{{\n"
        f"{ind(2)}immediate: true\n"
        f"{ind()}}}\n"
        ");\n\n"
    )


# ---------------------------------------------------------------------------
# Lifecycle hooks
# ---------------------------------------------------------------------------


def generate_lifecycle_hook(
    hook: LifecycleHook,
    ctx: GenerationContext,
    policy: VModelPolicy,
) -> str:
    """``onX(() => {})`` for one hook; gated by the master and per-hook toggles."""
    if hook.composition_name is None or not _hooks_enabled(ctx, hook):
        return ""

    body = ""
    if hook.feature is FeatureKey.BEFORE_UNMOUNT and policy.stops_watcher:
        body = f"{ctx.indent()}stopWatch();\n"
    return f"{hook.composition_name}(() => {{\n{body}}});\n\n"


COMPOSITION_SECTIONS: tuple[SectionGenerator, ...] = (
    generate_imports,
    generate_define_options,
    generate_props,
    generate_emits,
    generate_define_model,
    generate_define_slots,
    generate_define_expose,
    generate_computed,
    generate_watch,
    *(partial(generate_lifecycle_hook, hook) for hook in COMPOSITION_HOOKS),
)


def generate_composition_script(ctx: GenerationContext) -> str:
    """Generate the body of a ``<script setup>`` block.

    Args:
        ctx: Resolved generation context.

    Returns:
        Script text; with every toggle off, just ``import {  } from 'vue'``.

    Example:
        ctx = create_context(True, MappingConfigSource({}))
        body = generate_composition_script(ctx)
    """
    policy = VModelPolicy.for_composition(ctx)
    return "".join(section(ctx, policy) for section in COMPOSITION_SECTIONS)
