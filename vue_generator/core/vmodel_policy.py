"""Cross-section v-model decisions.

The v-model template toggle changes props, emits, computed, watch, the
defineModel macro and the beforeUnmount teardown together. The decisions are
made once here and handed to the generators, so the Composition and Options
dialects cannot disagree about them.
"""

from dataclasses import dataclass

from vue_generator.core.context import GenerationContext
from vue_generator.core.feature_keys import FeatureKey


@dataclass(frozen=True)
class VModelPolicy:
    """Named predicates derived from a GenerationContext.

    Attributes:
        uses_define_model: defineModel() carries the v-model channel.
        uses_prop_emit_pair: A modelValue prop / update:modelValue emit pair
            carries the v-model channel.
        stops_watcher: beforeUnmount must tear down the watcher.
    """

    uses_define_model: bool
    uses_prop_emit_pair: bool
    stops_watcher: bool

    @classmethod
    def for_composition(cls, ctx: GenerationContext) -> "VModelPolicy":
        template_enabled = ctx.is_enabled(FeatureKey.V_MODEL_TEMPLATE)
        uses_define_model = template_enabled and ctx.is_enabled(
            FeatureKey.USE_DEFINE_MODEL
        )
        return cls(
            uses_define_model=uses_define_model,
            uses_prop_emit_pair=template_enabled and not uses_define_model,
            stops_watcher=ctx.is_enabled(FeatureKey.WATCH),
        )

    @classmethod
    def for_options(cls, ctx: GenerationContext) -> "VModelPolicy":
        # Options API has no defineModel; the watch field only watches modelValue.
        template_enabled = ctx.is_enabled(FeatureKey.V_MODEL_TEMPLATE)
        return cls(
            uses_define_model=False,
            uses_prop_emit_pair=template_enabled,
            stops_watcher=template_enabled and ctx.is_enabled(FeatureKey.WATCH),
        )


def is_vmodel_active_without_define_model(ctx: GenerationContext) -> bool:
    """True when a Composition script wires v-model through props/emits."""
    return VModelPolicy.for_composition(ctx).uses_prop_emit_pair
