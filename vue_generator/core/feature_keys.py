"""Feature toggles for script generation.

Every toggle the generators understand is a member of ``FeatureKey``. The
member value is the dotted settings key it is read from, and
``FEATURE_DEFAULTS`` holds the documented default used when the settings
file does not mention it.

Example vuegen.yaml:
    template:
      showV-ModelTemplate: false
    option:
      showWatchScriptOption: false
    lifecycle.showMountedScriptOption: true
"""

from dataclasses import dataclass
from enum import Enum

# ---------------------------------------------------------------------------
# Toggles
# ---------------------------------------------------------------------------


class FeatureKey(Enum):
    """Closed set of generation toggles, valued by their settings key."""

    # Template
    V_MODEL_TEMPLATE = "template.showV-ModelTemplate"

    # Options API fields (props/emits/computed/watch are shared with setup)
    NAME = "option.showNameScriptOption"
    COMPONENTS = "option.showComponentsScriptOption"
    DIRECTIVES = "option.showDirectivesScriptOption"
    EXTENDS = "option.showExtendsScriptOption"
    MIXINS = "option.showMixinsScriptOption"
    PROVIDE_INJECT = "option.showProvideInjectScriptOption"
    INHERIT_ATTRS = "option.showInheritAttributesScriptOption"
    PROPS = "option.showPropsScriptOption"
    EMITS = "option.showEmitsScriptOption"
    SETUP = "option.showSetupScriptOption"
    DATA = "option.showDataScriptOption"
    COMPUTED = "option.showComputedScriptOption"
    WATCH = "option.showWatchScriptOption"
    METHODS = "option.showMethodsScriptOption"

    # Lifecycle hooks
    LIFECYCLE_HOOKS = "lifecycle.showLifecycleHooksScriptOptions"
    BEFORE_CREATE = "lifecycle.showBeforeCreateScriptOption"
    CREATED = "lifecycle.showCreatedScriptOption"
    BEFORE_MOUNT = "lifecycle.showBeforeMountScriptOption"
    MOUNTED = "lifecycle.showMountedScriptOption"
    BEFORE_UPDATE = "lifecycle.showBeforeUpdateScriptOption"
    UPDATED = "lifecycle.showUpdatedScriptOption"
    ACTIVATED = "lifecycle.showActivatedScriptOption"
    DEACTIVATED = "lifecycle.showDeactivatedScriptOption"
    BEFORE_UNMOUNT = "lifecycle.showBeforeUnmountScriptOption"
    UNMOUNTED = "lifecycle.showUnmountedScriptOption"
    ERROR_CAPTURED = "lifecycle.showErrorCapturedScriptOption"
    RENDER_TRACKED = "lifecycle.showRenderTrackedScriptOption"
    RENDER_TRIGGERED = "lifecycle.showRenderTriggeredScriptOption"

    # Script setup macros (Vue 3.3+/3.4+)
    USE_DEFINE_MODEL = "scriptSetup.useDefineModel"
    USE_WITH_DEFAULTS = "scriptSetup.useWithDefaults"
    DEFINE_OPTIONS = "scriptSetup.showDefineOptions"
    DEFINE_EXPOSE = "scriptSetup.showDefineExpose"
    DEFINE_SLOTS = "scriptSetup.showDefineSlots"

    @property
    def config_key(self) -> str:
        """Dotted settings key for this toggle."""
        return self.value


FEATURE_DEFAULTS: dict[FeatureKey, bool] = {
    FeatureKey.V_MODEL_TEMPLATE: True,
    FeatureKey.NAME: True,
    FeatureKey.COMPONENTS: True,
    FeatureKey.DIRECTIVES: False,
    FeatureKey.EXTENDS: False,
    FeatureKey.MIXINS: False,
    FeatureKey.PROVIDE_INJECT: False,
    FeatureKey.INHERIT_ATTRS: False,
    FeatureKey.PROPS: True,
    FeatureKey.EMITS: True,
    FeatureKey.SETUP: False,
    FeatureKey.DATA: True,
    FeatureKey.COMPUTED: True,
    FeatureKey.WATCH: True,
    FeatureKey.METHODS: True,
    FeatureKey.LIFECYCLE_HOOKS: True,
    FeatureKey.BEFORE_CREATE: False,
    FeatureKey.CREATED: False,
    FeatureKey.BEFORE_MOUNT: False,
    FeatureKey.MOUNTED: True,
    FeatureKey.BEFORE_UPDATE: False,
    FeatureKey.UPDATED: True,
    FeatureKey.ACTIVATED: False,
    FeatureKey.DEACTIVATED: False,
    FeatureKey.BEFORE_UNMOUNT: True,
    FeatureKey.UNMOUNTED: False,
    FeatureKey.ERROR_CAPTURED: False,
    FeatureKey.RENDER_TRACKED: False,
    FeatureKey.RENDER_TRIGGERED: False,
    FeatureKey.USE_DEFINE_MODEL: True,
    FeatureKey.USE_WITH_DEFAULTS: True,
    FeatureKey.DEFINE_OPTIONS: False,
    FeatureKey.DEFINE_EXPOSE: False,
    FeatureKey.DEFINE_SLOTS: False,
}


def default_enabled_features() -> frozenset[FeatureKey]:
    """Return the toggles that are on when nothing is configured."""
    return frozenset(key for key, on in FEATURE_DEFAULTS.items() if on)


# ---------------------------------------------------------------------------
# Lifecycle hook catalogue
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class LifecycleHook:
    """One component lifecycle hook.

    Attributes:
        option_name: Field name in an Options API object (e.g. ``mounted``).
        composition_name: ``onX`` function for ``<script setup>``, or None
            when setup() itself replaces the hook (beforeCreate/created).
        feature: Per-hook toggle; the master LIFECYCLE_HOOKS toggle must
            also be on for the hook to be generated.
    """

    option_name: str
    composition_name: str | None
    feature: FeatureKey


# Canonical order: create -> mount -> update -> activation -> unmount -> error/debug
LIFECYCLE_HOOKS: tuple[LifecycleHook, ...] = (
    LifecycleHook("beforeCreate", None, FeatureKey.BEFORE_CREATE),
    LifecycleHook("created", None, FeatureKey.CREATED),
    LifecycleHook("beforeMount", "onBeforeMount", FeatureKey.BEFORE_MOUNT),
    LifecycleHook("mounted", "onMounted", FeatureKey.MOUNTED),
    LifecycleHook("beforeUpdate", "onBeforeUpdate", FeatureKey.BEFORE_UPDATE),
    LifecycleHook("updated", "onUpdated", FeatureKey.UPDATED),
    LifecycleHook("activated", "onActivated", FeatureKey.ACTIVATED),
    LifecycleHook("deactivated", "onDeactivated", FeatureKey.DEACTIVATED),
    LifecycleHook("beforeUnmount", "onBeforeUnmount", FeatureKey.BEFORE_UNMOUNT),
    LifecycleHook("unmounted", "onUnmounted", FeatureKey.UNMOUNTED),
    LifecycleHook("errorCaptured", "onErrorCaptured", FeatureKey.ERROR_CAPTURED),
    LifecycleHook("renderTracked", "onRenderTracked", FeatureKey.RENDER_TRACKED),
    LifecycleHook("renderTriggered", "onRenderTriggered", FeatureKey.RENDER_TRIGGERED),
)

COMPOSITION_HOOKS: tuple[LifecycleHook, ...] = tuple(
    hook for hook in LIFECYCLE_HOOKS if hook.composition_name is not None
)
