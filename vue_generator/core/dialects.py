"""API dialect and script language selection."""

from dataclasses import dataclass
from enum import Enum


class ApiType(Enum):
    """Vue component API style."""

    SETUP = "setup"  # Composition API, <script setup>
    OPTIONS = "options"  # Options API, defineComponent({...})

    @property
    def folder_name(self) -> str:
        """Directory name used when writing fixture files."""
        return "composition-api" if self is ApiType.SETUP else "options-api"


class ScriptLang(Enum):
    """Value of the ``lang`` attribute on the script tag."""

    TS = "ts"
    JS = "js"

    @property
    def is_typed(self) -> bool:
        return self is ScriptLang.TS


@dataclass(frozen=True)
class ComponentSettings:
    """What to generate for one component file.

    Attributes:
        component_name: PascalCase component name.
        api_type: Dialect of the script block.
        script_lang: Script language, selects typed output.
    """

    component_name: str
    api_type: ApiType = ApiType.SETUP
    script_lang: ScriptLang = ScriptLang.TS

    @property
    def file_name(self) -> str:
        return f"{self.component_name}.vue"
