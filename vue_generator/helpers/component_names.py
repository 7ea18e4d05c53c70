"""Component name validation and normalisation."""

import re

_VUE_SUFFIX = re.compile(r"\.vue$", re.IGNORECASE)
_VALID_NAME = re.compile(r"^[a-zA-Z][a-zA-Z0-9_-]*$")
_WORD_SEPARATORS = re.compile(r"[-_\s]+")


class InvalidComponentNameError(ValueError):
    """Raised for names that cannot become a component file name."""


def _strip_name(name: str) -> str:
    return _VUE_SUFFIX.sub("", name.strip())


def validate_component_name(name: str) -> str | None:
    """Return an error message for an invalid name, or None if it is valid."""
    clean = _strip_name(name)
    if not clean:
        return "Component name cannot be empty"
    if not _VALID_NAME.match(clean):
        return (
            "Component name must start with a letter and contain only "
            "alphanumeric characters, hyphens, or underscores"
        )
    return None


def normalize_component_name(name: str) -> str:
    """Convert a user-entered name to PascalCase.

    Example:
        "my-button.vue" → "MyButton"
        "user_profile-card" → "UserProfileCard"

    Raises:
        InvalidComponentNameError: If the name fails validation.
    """
    error = validate_component_name(name)
    if error is not None:
        raise InvalidComponentNameError(f"{error}: {name!r}")

    parts = _WORD_SEPARATORS.split(_strip_name(name))
    return "".join(part[:1].upper() + part[1:].lower() for part in parts if part)
