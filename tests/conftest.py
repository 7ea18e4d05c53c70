"""Shared fixtures and helpers for the vuegen test suite.

``build_ctx`` builds a GenerationContext with exactly the toggles a test
cares about switched on.
"""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path

import pytest

from vue_generator.core.context import GenerationContext, Indentation
from vue_generator.core.feature_keys import FeatureKey


def build_ctx(
    *features: FeatureKey,
    typed: bool = True,
    indent: Indentation | None = None,
    component_name: str = "TestComponent",
) -> GenerationContext:
    """Build a context where only ``features`` are enabled.

    Usage::

        ctx = build_ctx(FeatureKey.PROPS, FeatureKey.V_MODEL_TEMPLATE, typed=False)
    """
    return GenerationContext(
        is_typed=typed,
        enabled=frozenset(features),
        indent=indent or Indentation(),
        component_name=component_name,
    )


def all_features_except(*excluded: FeatureKey) -> tuple[FeatureKey, ...]:
    """Every toggle except ``excluded``."""
    return tuple(key for key in FeatureKey if key not in excluded)


def marker_positions(output: str, markers: Iterable[str]) -> list[int]:
    """Index of each marker that is present in ``output``, in marker order."""
    return [output.index(marker) for marker in markers if marker in output]


@pytest.fixture()
def isolated_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run the test from an empty directory so no vuegen.yaml is picked up."""
    workdir = tmp_path / "work"
    workdir.mkdir()
    monkeypatch.chdir(workdir)
    return workdir
