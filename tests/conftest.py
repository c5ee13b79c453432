"""Shared pytest setup: Hypothesis profiles and the fuzz marker.

Profiles (selected once per session):
    dev       default; broad local runs
    ci        chosen when CI=true; fewer, derandomized examples
    verbose   prints every example; for chasing a failure
    stateful  step budget for the cursor state machine in tests/fuzz/

HYPOTHESIS_PROFILE=<name> overrides the automatic choice.

Tests marked fuzz only run when asked for, either with -m fuzz or by
naming tests/fuzz on the command line.
"""

import os

import pytest
from hypothesis import Phase, Verbosity, settings

_PHASES = (Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink)

_PROFILES: dict[str, dict[str, object]] = {
    "dev": {"max_examples": 500},
    "ci": {"max_examples": 50, "derandomize": True, "print_blob": True},
    "verbose": {"max_examples": 100, "verbosity": Verbosity.verbose},
    "stateful": {"max_examples": 300, "stateful_step_count": 60},
}

for _name, _options in _PROFILES.items():
    settings.register_profile(_name, phases=_PHASES, **_options)  # type: ignore[arg-type]


def _active_profile() -> str:
    requested = os.environ.get("HYPOTHESIS_PROFILE", "")
    if requested in _PROFILES:
        return requested
    return "ci" if os.environ.get("CI") == "true" else "dev"


settings.load_profile(_active_profile())


def pytest_configure(config: pytest.Config) -> None:
    config.addinivalue_line(
        "markers",
        "fuzz: long-running state machine tests, skipped unless requested",
    )


def _fuzz_requested(config: pytest.Config) -> bool:
    if "fuzz" in (config.option.markexpr or ""):
        return True
    return any("fuzz" in arg for arg in config.args)


def pytest_collection_modifyitems(config: pytest.Config, items: list[pytest.Item]) -> None:
    """Skip fuzz-marked tests in ordinary runs."""
    if _fuzz_requested(config):
        return
    skip = pytest.mark.skip(reason="fuzz test; run with -m fuzz")
    for item in items:
        if item.get_closest_marker("fuzz") is not None:
            item.add_marker(skip)
