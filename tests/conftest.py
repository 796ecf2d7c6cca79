"""Pytest configuration and shared fixtures."""

import os

import pytest
from hypothesis import Verbosity, settings

from calcengine import Calculator, event_for_key

# Configure Hypothesis profiles
settings.register_profile("ci", max_examples=200, deadline=None)
settings.register_profile("dev", max_examples=50, deadline=None)
settings.register_profile("debug", max_examples=10, verbosity=Verbosity.verbose)

settings.load_profile(os.environ.get("HYPOTHESIS_PROFILE", "dev"))


@pytest.fixture
def calculator():
    """Provide a fresh Calculator instance."""
    return Calculator()


@pytest.fixture
def press(calculator):
    """Feed space-separated key labels to the calculator fixture."""

    def _press(keys: str) -> Calculator:
        for label in keys.split():
            calculator.handle_input(event_for_key(label))
        return calculator

    return _press
