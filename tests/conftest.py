"""Pytest configuration and shared fixtures for the rustdoc2md test suite."""

import os

import pytest
from hypothesis import Phase, Verbosity, settings
from utils import RustdocTestGenerator

# Register custom Hypothesis profiles
settings.register_profile("ci", max_examples=100, verbosity=Verbosity.verbose)
settings.register_profile("dev", max_examples=20)
settings.register_profile(
    "debug", max_examples=10, verbosity=Verbosity.verbose, phases=[Phase.explicit, Phase.reuse, Phase.generate]
)
settings.load_profile(os.getenv("HYPOTHESIS_PROFILE", "dev"))


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests - fast, isolated component tests")
    config.addinivalue_line("markers", "integration: Integration tests - component interaction tests")


@pytest.fixture
def struct_page_html() -> str:
    """Provide a trimmed-down rustdoc struct page.

    Returns
    -------
    str
        HTML with sidebar, navigation, hidden summary and item table.

    """
    return RustdocTestGenerator.create_struct_page_html()


@pytest.fixture
def module_page_html() -> str:
    """Provide a rustdoc module index page."""
    return RustdocTestGenerator.create_module_page_html()
