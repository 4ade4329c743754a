"""
Ratioscale Test Suite - Shared Fixtures
"""

import pytest


@pytest.fixture(autouse=True)
def reset_all_singletons():
    """
    Reset module-level singletons between tests.

    Resets cached settings, logging state (so caplog sees records) and the
    shared scale registry.
    """

    def _reset():
        from ratioscale.core.config import reset_settings
        from ratioscale.core.logging import reset_logging
        from ratioscale.scales.registry import reset_scale_registry

        reset_settings()
        reset_logging()
        reset_scale_registry()

    _reset()
    yield
    _reset()


@pytest.fixture
def scale_file(tmp_path):
    """Write a YAML scale file and return its path."""

    def _write(content: str):
        path = tmp_path / "scales.yaml"
        path.write_text(content)
        return path

    return _write
