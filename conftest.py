import pytest


def pytest_configure(config: pytest.Config) -> None:
    """Ensure pytest-django plugin is available for the test session."""
    if not config.pluginmanager.hasplugin("django"):
        raise RuntimeError(
            "pytest-django is not installed. Install the test extras:\n"
            "    pip install -e .[test]\n"
        )
