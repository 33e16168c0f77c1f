import pytest
from core.utilities.config_manager import ConfigManager


@pytest.fixture(autouse=True)
def default_settings():
    """Every test starts from the default in-memory settings."""
    manager = ConfigManager()
    manager.reset()
    yield manager
    manager.reset()
