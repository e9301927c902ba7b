"""
Smoke test - verifies test infrastructure is working.
Run: pytest tests/test_smoke.py -v
"""


def test_import_app():
    """Verify users_api package can be imported."""
    from users_api.core.config import get_settings

    settings = get_settings()
    assert settings is not None
    assert hasattr(settings, "mongo_uri")
    assert hasattr(settings, "port")


def test_settings_read_from_environment(mock_env):
    from users_api.core.config import get_settings

    settings = get_settings()
    assert settings.port == 3100
    assert settings.mongo_database_name == "test_users_db"
    assert settings.bcrypt_rounds == 4


def test_pytest_runs():
    """Basic sanity check that pytest executes tests."""
    assert True


def test_configure_logging_accepts_unknown_level():
    from users_api.core.logging_config import configure_logging

    configure_logging("not-a-level")
    configure_logging("debug")
