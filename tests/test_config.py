"""
Tests for docsign/config.py
"""

import pytest

from docsign.config import ScriveConfig, get_config, reset_config

ENV_VARS = [
    'SCRIVE_API_URL',
    'SCRIVE_OAUTH_KEY',
    'SCRIVE_OAUTH_TOKEN',
    'SCRIVE_OAUTH_SIGNATURE',
    'SCRIVE_REDIRECT_URL',
    'SCRIVE_TIMEOUT',
]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path):
    # setenv first so values loaded from .env files are undone after each test
    for name in ENV_VARS:
        monkeypatch.setenv(name, '')
        monkeypatch.delenv(name)
    # Keep a developer's .env out of the tests
    monkeypatch.chdir(tmp_path)
    reset_config()
    yield
    reset_config()


class TestScriveConfig:
    """Tests for ScriveConfig.from_env"""

    def test_reads_environment(self, monkeypatch, tmp_path):
        monkeypatch.setenv('SCRIVE_API_URL', 'https://scrive.test')
        monkeypatch.setenv('SCRIVE_OAUTH_KEY', 'k')
        monkeypatch.setenv('SCRIVE_OAUTH_TOKEN', 't')
        monkeypatch.setenv('SCRIVE_OAUTH_SIGNATURE', 's')
        monkeypatch.setenv('SCRIVE_REDIRECT_URL', 'https://host.test/done')
        monkeypatch.setenv('SCRIVE_TIMEOUT', '12.5')

        config = ScriveConfig.from_env(dotenv_path=str(tmp_path / "missing.env"))

        assert config.api_url == 'https://scrive.test'
        assert config.oauth_key == 'k'
        assert config.oauth_token == 't'
        assert config.oauth_signature == 's'
        assert config.redirect_url == 'https://host.test/done'
        assert config.timeout == 12.5

    def test_missing_values_are_empty(self, tmp_path):
        config = ScriveConfig.from_env(dotenv_path=str(tmp_path / "missing.env"))
        assert config.api_url == ''
        assert config.oauth_key == ''
        assert config.timeout == 30.0

    def test_blank_timeout_uses_default(self, monkeypatch, tmp_path):
        monkeypatch.setenv('SCRIVE_TIMEOUT', '')

        config = ScriveConfig.from_env(dotenv_path=str(tmp_path / "missing.env"))

        assert config.timeout == 30.0

    def test_reads_dotenv_file(self, tmp_path):
        dotenv = tmp_path / 'scrive.env'
        dotenv.write_text('SCRIVE_API_URL=https://from-file.test\nSCRIVE_OAUTH_KEY=file-key\n')

        config = ScriveConfig.from_env(dotenv_path=str(dotenv))

        assert config.api_url == 'https://from-file.test'
        assert config.oauth_key == 'file-key'

    def test_auth_context(self):
        config = ScriveConfig(api_url='https://scrive.test', oauth_key='k', oauth_token='t', oauth_signature='s')
        auth = config.auth_context()

        assert auth.base_url == 'https://scrive.test'
        assert (auth.oauth_key, auth.oauth_token, auth.oauth_signature) == ('k', 't', 's')

    def test_is_immutable(self):
        config = ScriveConfig()
        with pytest.raises(AttributeError):
            config.api_url = 'x'


class TestGetConfig:
    """Tests for the config singleton"""

    def test_returns_same_instance(self):
        assert get_config() is get_config()

    def test_reset_rereads_environment(self, monkeypatch):
        first = get_config()
        monkeypatch.setenv('SCRIVE_API_URL', 'https://changed.test')
        assert get_config().api_url == first.api_url

        reset_config()
        assert get_config().api_url == 'https://changed.test'
