"""Unit tests for confluence_client.auth module."""

import pytest
from unittest.mock import patch
from src.confluence_client.auth import Authenticator, Credentials, ConnectionSettings, DEFAULT_TIMEOUT
from src.confluence_client.errors import MissingCredentialsError, ValidationError


def make_getenv(env_vars):
    """Build an os.getenv side effect backed by a dict."""
    def getenv_side_effect(key, default=None):
        return env_vars.get(key, default)
    return getenv_side_effect


FULL_ENV = {
    'CONFLUENCE_URL': 'https://test.atlassian.net/wiki',
    'CONFLUENCE_USER': 'test@example.com',
    'CONFLUENCE_API_TOKEN': 'test-token-123',
}


class TestCredentials:
    """Test cases for Credentials NamedTuple."""

    def test_credentials_are_immutable(self):
        """Credentials fields cannot be modified after creation."""
        creds = Credentials(
            url="https://test.atlassian.net/wiki",
            user="test@example.com",
            api_token="test-token-123"
        )
        with pytest.raises(AttributeError):
            creds.url = "different-url"


class TestAuthenticator:
    """Test cases for Authenticator class."""

    @patch('src.confluence_client.auth.load_dotenv')
    def test_init_loads_dotenv(self, mock_load_dotenv):
        """Authenticator __init__ should call load_dotenv()."""
        Authenticator()
        mock_load_dotenv.assert_called_once()

    @patch('src.confluence_client.auth.load_dotenv')
    @patch('os.getenv')
    def test_get_credentials_success(self, mock_getenv, mock_load_dotenv):
        """get_credentials should return Credentials when all env vars are set."""
        mock_getenv.side_effect = make_getenv(FULL_ENV)

        creds = Authenticator().get_credentials()

        assert isinstance(creds, Credentials)
        assert creds.url == 'https://test.atlassian.net/wiki'
        assert creds.user == 'test@example.com'
        assert creds.api_token == 'test-token-123'

    @patch('src.confluence_client.auth.load_dotenv')
    @patch('os.getenv')
    def test_get_credentials_strips_trailing_slash(self, mock_getenv, mock_load_dotenv):
        """A trailing slash on CONFLUENCE_URL is removed."""
        mock_getenv.side_effect = make_getenv({**FULL_ENV, 'CONFLUENCE_URL': 'https://test.atlassian.net/wiki/'})

        assert Authenticator().get_credentials().url == 'https://test.atlassian.net/wiki'

    @patch('src.confluence_client.auth.load_dotenv')
    @patch('os.getenv')
    def test_get_credentials_missing_token(self, mock_getenv, mock_load_dotenv):
        """get_credentials should name the missing variable."""
        env = dict(FULL_ENV)
        del env['CONFLUENCE_API_TOKEN']
        mock_getenv.side_effect = make_getenv(env)

        with pytest.raises(MissingCredentialsError) as exc_info:
            Authenticator().get_credentials()

        assert exc_info.value.missing == ['CONFLUENCE_API_TOKEN']

    @patch('src.confluence_client.auth.load_dotenv')
    @patch('os.getenv')
    def test_get_credentials_all_missing(self, mock_getenv, mock_load_dotenv):
        """All missing variables are reported in order."""
        mock_getenv.side_effect = make_getenv({})

        with pytest.raises(MissingCredentialsError) as exc_info:
            Authenticator().get_credentials()

        assert exc_info.value.missing == ['CONFLUENCE_URL', 'CONFLUENCE_USER', 'CONFLUENCE_API_TOKEN']


class TestConnectionSettings:
    """Test cases for Authenticator.get_settings."""

    @pytest.fixture
    def authenticator(self, mocker):
        mocker.patch('src.confluence_client.auth.load_dotenv')
        return Authenticator()

    def test_defaults(self, authenticator):
        """Without overrides, settings use the default timeout and Cloud."""
        assert authenticator.get_settings() == ConnectionSettings(timeout=DEFAULT_TIMEOUT, cloud=True)

    def test_timeout_override(self, authenticator, monkeypatch):
        monkeypatch.setenv('CONFLUENCE_TIMEOUT', '5')
        assert authenticator.get_settings().timeout == 5

    @pytest.mark.parametrize("raw", ["abc", "0", "-3"])
    def test_invalid_timeout_rejected(self, authenticator, monkeypatch, raw):
        monkeypatch.setenv('CONFLUENCE_TIMEOUT', raw)
        with pytest.raises(ValidationError) as exc_info:
            authenticator.get_settings()
        assert exc_info.value.field == 'CONFLUENCE_TIMEOUT'

    @pytest.mark.parametrize("raw,expected", [
        ("false", False),
        ("FALSE", False),
        ("0", False),
        ("true", True),
        ("yes", True),
    ])
    def test_cloud_flag(self, authenticator, monkeypatch, raw, expected):
        monkeypatch.setenv('CONFLUENCE_CLOUD', raw)
        assert authenticator.get_settings().cloud is expected
