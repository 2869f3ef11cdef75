"""
Scrive configuration.

Values are read once from the environment (and an optional .env file)
and passed explicitly into the workflow client.
"""
import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

from docsign.apps.scrive.auth import AuthContext


@dataclass(frozen=True)
class ScriveConfig:
    """Settings for the Scrive API"""

    api_url: str = ''
    oauth_key: str = ''
    oauth_token: str = ''
    oauth_signature: str = ''

    # Where the signatory lands after signing
    redirect_url: str = ''

    # Per-request timeout in seconds
    timeout: float = 30.0

    @classmethod
    def from_env(cls, dotenv_path: Optional[str] = None) -> 'ScriveConfig':
        """Create config from environment variables"""
        load_dotenv(dotenv_path)
        return cls(
            api_url=os.getenv('SCRIVE_API_URL', ''),
            oauth_key=os.getenv('SCRIVE_OAUTH_KEY', ''),
            oauth_token=os.getenv('SCRIVE_OAUTH_TOKEN', ''),
            oauth_signature=os.getenv('SCRIVE_OAUTH_SIGNATURE', ''),
            redirect_url=os.getenv('SCRIVE_REDIRECT_URL', ''),
            timeout=float(os.getenv('SCRIVE_TIMEOUT') or 30),
        )

    def auth_context(self) -> AuthContext:
        """Build the immutable AuthContext used by every call"""
        return AuthContext(
            base_url=self.api_url,
            oauth_key=self.oauth_key,
            oauth_token=self.oauth_token,
            oauth_signature=self.oauth_signature,
        )


_config: Optional[ScriveConfig] = None


def get_config() -> ScriveConfig:
    """Return the process-wide config singleton"""
    global _config
    if _config is None:
        _config = ScriveConfig.from_env()
    return _config


def reset_config():
    """Forget the cached config (tests, reloads)"""
    global _config
    _config = None
