"""
Scrive Authentication Configuration.

Scrive accepts OAuth 1.0 PLAINTEXT credentials passed verbatim in the
Authorization header, plus a cookie pinning the UI language.
"""

from dataclasses import dataclass
from typing import Dict

AUTHORIZATION_FORMAT = (
    'oauth_signature_method="PLAINTEXT", '
    'oauth_consumer_key="{key}", '
    'oauth_token="{token}", '
    'oauth_signature="{signature}"'
)

LOCALE_COOKIE = 'lang="en"; lang-ssn="en"'


@dataclass(frozen=True)
class AuthContext:
    """Credentials and base URL shared by every call"""
    base_url: str
    oauth_key: str
    oauth_token: str
    oauth_signature: str

    def __repr__(self) -> str:
        # Keep secrets out of logs and tracebacks
        return f"AuthContext(base_url={self.base_url!r}, oauth_key=***)"


def get_authorization(auth: AuthContext) -> str:
    """Authorization header value; values are substituted without escaping."""
    return AUTHORIZATION_FORMAT.format(
        key=auth.oauth_key,
        token=auth.oauth_token,
        signature=auth.oauth_signature,
    )


def get_api_headers(auth: AuthContext) -> Dict[str, str]:
    """
    Return the headers required on every Scrive API call.

    Args:
        auth: AuthContext with the OAuth key, token and signature

    Returns:
        Dict with 'Authorization' and 'Cookie'
    """
    return {
        'Authorization': get_authorization(auth),
        'Cookie': LOCALE_COOKIE,
    }


async def pin_locale_cookie(request, context):
    """Request hook: set the locale cookie on every hop, redirects included."""
    request.headers['Cookie'] = LOCALE_COOKIE
