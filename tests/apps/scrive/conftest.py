"""
Pytest fixtures for Scrive tests
"""

import email
import json
from typing import Any, Dict, List, Optional

import httpx
import pytest

from docsign.apps.scrive.auth import AuthContext

BASE_URL = 'https://scrive.test'
REDIRECT_URL = 'https://host.test/signed'


class FakeScrive:
    """
    In-memory stand-in for the Scrive API.

    Responses are queued per path; requests are recorded in order.
    """

    def __init__(self):
        self.requests: List[httpx.Request] = []
        self._responses: Dict[str, List[tuple]] = {}

    def add(
        self,
        path: str,
        status_code: int = 200,
        json_body: Any = None,
        text: Optional[str] = None,
        headers: Optional[Dict[str, str]] = None,
    ):
        if text is not None:
            reply = (status_code, {'text': text})
        else:
            reply = (status_code, {'json': json_body})
        if headers:
            reply[1]['headers'] = headers
        self._responses.setdefault(path, []).append(reply)

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        queue = self._responses.get(request.url.path)
        if not queue:
            return httpx.Response(404, json={'error': 'not found'})
        status_code, kwargs = queue.pop(0) if len(queue) > 1 else queue[0]
        return httpx.Response(status_code, **kwargs)

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)

    @property
    def paths(self) -> List[str]:
        return [r.url.path for r in self.requests]


def read_form_fields(request: httpx.Request) -> Dict[str, str]:
    """Decode a multipart/form-data request body into {name: value}."""
    body = request.read()
    raw = b'Content-Type: ' + request.headers['content-type'].encode() + b'\r\n\r\n' + body
    message = email.message_from_bytes(raw)
    fields = {}
    for part in message.get_payload():
        name = part.get_param('name', header='content-disposition')
        fields[name] = part.get_payload(decode=True).decode('utf-8')
    return fields


def read_document_spec(request: httpx.Request) -> Dict[str, Any]:
    return json.loads(read_form_fields(request)['document'])


def make_document(doc_id: str = 'doc123', title: str = 'Contract', started: bool = False) -> Dict[str, Any]:
    """A Document body as the service returns it"""
    def party(role, company, mail=None, url=None):
        fields = [{'type': 'company', 'value': company}]
        if mail:
            fields.append({'type': 'email', 'value': mail})
        return {
            'signatory_role': role,
            'delivery_method': 'api',
            'sign_success_redirect_url': REDIRECT_URL,
            'api_delivery_url': url,
            'fields': fields,
        }

    return {
        'id': doc_id,
        'title': title,
        'parties': [
            party('viewer', 'Default Party', url=f'/to/view/{doc_id}' if started else None),
            party('signing_party', 'Alice', 'a@x.com', url=f'/to/sign/{doc_id}/1' if started else None),
            party('signing_party', 'Bob', 'b@x.com', url=f'/to/sign/{doc_id}/2' if started else None),
        ],
    }


@pytest.fixture
def auth():
    return AuthContext(
        base_url=BASE_URL,
        oauth_key='key-1',
        oauth_token='token-2',
        oauth_signature='sig-3&sig-4',
    )


@pytest.fixture
def fake_scrive():
    return FakeScrive()


@pytest.fixture
def document_body():
    """Factory for service Document bodies"""
    return make_document


@pytest.fixture
def sent_document_spec():
    """Decoder for the 'document' form field of an update request"""
    return read_document_spec
