"""
docsign - Scrive e-signature workflow.

Usage:
    from docsign import DocumentWorkflowClient, ScriveConfig

    client = DocumentWorkflowClient.from_config(ScriveConfig.from_env())

    created = await client.create_from_template()
    updated = await client.update_parties(created, 'Contract', [{'name': 'Alice', 'email': 'a@x.com'}])
    started = await client.start_signing(updated)
    await client.open_signing_link(started.signing_parties[0])
"""

from .config import ScriveConfig, get_config, reset_config
from .exceptions import (
    ScriveError,
    ScriveAPIError,
    MalformedResponseError,
    WorkflowStateError,
    SigningLinkError,
)
from .apps.scrive import ScriveApp
from .apps.scrive.auth import AuthContext, get_api_headers
from .apps.scrive.models import Document, PartyField, SigningParty
from .apps.scrive.parties import (
    DocumentSpec,
    Field,
    FieldType,
    PartyInput,
    PartySpec,
    SignatoryRole,
    build_document_spec,
    build_parties,
)
from .apps.scrive.links import resolve_signing_url
from .apps.scrive.workflow import DocumentHandle, DocumentState, DocumentWorkflowClient

__all__ = [
    # Config
    'ScriveConfig',
    'get_config',
    'reset_config',

    # Exceptions
    'ScriveError',
    'ScriveAPIError',
    'MalformedResponseError',
    'WorkflowStateError',
    'SigningLinkError',

    # Auth
    'AuthContext',
    'get_api_headers',

    # Payloads and responses
    'PartyInput',
    'Field',
    'FieldType',
    'SignatoryRole',
    'PartySpec',
    'DocumentSpec',
    'build_parties',
    'build_document_spec',
    'Document',
    'PartyField',
    'SigningParty',

    # Workflow
    'ScriveApp',
    'DocumentState',
    'DocumentHandle',
    'DocumentWorkflowClient',
    'resolve_signing_url',
]
