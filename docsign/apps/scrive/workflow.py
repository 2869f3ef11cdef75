"""
Document workflow.

Sequences the Scrive calls that take a document from "does not exist"
to "signatory is on the signing page":

    create_from_template() -> update_parties() -> start_signing() -> open_signing_link()

Each step returns a DocumentHandle whose state gates the next step. No
state is kept in the client itself, so one client can drive any number
of documents concurrently.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Iterable, Mapping, Optional, Union
import logging

import httpx

from docsign.exceptions import WorkflowStateError
from . import ScriveApp
from .auth import AuthContext
from .links import LinkOpener, get_delivery_url, open_in_browser, open_link, resolve_signing_url
from .models import Document
from .parties import PartyInput, build_document_spec

logger = logging.getLogger(__name__)


class DocumentState(Enum):
    """Lifecycle of a document as seen by this client"""
    UNCREATED = 'uncreated'
    CREATED = 'created'
    UPDATED = 'updated'
    STARTED = 'started'


@dataclass(frozen=True)
class DocumentHandle:
    """A remote document id tagged with the last step it went through"""
    id: str
    state: DocumentState
    document: Optional[Document] = None

    @property
    def parties(self):
        return self.document.parties if self.document else []

    @property
    def signing_parties(self):
        return self.document.signing_parties if self.document else []


DocumentRef = Union[DocumentHandle, str]


def _require_state(document: DocumentRef, expected: DocumentState, step: str) -> DocumentHandle:
    """
    Check that a document may go through `step`.

    A bare id string is taken to be in the expected state.
    """
    if isinstance(document, DocumentHandle):
        handle = document
    elif document:
        handle = DocumentHandle(id=str(document), state=expected)
    else:
        handle = DocumentHandle(id='', state=DocumentState.UNCREATED)

    if handle.state != expected or not handle.id:
        raise WorkflowStateError(
            f"Cannot {step} a document in state '{handle.state.value}', expected '{expected.value}'",
            expected=expected,
            actual=handle.state,
            document_id=handle.id or None,
        )
    return handle


class DocumentWorkflowClient:
    """
    Client for the Scrive signing workflow.

    Args:
        auth: Base URL and OAuth credentials
        redirect_url: Where signatories land after signing
        link_opener: Callable (sync or async) that opens a URL for the user;
            defaults to the system browser
        transport: Optional httpx transport
        timeout: Request timeout in seconds
    """

    def __init__(
        self,
        auth: AuthContext,
        redirect_url: str,
        link_opener: Optional[LinkOpener] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        timeout: float = 30.0,
    ):
        self.auth = auth
        self.redirect_url = redirect_url
        self.link_opener = link_opener or open_in_browser
        self.app = ScriveApp(auth, transport=transport, timeout=timeout)

    @classmethod
    def from_config(cls, config, **kwargs) -> 'DocumentWorkflowClient':
        """Build a client from a ScriveConfig"""
        kwargs.setdefault('timeout', config.timeout)
        return cls(config.auth_context(), config.redirect_url, **kwargs)

    async def create_from_template(self) -> DocumentHandle:
        """
        Create a new document from the template.

        Returns:
            Handle in CREATED state; `handle.id` is the document id
        """
        document_id = await self.app.execute_action('create-from-template')
        return DocumentHandle(id=document_id, state=DocumentState.CREATED)

    async def update_parties(
        self,
        document: DocumentRef,
        title: str,
        parties: Iterable[Union[PartyInput, Mapping[str, Any]]],
    ) -> DocumentHandle:
        """
        Set the title and signatories of a created document.

        Args:
            document: Handle from create_from_template(), or its id
            title: Document title
            parties: Signatories (name, email) in signing order

        Returns:
            Handle in UPDATED state carrying the updated Document
        """
        handle = _require_state(document, DocumentState.CREATED, 'update')
        spec = build_document_spec(title, parties, self.redirect_url)

        updated = await self.app.execute_action(
            'update-document',
            parameters={'document_id': handle.id, 'document': spec},
        )
        return DocumentHandle(id=handle.id, state=DocumentState.UPDATED, document=updated)

    async def start_signing(self, document: DocumentRef) -> DocumentHandle:
        """
        Start the signing process of an updated document.

        Results are not cached: every call reaches the service.

        Returns:
            Handle in STARTED state; its parties carry delivery URLs
        """
        handle = _require_state(document, DocumentState.UPDATED, 'start')

        started = await self.app.execute_action(
            'start-document',
            parameters={'document_id': handle.id},
        )
        return DocumentHandle(id=handle.id, state=DocumentState.STARTED, document=started)

    async def open_signing_link(self, party: Any) -> str:
        """
        Send a signatory to the hosted signing page.

        Args:
            party: SigningParty from a started document (or a mapping with
                'api_delivery_url')

        Returns:
            The absolute URL handed to the link opener

        Raises:
            SigningLinkError: The delivery URL is missing or invalid
        """
        url = resolve_signing_url(self.auth.base_url, get_delivery_url(party))
        logger.info("Opening signing link")
        await open_link(url, self.link_opener)
        return url

    async def send_for_signature(
        self,
        title: str,
        parties: Iterable[Union[PartyInput, Mapping[str, Any]]],
    ) -> DocumentHandle:
        """
        Run create, update and start in order.

        Returns:
            Handle in STARTED state
        """
        created = await self.create_from_template()
        updated = await self.update_parties(created, title, parties)
        return await self.start_signing(updated)
