"""
Scrive App - Integração com Scrive para assinaturas eletrônicas.

Este app fornece:
- Autenticação OAuth PLAINTEXT via header
- Actions para criar documento a partir do template, atualizar as
  partes e iniciar o processo de assinatura
- DocumentWorkflowClient, que encadeia as actions e leva o signatário
  até a página de assinatura
"""

from typing import Dict, Optional

import httpx

from docsign.apps.base import BaseApp, ActionDefinition
from .auth import AuthContext, get_api_headers, pin_locale_cookie


class ScriveApp(BaseApp):
    """
    App Scrive para assinaturas eletrônicas.

    Args:
        auth: URL base e credenciais OAuth
        transport: Transport httpx opcional
        timeout: Timeout das requisições em segundos
    """

    def __init__(
        self,
        auth: AuthContext,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        timeout: float = 30.0,
    ):
        self.auth = auth
        super().__init__(transport=transport, timeout=timeout)

    @property
    def name(self) -> str:
        return 'Scrive'

    @property
    def key(self) -> str:
        return 'scrive'

    @property
    def description(self) -> str:
        return 'Electronic signature platform'

    @property
    def base_url(self) -> str:
        return self.auth.base_url

    @property
    def documentation_url(self) -> str:
        return 'https://apidocs.scrive.com/'

    def get_api_headers(self) -> Dict[str, str]:
        return get_api_headers(self.auth)

    def _setup(self):
        """Registra actions e hooks"""
        from .actions import create_from_template, update_document, start_document

        # httpx descarta o header Cookie ao seguir redirects
        self.add_before_request_hook(pin_locale_cookie)

        self.register_action(ActionDefinition(
            key='create-from-template',
            name='Create From Template',
            description='Creates a new document from the template',
            handler=create_from_template.run,
        ))

        self.register_action(ActionDefinition(
            key='update-document',
            name='Update Document',
            description='Sets the title and parties of a document',
            handler=update_document.run,
            input_schema={
                'type': 'object',
                'properties': {
                    'document_id': {'type': 'string'},
                    'document': {
                        'description': 'DocumentSpec instance (see build_document_spec); '
                                       'sent as a JSON string in the multipart field "document"',
                    },
                },
                'required': ['document_id', 'document'],
            },
        ))

        self.register_action(ActionDefinition(
            key='start-document',
            name='Start Document',
            description='Starts the signing process',
            handler=start_document.run,
            input_schema={
                'type': 'object',
                'properties': {
                    'document_id': {'type': 'string'},
                },
                'required': ['document_id'],
            },
        ))


__all__ = ['ScriveApp', 'AuthContext']
