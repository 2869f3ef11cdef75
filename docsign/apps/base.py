"""
BaseApp - Classe base para apps de serviços remotos.

Cada app conhece a URL base e os headers de autenticação de um serviço
remoto, e mantém um registry de actions. Cada action é um handler async
que recebe um cliente httpx já autenticado:

    docsign/apps/{app_name}/
    ├── __init__.py          # Classe principal do app
    ├── auth.py              # Headers de autenticação
    └── actions/             # Um módulo por chamada remota
        └── {action_name}.py
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional
import logging

import httpx

logger = logging.getLogger(__name__)


@dataclass
class ActionDefinition:
    """Definição de uma action do app"""
    key: str
    name: str
    description: str
    handler: Callable
    input_schema: Optional[Dict[str, Any]] = None
    requires_connection: bool = True

    def to_dict(self) -> Dict[str, Any]:
        return {
            'key': self.key,
            'name': self.name,
            'description': self.description,
            'requires_connection': self.requires_connection,
            'input_schema': self.input_schema,
        }


class BaseApp(ABC):
    """
    Classe base abstrata para todos os apps.

    Subclasses definem name, key e base_url, sobrescrevem get_api_headers()
    quando as chamadas precisam de autenticação e registram actions em _setup().

    Args:
        transport: Transport httpx opcional, repassado a todo cliente
            (httpx.MockTransport nos testes)
        timeout: Timeout das requisições em segundos
    """

    def __init__(
        self,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        timeout: float = 30.0,
    ):
        self._transport = transport
        self._timeout = timeout
        self._actions: Dict[str, ActionDefinition] = {}
        self._before_request_hooks: List[Callable] = []
        self._after_request_hooks: List[Callable] = []
        self._setup()

    @property
    @abstractmethod
    def name(self) -> str:
        """Nome de exibição do app (ex: 'Scrive')"""
        pass

    @property
    @abstractmethod
    def key(self) -> str:
        """Chave única do app (ex: 'scrive')"""
        pass

    @property
    def description(self) -> str:
        return ''

    @property
    def base_url(self) -> Optional[str]:
        """URL base para chamadas de API"""
        return None

    @property
    def documentation_url(self) -> Optional[str]:
        return None

    def _setup(self):
        """
        Método chamado durante inicialização.
        Subclasses sobrescrevem para registrar actions e hooks.
        """
        pass

    def get_api_headers(self) -> Dict[str, str]:
        """Headers enviados em toda requisição"""
        return {}

    def register_action(self, action: ActionDefinition):
        self._actions[action.key] = action

    def get_actions(self) -> List[ActionDefinition]:
        return list(self._actions.values())

    def get_action(self, key: str) -> Optional[ActionDefinition]:
        return self._actions.get(key)

    def add_before_request_hook(self, hook: Callable):
        """Adiciona hook async chamado com (request, context) antes de cada requisição"""
        self._before_request_hooks.append(hook)

    def add_after_request_hook(self, hook: Callable):
        """Adiciona hook async chamado com (response, context) após cada resposta"""
        self._after_request_hooks.append(hook)

    async def execute_action(
        self,
        action_key: str,
        parameters: Dict[str, Any] = None,
        context: Any = None,
    ) -> Any:
        """
        Executa uma action com um cliente autenticado novo.

        Args:
            action_key: Chave da action
            parameters: Parâmetros da action
            context: Contexto extra repassado ao handler

        Returns:
            O retorno do handler
        """
        action = self.get_action(action_key)
        if not action:
            raise ValueError(f"Action '{action_key}' not found in app '{self.key}'")

        http_client = None
        if action.requires_connection:
            http_client = self.create_http_client()

        try:
            return await action.handler(
                http_client=http_client,
                parameters=parameters or {},
                context=context,
            )
        finally:
            if http_client:
                await http_client.aclose()

    def create_http_client(self, timeout: float = None) -> httpx.AsyncClient:
        """
        Cria cliente HTTP configurado com URL base e headers de autenticação.

        Os hooks de request rodam em cada hop, inclusive nos redirects.

        Args:
            timeout: Timeout em segundos (padrão: timeout do app)

        Returns:
            httpx.AsyncClient; quem chama é responsável por fechar
        """
        event_hooks = {}
        if self._before_request_hooks or self._after_request_hooks:
            hook_context = {'app_key': self.key}

            if self._before_request_hooks:
                async def request_hook(request):
                    for hook in self._before_request_hooks:
                        await hook(request, hook_context)
                event_hooks['request'] = [request_hook]

            if self._after_request_hooks:
                async def response_hook(response):
                    for hook in self._after_request_hooks:
                        await hook(response, hook_context)
                event_hooks['response'] = [response_hook]

        kwargs = {}
        if self._transport is not None:
            kwargs['transport'] = self._transport

        return httpx.AsyncClient(
            base_url=self.base_url or '',
            headers=self.get_api_headers(),
            timeout=timeout if timeout is not None else self._timeout,
            follow_redirects=True,
            event_hooks=event_hooks if event_hooks else None,
            **kwargs,
        )

    def to_dict(self) -> Dict[str, Any]:
        """Converte app para dicionário"""
        return {
            'key': self.key,
            'name': self.name,
            'description': self.description,
            'documentation_url': self.documentation_url,
            'base_url': self.base_url,
            'actions': [a.to_dict() for a in self.get_actions()],
        }
