"""
App Utilities - Tratamento de respostas compartilhado pelas actions.
"""

from typing import Any
import logging

import httpx

from docsign.exceptions import MalformedResponseError, ScriveAPIError

logger = logging.getLogger(__name__)


def parse_json_response(response: httpx.Response, document_id: str = None) -> Any:
    """
    Verifica o status da resposta e decodifica o corpo JSON.

    Args:
        response: Resposta do serviço remoto
        document_id: Documento da chamada (para contexto do erro)

    Returns:
        Corpo JSON decodificado

    Raises:
        ScriveAPIError: Status diferente de sucesso
        MalformedResponseError: Corpo não é JSON válido
    """
    try:
        response.raise_for_status()
    except httpx.HTTPStatusError as e:
        error_body = response.text
        logger.error(f"Scrive request failed: {response.request.method} {response.request.url} -> {response.status_code}")
        if error_body:
            logger.error(f"Response body: {error_body}")
        raise ScriveAPIError(
            f"Request failed with status {response.status_code}",
            status_code=response.status_code,
            response_body=error_body,
            document_id=document_id,
        ) from e

    try:
        return response.json()
    except ValueError as e:
        raise MalformedResponseError(
            "Response body is not valid JSON",
            payload=response.text,
            document_id=document_id,
        ) from e
