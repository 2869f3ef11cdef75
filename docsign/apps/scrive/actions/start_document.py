"""
Start Document Action - Coloca o documento em estado de assinatura.
"""

from typing import Any, Dict
import logging

import httpx

from docsign.apps.utils import parse_json_response
from docsign.apps.scrive.models import Document

logger = logging.getLogger(__name__)


async def run(
    http_client: httpx.AsyncClient,
    parameters: Dict[str, Any],
    context: Any = None,
) -> Document:
    """
    Inicia o processo de assinatura.

    Args:
        http_client: Cliente HTTP configurado
        parameters: {'document_id': 'id do documento no Scrive'}
        context: não utilizado

    Returns:
        Document iniciado; as partes já trazem api_delivery_url
    """
    document_id = parameters.get('document_id')
    if not document_id:
        raise ValueError("document_id is required")

    response = await http_client.post(f'/api/v2/documents/{document_id}/start')
    data = parse_json_response(response, document_id)

    document = Document.from_dict(data, document_id)
    logger.info(f"Started document {document_id}")
    return document
