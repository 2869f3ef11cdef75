"""
Update Document Action - Define título e partes de um documento.
"""

from typing import Any, Dict
import logging

import httpx

from docsign.apps.utils import parse_json_response
from docsign.apps.scrive.models import Document
from docsign.apps.scrive.parties import DocumentSpec

logger = logging.getLogger(__name__)


async def run(
    http_client: httpx.AsyncClient,
    parameters: Dict[str, Any],
    context: Any = None,
) -> Document:
    """
    Envia a definição do documento para o endpoint de update.

    A definição vai como string JSON em um único campo multipart
    chamado 'document'.

    Args:
        http_client: Cliente HTTP configurado
        parameters: {
            'document_id': 'id do documento no Scrive',
            'document': DocumentSpec
        }
        context: não utilizado

    Returns:
        Document atualizado
    """
    document_id = parameters.get('document_id')
    spec: DocumentSpec = parameters.get('document')

    if not document_id:
        raise ValueError("document_id is required")
    if spec is None:
        raise ValueError("document is required")

    response = await http_client.post(
        f'/api/v2/documents/{document_id}/update',
        files={'document': (None, spec.to_json().encode('utf-8'))},
    )
    data = parse_json_response(response, document_id)

    document = Document.from_dict(data, document_id)
    logger.info(f"Updated document {document_id} with {len(spec.parties)} parties")
    return document
