"""
Create From Template Action - Cria um novo documento a partir do template fixo.
"""

from typing import Any, Dict
import logging

import httpx

from docsign.apps.utils import parse_json_response
from docsign.exceptions import MalformedResponseError

logger = logging.getLogger(__name__)

# Template único de onde todo documento parte
TEMPLATE_ID = '8222115557379372352'


async def run(
    http_client: httpx.AsyncClient,
    parameters: Dict[str, Any] = None,
    context: Any = None,
) -> str:
    """
    Cria um documento a partir do template.

    Args:
        http_client: Cliente HTTP configurado
        parameters: não utilizado
        context: não utilizado

    Returns:
        ID do novo documento
    """
    response = await http_client.post(f'/api/v2/documents/newfromtemplate/{TEMPLATE_ID}')
    data = parse_json_response(response)

    document_id = data.get('id') if isinstance(data, dict) else None
    if not document_id:
        raise MalformedResponseError("Create response has no document 'id'", payload=data)

    logger.info(f"Created document {document_id} from template {TEMPLATE_ID}")
    return str(document_id)
