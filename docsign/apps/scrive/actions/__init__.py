"""
Scrive Actions.
"""

from . import create_from_template
from . import update_document
from . import start_document

__all__ = [
    'create_from_template',
    'update_document',
    'start_document',
]
