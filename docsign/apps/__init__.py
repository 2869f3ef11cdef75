"""
Remote-service apps.
"""

from .base import BaseApp, ActionDefinition

__all__ = ['BaseApp', 'ActionDefinition']
