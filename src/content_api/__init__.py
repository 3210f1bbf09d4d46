"""Typed operations over Confluence content.

This package maps content entities onto the Confluence REST resources
(content CRUD, hierarchy traversal, body conversion).
"""

from .content import ContentAPI, DEFAULT_EXPAND, ALLOWED_SEARCH_PARAMETERS, build_content_payload
from .uri import build_resource_path

__all__ = [
    'ContentAPI',
    'DEFAULT_EXPAND',
    'ALLOWED_SEARCH_PARAMETERS',
    'build_content_payload',
    'build_resource_path',
]
