"""Data models for Confluence content, bodies and search results."""

from src.models.content import (
    CONTENT_TYPE_ATTACHMENT,
    CONTENT_TYPE_COMMENT,
    CONTENT_TYPE_GLOBAL,
    CONTENT_TYPE_PAGE,
    AbstractContent,
    Attachment,
    Comment,
    Content,
    GlobalContent,
    Page,
)
from src.models.content_body import ContentBody, Representation, SUPPORTED_REPRESENTATIONS
from src.models.content_search_result import ContentSearchResult
from src.models.hydration import (
    content_body_from_dict,
    content_from_dict,
    hydrate,
    search_result_from_dict,
)

__all__ = [
    'CONTENT_TYPE_ATTACHMENT',
    'CONTENT_TYPE_COMMENT',
    'CONTENT_TYPE_GLOBAL',
    'CONTENT_TYPE_PAGE',
    'AbstractContent',
    'Attachment',
    'Comment',
    'Content',
    'GlobalContent',
    'Page',
    'ContentBody',
    'Representation',
    'SUPPORTED_REPRESENTATIONS',
    'ContentSearchResult',
    'content_body_from_dict',
    'content_from_dict',
    'hydrate',
    'search_result_from_dict',
]
