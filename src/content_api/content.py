"""Content operations for the Confluence REST API.

Each operation validates its input, builds the resource path and payload,
issues exactly one request through the transport, and hydrates the JSON
response into typed entities. Nothing is cached between calls.

See https://docs.atlassian.com/atlassian-confluence/REST/6.6.0/#content
"""

import logging
from typing import Any, Dict, Mapping, Optional

from requests import Response

from src.confluence_client.auth import Authenticator
from src.confluence_client.errors import ContentNotFoundError, ValidationError
from src.confluence_client.transport import ConfluenceTransport, decode_json
from src.content_api.uri import build_resource_path
from src.models.content import AbstractContent, Content
from src.models.content_body import ContentBody, Representation
from src.models.content_search_result import ContentSearchResult
from src.models.hydration import HydrationTarget, hydrate

logger = logging.getLogger(__name__)

DEFAULT_EXPAND = "space,version,body.storage,container"

ALLOWED_SEARCH_PARAMETERS = ("title", "spaceKey", "type", "id")


def build_content_payload(content: AbstractContent) -> Dict[str, Any]:
    """Build the request body shared by create and update.

    ``ancestors`` is only included when the content has ancestor ids and
    ``container`` only when a container id is set.
    """
    data: Dict[str, Any] = {
        "type": content.type,
        "title": content.title,
        "space": {"key": content.space_key},
        "body": {
            "storage": {
                "value": content.body,
                "representation": "storage",
            },
        },
    }

    if content.ancestors:
        data["ancestors"] = [{"id": ancestor_id} for ancestor_id in content.ancestors]

    # attach content to content, e.g. a comment to a page
    if content.container_id is not None:
        data["container"] = {
            "id": content.container_id,
            "type": content.container_type,
        }

    return data


def _pagination(start: Optional[int], limit: Optional[int]) -> Dict[str, int]:
    params = {}
    if start is not None:
        params["start"] = start
    if limit is not None:
        params["limit"] = limit
    return params


class ContentAPI:
    """Operation surface for Confluence content.

    Example:
        >>> api = ContentAPI.from_env()
        >>> page = api.get(123456)
        >>> page.body = "<p>Updated</p>"
        >>> page = api.update(page)
    """

    def __init__(self, transport: ConfluenceTransport):
        """Initialize with a transport.

        Args:
            transport: Any object exposing get/post/put/delete like
                ConfluenceTransport
        """
        self._transport = transport

    @classmethod
    def from_env(
        cls,
        authenticator: Optional[Authenticator] = None,
        timeout: Optional[int] = None,
    ) -> "ContentAPI":
        """Create a ContentAPI from environment credentials and settings.

        Args:
            authenticator: Authenticator to use (default: a new Authenticator)
            timeout: Request timeout override in seconds
        """
        authenticator = authenticator or Authenticator()
        settings = authenticator.get_settings()
        transport = ConfluenceTransport(
            authenticator,
            timeout=timeout if timeout is not None else settings.timeout,
            cloud=settings.cloud,
        )
        return cls(transport)

    @staticmethod
    def _hydrate_response(response: Response, target: HydrationTarget) -> Any:
        return hydrate(decode_json(response), target)

    @staticmethod
    def _require_id(content: AbstractContent, message: str) -> int:
        if not content.is_persisted:
            raise ValidationError(message, field="id")
        return content.id

    def get(self, content_id: int) -> Optional[Content]:
        """Fetch content by id.

        Returns:
            The hydrated content, or None if the server reports 404

        Raises:
            ValidationError: If content_id is not an integer
            TransportError: On any other transport failure
            DecodingError: If the response is not JSON
            HydrationError: If the response is not a content payload
        """
        if isinstance(content_id, bool) or not isinstance(content_id, int):
            raise ValidationError(
                f"Content id must be an integer, got {content_id!r}",
                field="id",
            )

        try:
            response = self._transport.get(
                build_resource_path("content", content_id),
                {"expand": DEFAULT_EXPAND},
            )
        except ContentNotFoundError:
            logger.debug(f"Content {content_id} not found")
            return None
        return self._hydrate_response(response, AbstractContent)

    def find(
        self,
        search_parameters: Mapping[str, Any],
        start: Optional[int] = None,
        limit: Optional[int] = None,
    ) -> ContentSearchResult:
        """Search content by title, spaceKey, type and/or id.

        Keys outside ALLOWED_SEARCH_PARAMETERS are dropped, not rejected.
        """
        query: Dict[str, Any] = {
            key: value
            for key, value in search_parameters.items()
            if key in ALLOWED_SEARCH_PARAMETERS
        }
        dropped = sorted(set(search_parameters) - set(query))
        if dropped:
            logger.debug(f"Ignoring unsupported search parameters: {', '.join(dropped)}")

        query.update(_pagination(start, limit))
        query["expand"] = DEFAULT_EXPAND

        response = self._transport.get(build_resource_path("content"), query)
        return self._hydrate_response(response, ContentSearchResult)

    def create(self, content: AbstractContent) -> Content:
        """Create new content; the server assigns the id and version 1.

        Raises:
            ValidationError: If the content already has an id
        """
        if content.is_persisted:
            raise ValidationError(
                "Only content not already saved can be created, id must be absent. "
                "Use update() for existing content.",
                field="id",
            )

        data = build_content_payload(content)
        logger.info(f"Creating {content.type} '{content.title}' in space {content.space_key}")
        response = self._transport.post(build_resource_path("content"), {}, data)
        return self._hydrate_response(response, AbstractContent)

    def update(self, content: AbstractContent) -> Content:
        """Update existing content, sending version + 1.

        A stale version is rejected by the server and surfaces as a
        VersionConflictError; nothing is retried here.

        Raises:
            ValidationError: If the content has no id
        """
        content_id = self._require_id(
            content,
            "Content can only be updated once it has been created, id must be present. "
            "Use create() for new content.",
        )

        data = build_content_payload(content)
        data["id"] = content_id
        data["version"] = {"number": content.next_version}

        logger.info(f"Updating {content.type} {content_id} to version {content.next_version}")
        response = self._transport.put(build_resource_path("content", content_id), data)
        return self._hydrate_response(response, AbstractContent)

    def delete(self, content: AbstractContent) -> Response:
        """Delete content and return the raw transport response.

        Raises:
            ValidationError: If the content has no id
        """
        content_id = self._require_id(content, "Content must already be saved to be deleted, id must be present.")
        logger.info(f"Deleting {content.type} {content_id}")
        return self._transport.delete(build_resource_path("content", content_id))

    def children(
        self,
        content: AbstractContent,
        content_type: Optional[str] = None,
        start: Optional[int] = None,
        limit: Optional[int] = None,
    ) -> ContentSearchResult:
        """Fetch the direct children of content, optionally of one type."""
        content_id = self._require_id(content, "Content must be saved to list its children, id must be present.")
        params: Dict[str, Any] = {"expand": DEFAULT_EXPAND}
        params.update(_pagination(start, limit))
        response = self._transport.get(
            build_resource_path("content", content_id, "child", content_type),
            params,
        )
        return self._hydrate_response(response, ContentSearchResult)

    def descendants(
        self,
        content: AbstractContent,
        content_type: Optional[str] = None,
        start: Optional[int] = None,
        limit: Optional[int] = None,
    ) -> ContentSearchResult:
        """Fetch all descendants of content, optionally of one type.

        No expansion is requested, so space, version and body are not populated.
        """
        content_id = self._require_id(content, "Content must be saved to list its descendants, id must be present.")
        response = self._transport.get(
            build_resource_path("content", content_id, "descendant", content_type),
            _pagination(start, limit),
        )
        return self._hydrate_response(response, ContentSearchResult)

    def convert(
        self,
        body: ContentBody,
        to: str = "view",
        context: Optional[AbstractContent] = None,
    ) -> ContentBody:
        """Convert a content body to another representation.

        Args:
            body: Body to convert
            to: Target representation, one of SUPPORTED_REPRESENTATIONS
            context: Content whose id and space key give the conversion context

        Raises:
            ValidationError: If the target representation is not supported

        See https://docs.atlassian.com/atlassian-confluence/REST/6.6.0/#contentbody/convert/{to}-convert
        """
        if not ContentBody.is_supported(to):
            raise ValidationError(
                f"Conversion target '{to}' is not supported",
                field="to",
            )
        if isinstance(to, Representation):
            to = to.value

        params: Dict[str, Any] = {}
        if context is not None and context.id is not None:
            params["pageIdContext"] = context.id
        if context is not None and context.space_key is not None:
            params["spaceKeyContext"] = context.space_key

        data = {
            "representation": body.representation,
            "value": body.value,
        }

        response = self._transport.post(
            build_resource_path("contentbody", "convert", to),
            params,
            data,
        )
        return self._hydrate_response(response, ContentBody)
