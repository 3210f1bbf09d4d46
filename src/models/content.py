"""Confluence content data models.

Content is a closed set of variants, one dataclass per Confluence content
type. The variants share the base fields of AbstractContent and each fixes
its own type tag, so ``Content`` below is the full tagged union.
"""

from dataclasses import dataclass, field
from typing import ClassVar, List, Optional, Union

from src.confluence_client.errors import ValidationError

CONTENT_TYPE_PAGE = "page"
CONTENT_TYPE_COMMENT = "comment"
CONTENT_TYPE_ATTACHMENT = "attachment"
CONTENT_TYPE_GLOBAL = "global"


@dataclass
class AbstractContent:
    """Fields shared by every Confluence content type.

    Attributes:
        id: Content id, None until the content has been created
        title: Content title
        space_key: Space key where the content resides (e.g., "TEAM")
        body: Content in Confluence storage format (XHTML)
        version: Current version number (required for updates)
        ancestors: Ancestor content ids, root first
        container_id: Id of the content this one is attached to
        container_type: Type of the container (e.g., "page")
    """

    CONTENT_TYPE: ClassVar[str] = ""

    title: str
    id: Optional[int] = None
    space_key: Optional[str] = None
    body: str = ""
    version: int = 0
    ancestors: List[int] = field(default_factory=list)
    container_id: Optional[int] = None
    container_type: Optional[str] = None

    def __post_init__(self) -> None:
        if self.id is not None and (isinstance(self.id, bool) or not isinstance(self.id, int)):
            raise ValidationError(f"Content id must be an integer, got {self.id!r}", field="id")
        if self.version < 0:
            raise ValidationError(f"Version must be non-negative, got {self.version}", field="version")

    @property
    def type(self) -> str:
        return self.CONTENT_TYPE

    @property
    def is_persisted(self) -> bool:
        """True once the content has a server-assigned id."""
        return self.id is not None

    @property
    def next_version(self) -> int:
        """Version number an update of this content must carry."""
        return self.version + 1


@dataclass
class Page(AbstractContent):
    """A Confluence page.

    Attributes:
        status: Page status as reported by the server (e.g., "current", "draft")
    """

    CONTENT_TYPE: ClassVar[str] = CONTENT_TYPE_PAGE

    status: Optional[str] = None


@dataclass
class Comment(AbstractContent):
    """A comment attached to other content through its container.

    Attributes:
        location: Where the comment is shown ("footer", "inline", "resolved")
    """

    CONTENT_TYPE: ClassVar[str] = CONTENT_TYPE_COMMENT

    location: Optional[str] = None


@dataclass
class Attachment(AbstractContent):
    """A file attached to other content.

    Attributes:
        media_type: MIME type of the file
        file_size: File size in bytes
        download_link: Server-relative download path
    """

    CONTENT_TYPE: ClassVar[str] = CONTENT_TYPE_ATTACHMENT

    media_type: Optional[str] = None
    file_size: Optional[int] = None
    download_link: Optional[str] = None


@dataclass
class GlobalContent(AbstractContent):
    """Content of the "global" type."""

    CONTENT_TYPE: ClassVar[str] = CONTENT_TYPE_GLOBAL


Content = Union[Page, Comment, Attachment, GlobalContent]

CONTENT_TYPES = (
    CONTENT_TYPE_PAGE,
    CONTENT_TYPE_COMMENT,
    CONTENT_TYPE_ATTACHMENT,
    CONTENT_TYPE_GLOBAL,
)
