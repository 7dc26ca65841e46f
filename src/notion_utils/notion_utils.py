"""
Notion API Utilities.

Wraps an authenticated Notion client with read helpers that are easier to
consume than the raw API responses:

    get_database_records: pages of a database (first result page only)
    get_all_database_records: pages of a database, following cursors
    get_database_schema: property descriptors of a database
    get_page_by_id: a single page
    get_page_property: plain value of a page property, with fallback

Property Extraction:
    Notion exposes many property types behind a uniform ``{"type": ...}``
    shape. Only title, rich_text and created_time are unwrapped here.
    A page without a ``properties`` object is an error the caller must see
    (MissingPropertiesError). Any other extraction problem (unknown property
    name, unsupported type, malformed value) is logged and the caller's
    fallback is returned.

Error Handling:
    Errors raised by the Notion client itself (APIResponseError, timeouts,
    transport errors) are not caught and reach the caller unchanged.
"""
import logging
from typing import Any, Dict, List, Optional

from notion_client import Client

from config import read_secret_file
from diagnostics import ContextLogger

logger = logging.getLogger(__name__)

SUPPORTED_PROPERTY_TYPES = frozenset({"title", "rich_text", "created_time"})
NO_TITLE_LABEL = "No title found"
MAX_QUERY_PAGES = 20


class NotionUtilsError(Exception):
    """Base class for errors raised by the Notion utilities."""
    pass


class MissingPropertiesError(NotionUtilsError):
    """Raised when a page has no "properties" object (partial page)."""
    pass


class UnsupportedPropertyTypeError(NotionUtilsError):
    """Raised when a property's type is not one of SUPPORTED_PROPERTY_TYPES.

    get_page_property catches it and returns the fallback, so callers only
    see it in the logs.
    """

    def __init__(self, message: str, property_type: Any = None):
        super().__init__(message)
        self.property_type = property_type


def _page_label(page: Dict[str, Any]) -> str:
    """Best-effort page title used in log context only."""
    try:
        return page["properties"]["title"]["rich_text"][0]["plain_text"]
    except (KeyError, IndexError, TypeError):
        return NO_TITLE_LABEL


def _first_plain_text(fragments: List[Dict[str, Any]]) -> Optional[str]:
    if not fragments:
        return None
    return fragments[0]["plain_text"]


class NotionUtils:
    """
    Read helpers around an already-authorized Notion client.

    The instance holds no state besides the client, so it is safe to share
    between threads as long as the client is.

    Attributes:
        client: Notion client (``notion_client.Client`` or compatible)
    """

    def __init__(self, client: Client):
        self.client = client

    @classmethod
    def from_config(cls, config: Dict[str, Any]) -> "NotionUtils":
        """
        Create NotionUtils with a Notion client built from configuration.

        The integration token is read from ``notion.token_file`` (Docker
        secret) when it exists, otherwise from ``notion.token``.

        Args:
            config: Configuration dictionary with a ``notion`` section

        Returns:
            NotionUtils wrapping a new authenticated client

        Raises:
            ValueError: If no token is configured
        """
        notion_config = config.get("notion", {}) or {}

        token = None
        token_file = notion_config.get("token_file")
        if token_file:
            token = read_secret_file(token_file)
        if not token:
            token = notion_config.get("token")
        if not token:
            raise ValueError("Notion integration token not configured (notion.token_file or notion.token)")

        client_options: Dict[str, Any] = {"auth": token}
        if notion_config.get("timeout_ms"):
            client_options["timeout_ms"] = notion_config["timeout_ms"]

        logger.info("Notion client initialized from configuration")
        return cls(Client(**client_options))

    def get_database_records(self, database_id: str) -> List[Dict[str, Any]]:
        """
        Query the pages of a database.

        Only the first result page returned by the API is surfaced; use
        get_all_database_records to follow pagination cursors.

        Args:
            database_id: Notion database ID

        Returns:
            List of page objects
        """
        database = self.client.databases.query(database_id=database_id)
        return database["results"]

    def get_all_database_records(self, database_id: str, max_pages: int = MAX_QUERY_PAGES) -> List[Dict[str, Any]]:
        """
        Query the pages of a database, following ``next_cursor``.

        Args:
            database_id: Notion database ID
            max_pages: Maximum number of API result pages to request

        Returns:
            List of page objects from every fetched result page
        """
        records: List[Dict[str, Any]] = []
        query: Dict[str, Any] = {"database_id": database_id}

        for _ in range(max_pages):
            response = self.client.databases.query(**query)
            records.extend(response["results"])

            if not response.get("has_more") or not response.get("next_cursor"):
                return records
            query["start_cursor"] = response["next_cursor"]

        logger.warning(f"Reached maximum page limit ({max_pages}) when querying database {database_id}")
        return records

    def get_database_schema(self, database_id: str) -> Dict[str, Any]:
        """
        Retrieve the property descriptors of a database.

        Args:
            database_id: Notion database ID

        Returns:
            Mapping of property name to property descriptor, as returned by Notion
        """
        database = self.client.databases.retrieve(database_id=database_id)
        return database["properties"]

    def get_page_by_id(self, page_id: str) -> Dict[str, Any]:
        """Retrieve a single page by ID."""
        return self.client.pages.retrieve(page_id=page_id)

    def get_page_property(self, page: Dict[str, Any], property_name: str, fallback: Any = None) -> Any:
        """
        Extract the plain value of a page property.

        Supported property types:
            title, rich_text: plain text of the first fragment (None if empty)
            created_time: ISO-8601 timestamp string

        Args:
            page: Page object (full or partial)
            property_name: Name of the property to read
            fallback: Value returned when the property can't be extracted

        Returns:
            The property value, or ``fallback``

        Raises:
            MissingPropertiesError: If the page has no "properties" object

        Example:
            >>> page = {"id": "p1", "properties": {"Name": {"type": "title", "title": [{"plain_text": "Hello"}]}}}
            >>> nu.get_page_property(page, "Name")
            'Hello'
        """
        log = ContextLogger(
            f"notionUtils.get_page_property - Page: {_page_label(page)} - "
            f"ID: {page.get('id')} - Property: {property_name}",
            logger
        )

        properties = page.get("properties")
        if not isinstance(properties, dict):
            message = log.error('This page has no "properties" object')
            raise MissingPropertiesError(message)

        try:
            prop = properties[property_name]
            property_type = prop["type"]

            if property_type == "title":
                return _first_plain_text(prop["title"])
            elif property_type == "rich_text":
                return _first_plain_text(prop["rich_text"])
            elif property_type == "created_time":
                return prop["created_time"]
            else:
                message = log.error(f'Unallowed property type, type "{property_type}"')
                raise UnsupportedPropertyTypeError(message, property_type)

        except Exception as e:
            log.warning("Failed to get property! Returning fallback!", repr(e))
            return fallback


def create_notion_utils(client: Client) -> NotionUtils:
    """Wrap an already-authorized Notion client.

    Example:
        >>> import notion_client
        >>> nu = create_notion_utils(notion_client.Client(auth=token))
        >>> nu.get_page_by_id(page_id)
    """
    return NotionUtils(client)
