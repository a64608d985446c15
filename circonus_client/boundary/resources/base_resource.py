"""
Base resource binding for Circonus API endpoints.

Provides generic Fetch, Create, Update, Delete and Search operations that
can be inherited by resource-specific bindings. Each operation validates the
CID, dispatches through the shared APIClient, and parses the JSON response
into typed records. Transport and parse failures are re-raised with
operation context.

Dependencies: pydantic, circonus_client.boundary.http
System role: Foundation for all resource bindings
"""

import logging
from typing import Generic, Optional, TypeVar

from pydantic import TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from circonus_client.boundary.http.api_client import APIClient
from circonus_client.core.cid import match_cid, normalize_cid
from circonus_client.core.exceptions import (
    APIError,
    InvalidCIDError,
    InvalidConfigError,
    ResourceParseError,
    ResourceRequestError,
)
from circonus_client.models.base import ResourceModel
from circonus_client.models.search import (
    SearchFilter,
    SearchQuery,
    build_search_params,
    encode_search_params,
)
from circonus_client.observability.log_utils import log_with_context, safe_log_value

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=ResourceModel)


class BaseResourceClient(Generic[ModelT]):
    """
    Generic binding for one API resource type.

    Subclasses specify the model class, URL prefix, CID pattern and resource
    name used in error messages.

    Type Parameters:
        ModelT: Pydantic record class inheriting from ResourceModel

    Attributes:
        model: Record class responses are parsed into
        prefix: Collection path, e.g. "/outlier_report"
        cid_regex: Pattern a full CID must match
        name: Singular resource name, e.g. "outlier report"
        plural: Plural resource name, e.g. "outlier reports"
    """

    def __init__(
        self,
        api: APIClient,
        model: type[ModelT],
        prefix: str,
        cid_regex: str,
        name: str,
        plural: str | None = None,
    ) -> None:
        """
        Initialize binding with the shared client and resource metadata.

        Args:
            api: Shared HTTP client
            model: Record class for this resource
            prefix: Collection path
            cid_regex: Full-CID pattern
            name: Singular resource name
            plural: Plural resource name (defaults to name + "s")
        """
        self.api = api
        self.model = model
        self.prefix = prefix
        self.cid_regex = cid_regex
        self.name = name
        self.plural = plural or f"{name}s"
        # A null collection body means no records
        self._list_adapter = TypeAdapter(Optional[list[model]])

    def normalize_cid(self, cid: str | None) -> str:
        """
        Prefix a bare ID with the collection path and validate it.

        Args:
            cid: Full CID or bare ID

        Returns:
            str: Full CID

        Raises:
            InvalidCIDError: If cid is None/empty or does not match cid_regex
        """
        return normalize_cid(cid, self.prefix, self.cid_regex, self.name)

    def _parse_one(self, raw: bytes) -> ModelT:
        try:
            return self.model.model_validate_json(raw)
        except PydanticValidationError as e:
            raise ResourceParseError(
                f"parsing {self.name}: {e}", resource=self.name, operation="parse"
            ) from e

    def _parse_many(self, raw: bytes) -> list[ModelT]:
        try:
            return self._list_adapter.validate_json(raw) or []
        except PydanticValidationError as e:
            raise ResourceParseError(
                f"parsing {self.plural}: {e}", resource=self.name, operation="parse"
            ) from e

    def _request_error(self, context: str, operation: str, exc: APIError) -> ResourceRequestError:
        log_with_context(
            logger,
            logging.ERROR,
            f"{__name__}:{operation} - {context}: {exc.message}",
            resource=self.name,
            **exc.details,
        )
        return ResourceRequestError(
            f"{context}: {exc.message}",
            resource=self.name,
            operation=operation,
            details=dict(exc.details),
        )

    def fetch(self, cid: str | None) -> ModelT:
        """
        Retrieve a single record by CID.

        Args:
            cid: Full CID or bare ID

        Returns:
            Parsed record

        Raises:
            InvalidCIDError: Invalid CID (no request sent)
            ResourceRequestError: API or transport failure
            ResourceParseError: Response is not a valid record
        """
        resource_cid = self.normalize_cid(cid)

        try:
            result = self.api.get(resource_cid)
        except APIError as e:
            raise self._request_error(f"fetching {self.name}", "fetch", e) from e

        if self.api.debug:
            logger.debug(f"{__name__}:fetch - received JSON: {safe_log_value(result)}")

        return self._parse_one(result)

    def fetch_all(self) -> list[ModelT]:
        """
        Retrieve all records available to the API token.

        Returns:
            list of parsed records

        Raises:
            ResourceRequestError: API or transport failure
            ResourceParseError: Response is not a JSON array of records
        """
        try:
            result = self.api.get(self.prefix)
        except APIError as e:
            raise self._request_error(f"fetching {self.plural}", "fetch_all", e) from e

        return self._parse_many(result)

    def create(self, record: ModelT | None) -> ModelT:
        """
        Create a new record. The server assigns the CID.

        Args:
            record: Record to create

        Returns:
            Created record as returned by the API

        Raises:
            InvalidConfigError: If record is None
            ResourceRequestError: API or transport failure
            ResourceParseError: Response is not a valid record
        """
        if record is None:
            raise InvalidConfigError(f"invalid {self.name} config (nil)")

        body = record.to_json()
        if self.api.debug:
            logger.debug(f"{__name__}:create - sending JSON: {safe_log_value(body)}")

        try:
            result = self.api.post(self.prefix, body)
        except APIError as e:
            raise self._request_error(f"creating {self.name}", "create", e) from e

        return self._parse_one(result)

    def update(self, record: ModelT | None) -> ModelT:
        """
        Update an existing record in place.

        The record's CID must already be a full CID; bare IDs are not prefixed.

        Args:
            record: Record carrying its CID

        Returns:
            Updated record as returned by the API

        Raises:
            InvalidConfigError: If record is None
            InvalidCIDError: If record.cid does not match cid_regex
            ResourceRequestError: API or transport failure
            ResourceParseError: Response is not a valid record
        """
        if record is None:
            raise InvalidConfigError(f"invalid {self.name} config (nil)")

        resource_cid = record.cid or ""
        if not match_cid(resource_cid, self.cid_regex):
            raise InvalidCIDError(f"invalid {self.name} CID ({resource_cid})", cid=resource_cid)

        body = record.to_json()
        if self.api.debug:
            logger.debug(f"{__name__}:update - sending JSON: {safe_log_value(body)}")

        try:
            result = self.api.put(resource_cid, body)
        except APIError as e:
            raise self._request_error(f"updating {self.name}", "update", e) from e

        return self._parse_one(result)

    def delete(self, record: ModelT | None) -> bool:
        """
        Delete the given record.

        Args:
            record: Record carrying its CID

        Returns:
            True on success

        Raises:
            InvalidConfigError: If record is None
        """
        if record is None:
            raise InvalidConfigError(f"invalid {self.name} config (nil)")
        return self.delete_by_cid(record.cid)

    def delete_by_cid(self, cid: str | None) -> bool:
        """
        Delete a record by CID.

        Args:
            cid: Full CID or bare ID

        Returns:
            True on success

        Raises:
            InvalidCIDError: Invalid CID (no request sent)
            ResourceRequestError: API or transport failure
        """
        resource_cid = self.normalize_cid(cid)

        try:
            self.api.delete(resource_cid)
        except APIError as e:
            raise self._request_error(f"deleting {self.name}", "delete", e) from e

        logger.info(f"{__name__}:delete_by_cid - deleted {resource_cid}")
        return True

    def search(
        self,
        query: SearchQuery | None = None,
        filters: SearchFilter | None = None,
    ) -> list[ModelT]:
        """
        Search records by free text and/or attribute filters.

        With neither criterion, all records are returned.

        Args:
            query: Free-text search
            filters: Filter name to values (each value sent as its own parameter)

        Returns:
            list of matching records

        Raises:
            ResourceRequestError: API or transport failure
            ResourceParseError: Response is not a JSON array of records
        """
        params = build_search_params(query, filters)
        if not params:
            return self.fetch_all()

        request_path = f"{self.prefix}?{encode_search_params(params)}"

        try:
            result = self.api.get(request_path)
        except APIError as e:
            raise self._request_error(f"searching {self.plural}", "search", e) from e

        return self._parse_many(result)
