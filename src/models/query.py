"""
Customer list query and page models.

CustomerQuery is rebuilt per request from the dashboard's query string
(search, segment, page, pageSize, sortBy, sortOrder) and serialised back for
deep links. CustomerPage is what the list endpoint returns.
"""

from enum import Enum
from typing import Any, Dict, Mapping, Optional, Tuple

from pydantic import Field, ValidationError, field_validator

from models.customer import CamelModel, Customer, HealthSegment
from utils.error_handling import InvalidArgumentError
from utils.settings import RuntimeSettings
from utils.validators import is_blank, parse_int

DEFAULT_PAGE_SIZE = 20

# Fields that narrow or reorder the result set; changing one resets the page.
_FILTER_FIELDS = ("search", "segment", "page_size", "sort_by", "sort_order")


class SortField(str, Enum):
    """Sortable columns, keyed by their query-string names."""

    NAME = "name"
    MRR = "mrr"
    LAST_ACTIVE = "lastActive"
    HEALTH_SCORE = "healthScore"


class SortOrder(str, Enum):
    ASC = "asc"
    DESC = "desc"


class CustomerQuery(CamelModel):
    """Filter, sort and pagination request for the customer list."""

    search: str = ""
    segment: Optional[HealthSegment] = None
    page: int = Field(default=1, ge=1)
    page_size: int = Field(default=DEFAULT_PAGE_SIZE, gt=0)
    sort_by: SortField = SortField.NAME
    sort_order: SortOrder = SortOrder.ASC

    @field_validator("search", mode="before")
    @classmethod
    def normalize_search(cls, value: Any) -> str:
        return "" if value is None else str(value)

    @field_validator("segment", mode="before")
    @classmethod
    def blank_segment_means_all(cls, value: Any) -> Any:
        return None if is_blank(value) else value

    @classmethod
    def from_query_params(
        cls,
        params: Optional[Mapping[str, Any]],
        settings: Optional[RuntimeSettings] = None,
    ) -> "CustomerQuery":
        """
        Build a query from API Gateway query-string parameters.

        Blank values fall back to defaults. Anything else that does not
        validate raises InvalidArgumentError; nothing is silently clamped.
        """
        params = params or {}
        settings = settings or RuntimeSettings.from_environment()

        page = parse_int(params.get("page"), "page", default=1)
        page_size = parse_int(
            params.get("pageSize"), "pageSize", default=settings.default_page_size
        )
        if page_size is not None and page_size > settings.max_page_size:
            raise InvalidArgumentError(
                f"pageSize must not exceed {settings.max_page_size}"
            )

        values: Dict[str, Any] = {
            "search": params.get("search") or "",
            "segment": params.get("segment"),
            "page": page,
            "page_size": page_size,
        }
        if not is_blank(params.get("sortBy")):
            values["sort_by"] = params["sortBy"]
        if not is_blank(params.get("sortOrder")):
            values["sort_order"] = str(params["sortOrder"]).lower()

        try:
            return cls.model_validate(values)
        except ValidationError as exc:
            raise InvalidArgumentError(_describe(exc)) from exc

    def to_query_params(
        self, settings: Optional[RuntimeSettings] = None
    ) -> Dict[str, str]:
        """
        Serialise for deep links, leaving out values equal to their defaults.

        pageSize is compared with the same settings from_query_params reads,
        so an omitted pageSize parses back to this query's page size.
        """
        settings = settings or RuntimeSettings.from_environment()
        params: Dict[str, str] = {}
        if self.search:
            params["search"] = self.search
        if self.segment is not None:
            params["segment"] = self.segment.value
        if self.page != 1:
            params["page"] = str(self.page)
        if self.page_size != settings.default_page_size:
            params["pageSize"] = str(self.page_size)
        if self.sort_by is not SortField.NAME:
            params["sortBy"] = self.sort_by.value
        if self.sort_order is not SortOrder.ASC:
            params["sortOrder"] = self.sort_order.value
        return params

    def with_changes(self, **changes: Any) -> "CustomerQuery":
        """Return a copy with changes applied; any filter change goes back to page 1."""
        changes = self._field_names(changes)
        if "page" not in changes and any(
            name in changes and changes[name] != getattr(self, name)
            for name in _FILTER_FIELDS
        ):
            changes["page"] = 1
        try:
            return self.model_validate({**self.model_dump(), **changes})
        except ValidationError as exc:
            raise InvalidArgumentError(_describe(exc)) from exc

    @classmethod
    def _field_names(cls, changes: Mapping[str, Any]) -> Dict[str, Any]:
        """Key changes by field name, accepting query-string aliases such as sortBy."""
        by_alias = {field.alias: name for name, field in cls.model_fields.items() if field.alias}
        normalized: Dict[str, Any] = {}
        for key, value in changes.items():
            name = key if key in cls.model_fields else by_alias.get(key)
            if name is None:
                raise InvalidArgumentError(f"Unknown query field: {key}")
            normalized[name] = value
        return normalized


def _describe(exc: ValidationError) -> str:
    first = exc.errors()[0]
    location = ".".join(str(part) for part in first.get("loc", ())) or "query"
    return f"{location}: {first.get('msg', 'invalid value')}"


class Pagination(CamelModel):
    page: int
    page_size: int
    total: int
    total_pages: int


class SegmentCounts(CamelModel):
    """Per-segment tallies for the dashboard summary cards."""

    total: int = 0
    healthy: int = 0
    watch: int = 0
    at_risk: int = 0


class CustomerPage(CamelModel):
    """One page of matching customers plus pagination counters."""

    data: Tuple[Customer, ...] = ()
    pagination: Pagination
    summary: SegmentCounts = Field(default_factory=SegmentCounts)
