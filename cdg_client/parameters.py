"""Common query parameters shared by every endpoint."""

from pydantic import BaseModel, ConfigDict, Field

from .enums import FormatType, SortType


class Parameters(BaseModel):
    """
    Optional query parameters for a request.

    Fields left as None are omitted from the query string. The order of the
    emitted pairs is fixed and does not depend on construction order.
    """

    model_config = ConfigDict(frozen=True)

    format: FormatType | None = Field(None, description="Response format (json or xml)")
    offset: int | None = Field(None, ge=0, description="Index of the first record to return")
    limit: int | None = Field(None, ge=0, description="Number of records per page (API max is 250)")
    from_date_time: str | None = Field(None, description="ISO-8601 start of the update window")
    to_date_time: str | None = Field(None, description="ISO-8601 end of the update window")
    sort: SortType | None = Field(None, description="Sort by update date")

    # Resource specific filters
    current_member: bool | None = Field(None, description="Member list: only current members")
    conference: bool | None = Field(None, description="Committee reports: only conference reports")
    year: int | None = Field(None, description="Congressional record: publish year")
    month: int | None = Field(None, description="Congressional record: publish month")
    day: int | None = Field(None, description="Congressional record: publish day")

    def merge(self, **changes) -> "Parameters":
        """Return a copy with the given fields replaced."""
        return self.model_validate({**self.model_dump(), **changes})

    def query_pairs(self) -> list[tuple[str, str]]:
        pairs: list[tuple[str, str]] = []
        if self.format is not None:
            pairs.append(("format", self.format.value))
        if self.offset is not None:
            pairs.append(("offset", str(self.offset)))
        if self.limit is not None:
            pairs.append(("limit", str(self.limit)))
        if self.from_date_time is not None:
            pairs.append(("fromDateTime", self.from_date_time))
        if self.to_date_time is not None:
            pairs.append(("toDateTime", self.to_date_time))
        if self.sort is not None:
            pairs.append(("sort", self.sort.value))
        if self.current_member is not None:
            pairs.append(("currentMember", _bool(self.current_member)))
        if self.conference is not None:
            pairs.append(("conference", _bool(self.conference)))
        if self.year is not None:
            pairs.append(("year", str(self.year)))
        if self.month is not None:
            pairs.append(("month", str(self.month)))
        if self.day is not None:
            pairs.append(("day", str(self.day)))
        return pairs

    def to_query_string(self) -> str:
        """Render as `k=v&k=v` without a leading `?`. Empty when nothing is set."""
        return "&".join(f"{key}={value}" for key, value in self.query_pairs())


def _bool(value: bool) -> str:
    return "true" if value else "false"
