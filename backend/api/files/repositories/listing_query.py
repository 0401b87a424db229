"""Listing query — ordering policy and directory listing query builder."""

from dataclasses import dataclass
from enum import Enum

from sqlalchemy.orm import Query, Session, defer

from api.files.exceptions import ValidationError
from api.files.orm.file_model import FileModel


class OrderBy(str, Enum):
    FILE_NAME = "fileName"
    SIZE = "size"
    LAST_MODIFIED = "lastModified"


class OrderDirection(str, Enum):
    ASCENDING = "Ascending"
    DESCENDING = "Descending"


ORDER_COLUMNS = {
    OrderBy.FILE_NAME: FileModel.file_name,
    OrderBy.SIZE: FileModel.size,
    OrderBy.LAST_MODIFIED: FileModel.last_modified,
}


@dataclass(frozen=True)
class ListingOptions:
    filter_by_name: str | None = None
    order_by: OrderBy | None = None
    order_direction: OrderDirection | None = None


def _parse_token(enum_cls, value, field: str):
    if value is None or value == "" or isinstance(value, enum_cls):
        return value or None
    try:
        return enum_cls(value)
    except ValueError:
        raise ValidationError(f"[{field}] field {value} is not allowed") from None


def parse_listing_options(
    filter_by_name: str | None = None,
    order_by: str | OrderBy | None = None,
    order_direction: str | OrderDirection | None = None,
) -> ListingOptions:
    """Validate raw listing parameters against the allow-list.

    Raises ValidationError for unknown tokens or when only one half of the
    ordering pair is given.
    """
    ob = _parse_token(OrderBy, order_by, "orderBy")
    od = _parse_token(OrderDirection, order_direction, "orderDirection")
    if (ob is None) != (od is None):
        raise ValidationError("Both [orderBy] and [orderDirection] fields must be specified")
    return ListingOptions(filter_by_name=filter_by_name or None, order_by=ob, order_direction=od)


def build_listing_query(session: Session, dir: str, options: ListingOptions) -> Query:
    """Live immediate children of ``dir``, without their content."""
    query = (
        session.query(FileModel)
        .options(defer(FileModel.content))
        .filter(FileModel.is_archived.is_(False), FileModel.dir == dir)
    )

    if options.filter_by_name:
        query = query.filter(FileModel.file_name.contains(options.filter_by_name, autoescape=True))

    if options.order_by is not None:
        column = ORDER_COLUMNS[options.order_by]
        if options.order_direction is OrderDirection.DESCENDING:
            query = query.order_by(column.desc())
        else:
            query = query.order_by(column.asc())

    # id breaks ties and keeps unordered listings stable
    return query.order_by(FileModel.id.asc())
