"""Tests for the listing ordering policy."""

import pytest

from api.files.exceptions import ValidationError
from api.files.repositories.listing_query import (
    ListingOptions,
    OrderBy,
    OrderDirection,
    parse_listing_options,
)


def test_no_parameters():
    """Test an empty query produces default options."""
    assert parse_listing_options() == ListingOptions()


def test_empty_strings_count_as_absent():
    assert parse_listing_options("", "", "") == ListingOptions()


@pytest.mark.parametrize("order_by", ["fileName", "size", "lastModified"])
@pytest.mark.parametrize("order_direction", ["Ascending", "Descending"])
def test_allowed_pairs(order_by, order_direction):
    """Test every allowed token pair is accepted and converted."""
    options = parse_listing_options(None, order_by, order_direction)

    assert options.order_by is OrderBy(order_by)
    assert options.order_direction is OrderDirection(order_direction)


def test_keeps_filter():
    assert parse_listing_options("rep").filter_by_name == "rep"


def test_unknown_order_by():
    with pytest.raises(ValidationError, match=r"\[orderBy\] field foo is not allowed"):
        parse_listing_options(None, "foo", "Ascending")


def test_unknown_order_direction():
    with pytest.raises(ValidationError, match=r"\[orderDirection\] field up is not allowed"):
        parse_listing_options(None, "size", "up")


@pytest.mark.parametrize(
    ("order_by", "order_direction"),
    [("fileName", None), (None, "Descending")],
)
def test_half_pair_is_rejected(order_by, order_direction):
    """Test orderBy and orderDirection must come together."""
    with pytest.raises(ValidationError, match="Both"):
        parse_listing_options(None, order_by, order_direction)


def test_column_name_is_not_accepted_as_token():
    """Test only the public tokens are allowed, not raw column names."""
    with pytest.raises(ValidationError):
        parse_listing_options(None, "file_name", "Ascending")
