"""Tests for the files service."""

import pytest

from api.files.dto.file import DirectoryListing, FileRecord
from api.files.exceptions import ConflictError, NotFoundError, ValidationError
from api.files.services import files_service


def test_create_and_read_file(repo):
    """Test the docs/readme.txt scenario end to end."""
    created = files_service.create_file(repo, "docs/readme.txt", b"\x00\x01\x02")

    assert created.size == 3

    with pytest.raises(ConflictError, match="has already existed"):
        files_service.create_file(repo, "docs/readme.txt", b"again")

    root = files_service.read_path(repo, "")
    assert isinstance(root, DirectoryListing)
    assert root.files == ["docs"]

    file = files_service.read_path(repo, "/docs/readme.txt")
    assert isinstance(file, FileRecord)
    assert file.content == b"\x00\x01\x02"


def test_create_directory_address_is_rejected(repo):
    with pytest.raises(ValidationError, match="must be a file"):
        files_service.create_file(repo, "docs/report", b"abc")


def test_read_missing_file(repo):
    with pytest.raises(NotFoundError):
        files_service.read_path(repo, "docs/missing.txt")


def test_read_missing_directory(repo):
    """Test a directory with no node and no children is not found."""
    with pytest.raises(NotFoundError, match="no files matching file path"):
        files_service.read_path(repo, "nowhere")


def test_read_empty_existing_directory(repo):
    """Test a directory node with no live children lists as empty."""
    files_service.create_file(repo, "a/b/c.txt", b"abc")
    files_service.archive_file(repo, "a/b/c.txt")

    listing = files_service.read_path(repo, "a/b")

    assert listing.files == []


def test_read_empty_root(repo):
    assert files_service.read_path(repo, "/").files == []


def test_read_listing_with_filter_and_order(repo):
    files_service.create_file(repo, "docs/big.txt", b"x" * 10)
    files_service.create_file(repo, "docs/small.txt", b"x")
    files_service.create_file(repo, "docs/other.md", b"xx")

    listing = files_service.read_path(repo, "docs", ".txt", "size", "Ascending")

    assert listing.files == ["small.txt", "big.txt"]


def test_read_half_ordering_fails_before_store_access(untouchable_repo):
    """Test ordering is validated for every read, before the store is used."""
    with pytest.raises(ValidationError):
        files_service.read_path(untouchable_repo, "docs", None, "size", None)
    with pytest.raises(ValidationError):
        files_service.read_path(untouchable_repo, "docs/readme.txt", None, None, "Ascending")


def test_update_file(repo):
    files_service.create_file(repo, "docs/readme.txt", b"abc")

    files_service.update_file(repo, "docs/readme.txt", b"abcdef")

    file = files_service.read_path(repo, "docs/readme.txt")
    assert file.content == b"abcdef"
    assert file.size == 6


def test_update_missing_file(repo):
    with pytest.raises(NotFoundError):
        files_service.update_file(repo, "docs/readme.txt", b"abc")


def test_update_directory_address_is_rejected(repo):
    with pytest.raises(ValidationError):
        files_service.update_file(repo, "docs", b"abc")


def test_archive_file(repo):
    """Test archived files disappear from reads and listings."""
    files_service.create_file(repo, "docs/readme.txt", b"abc")
    files_service.create_file(repo, "docs/keep.txt", b"abc")

    files_service.archive_file(repo, "docs/readme.txt")

    with pytest.raises(NotFoundError):
        files_service.read_path(repo, "docs/readme.txt")
    assert files_service.read_path(repo, "docs").files == ["keep.txt"]


def test_archive_twice_is_not_found(repo):
    files_service.create_file(repo, "docs/readme.txt", b"abc")
    files_service.archive_file(repo, "docs/readme.txt")

    with pytest.raises(NotFoundError):
        files_service.archive_file(repo, "docs/readme.txt")


def test_archive_directory_address_is_rejected(repo):
    with pytest.raises(ValidationError):
        files_service.archive_file(repo, "docs")
