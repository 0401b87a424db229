"""Files service — business logic for reading and writing the virtual filesystem."""

import logging

from api.files.dto.address import DirectoryAddress, FileAddress
from api.files.dto.file import DirectoryListing, FileRecord
from api.files.exceptions import ConflictError, NotFoundError, ValidationError
from api.files.repositories.files_repository import FilesRepository
from api.files.repositories.listing_query import parse_listing_options
from api.files.services.path_resolver import resolve_path

logger = logging.getLogger(__name__)


def _resolve_file(path: str) -> FileAddress:
    address = resolve_path(path)
    if not isinstance(address, FileAddress):
        raise ValidationError(f"file {path} must be a file")
    return address


def _list_directory(
    repo: FilesRepository,
    address: DirectoryAddress,
    filter_by_name: str | None,
    order_by,
    order_direction,
) -> DirectoryListing:
    files = repo.get_by_dir(address.path, filter_by_name, order_by, order_direction)
    # An empty listing is only a miss when the directory node is missing too
    if not files and not address.is_root and not repo.exists(address.dir, address.name):
        raise NotFoundError("no files matching file path")
    return DirectoryListing(files=[f.file_name for f in files])


def read_path(
    repo: FilesRepository,
    path: str,
    filter_by_name: str | None = None,
    order_by: str | None = None,
    order_direction: str | None = None,
) -> FileRecord | DirectoryListing:
    """Return the file at ``path`` or the listing of the directory it names."""
    options = parse_listing_options(filter_by_name, order_by, order_direction)
    address = resolve_path(path)

    if isinstance(address, DirectoryAddress):
        return _list_directory(
            repo, address, options.filter_by_name, options.order_by, options.order_direction
        )

    file = repo.get_by_file_path(address.dir, address.file_name)
    if not file:
        raise NotFoundError(f"file {path} not found")
    return file


def create_file(repo: FilesRepository, path: str, content: bytes) -> FileRecord:
    address = _resolve_file(path)
    if repo.exists(address.dir, address.file_name):
        raise ConflictError(f"file {path} has already existed")

    file = repo.create(address.dir, address.file_name, content)
    logger.info("Created %s (%d bytes)", address.path, file.size)
    return file


def update_file(repo: FilesRepository, path: str, content: bytes) -> None:
    """Replace the content of an existing file."""
    address = _resolve_file(path)
    file = repo.get_by_file_path(address.dir, address.file_name)
    if not file:
        raise NotFoundError(f"file {path} not found")

    file.content = content
    file.size = len(content)
    if not repo.update(file):
        raise NotFoundError(f"file {path} not found")
    logger.info("Updated %s (%d bytes)", address.path, file.size)


def archive_file(repo: FilesRepository, path: str) -> None:
    address = _resolve_file(path)
    if not repo.mark_as_archived(address.dir, address.file_name):
        raise NotFoundError(f"file {path} not found")
    logger.info("Archived %s", address.path)
