"""Path resolver — turns request paths into file or directory addresses."""

from api.files.dto.address import Address, DirectoryAddress, FileAddress
from api.files.exceptions import ValidationError

SEPARATOR = "/"


def _segments(path: str) -> list[str]:
    if "\x00" in path:
        raise ValidationError(f"path {path!r} contains a null byte")
    segments = [s for s in path.split(SEPARATOR) if s]
    for segment in segments:
        if segment in (".", ".."):
            raise ValidationError(f"path {path} must not contain '{segment}' segments")
    return segments


def normalize_dir(dir: str) -> str:
    """Normalize a directory path: no leading or trailing slash, root is ''.

    Example: '/docs//reports/' -> 'docs/reports'
    """
    return SEPARATOR.join(_segments(dir))


def split_dir(dir: str) -> tuple[str, str] | None:
    """Split a directory into (parent, base name), or None for the root.

    Example: 'a/b' -> ('a', 'b'), 'docs' -> ('', 'docs')
    """
    normalized = normalize_dir(dir)
    if not normalized:
        return None
    parent, _, base = normalized.rpartition(SEPARATOR)
    return parent, base


def has_extension(name: str) -> bool:
    """True when the text after the last '.' is non-empty.

    'report.pdf' and '.env' have one, 'report' and 'report.' do not.
    """
    _, dot, extension = name.rpartition(".")
    return bool(dot) and bool(extension)


def resolve_path(path: str) -> Address:
    """Map a slash-separated path onto the address it names.

    The decision is purely syntactic: a last segment with an extension is a
    file, anything else is a directory to list.
    """
    segments = _segments(path)
    if not segments:
        return DirectoryAddress()

    dir, name = SEPARATOR.join(segments[:-1]), segments[-1]
    if has_extension(name):
        return FileAddress(dir=dir, file_name=name)
    return DirectoryAddress(dir=dir, name=name)
