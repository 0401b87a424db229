"""Address Data Transfer Objects.

The virtual filesystem has a single flat address space of ``(dir, name)``
pairs. Whether an address names a file or a directory is decided once, from
the name alone, and carried as the type of the address.
"""

from pydantic import BaseModel


class FileAddress(BaseModel):
    dir: str
    file_name: str

    @property
    def path(self) -> str:
        return f"{self.dir}/{self.file_name}" if self.dir else self.file_name


class DirectoryAddress(BaseModel):
    dir: str = ""
    name: str = ""

    @property
    def path(self) -> str:
        """Directory whose children are listed."""
        if not self.name:
            return self.dir
        return f"{self.dir}/{self.name}" if self.dir else self.name

    @property
    def is_root(self) -> bool:
        return not self.path


Address = FileAddress | DirectoryAddress
