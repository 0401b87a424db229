"""File ORM model."""

from sqlalchemy import Boolean, Column, DateTime, Index, Integer, LargeBinary, String, text

from database import Base


class FileModel(Base):
    """One node of the virtual filesystem, file or directory.

    Directory nodes share the table with files; they are told apart only by
    the absence of an extension in ``file_name``.
    """

    __tablename__ = "files"

    id = Column(Integer, primary_key=True, autoincrement=True)
    dir = Column(String(255), nullable=False)
    file_name = Column(String(255), nullable=False)
    size = Column(Integer, nullable=False, default=0)
    content = Column(LargeBinary, nullable=False, default=b"")
    is_archived = Column(Boolean, nullable=False, default=False)
    created_at = Column(DateTime, nullable=False)
    last_modified = Column(DateTime, nullable=False)

    __table_args__ = (
        Index("ix_files_file_path", "dir", "file_name"),
        # At most one live record per address
        Index(
            "uq_files_live_path",
            "dir",
            "file_name",
            unique=True,
            sqlite_where=text("is_archived = 0"),
            postgresql_where=text("NOT is_archived"),
        ),
    )
