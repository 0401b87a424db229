"""Files repository — data access layer for the virtual filesystem."""

from datetime import datetime, timezone

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker

from database import SessionLocal
from api.files.dto.file import FileRecord
from api.files.exceptions import ConflictError, StorageError
from api.files.orm.file_model import FileModel
from api.files.repositories.listing_query import build_listing_query, parse_listing_options
from api.files.services.path_resolver import normalize_dir, split_dir


def _now() -> datetime:
    return datetime.now(timezone.utc)


def _model_to_dto(model: FileModel, with_content: bool = True) -> FileRecord:
    return FileRecord(
        id=model.id,
        dir=model.dir,
        file_name=model.file_name,
        size=model.size or 0,
        content=(model.content or b"") if with_content else None,
        is_archived=bool(model.is_archived),
        created_at=model.created_at,
        last_modified=model.last_modified,
    )


class FilesRepository:
    """Persistence for file and directory nodes in the ``files`` table.

    Only live (non-archived) records are visible to reads. Errors from the
    database are raised as StorageError; nothing is logged or retried here.
    """

    def __init__(self, session_factory: sessionmaker):
        self._session_factory = session_factory

    def _get_session(self) -> Session:
        return self._session_factory()

    @staticmethod
    def _live(session: Session, dir: str, file_name: str):
        return session.query(FileModel).filter(
            FileModel.is_archived.is_(False),
            FileModel.dir == dir,
            FileModel.file_name == file_name,
        )

    def get_by_file_path(self, dir: str, file_name: str) -> FileRecord | None:
        dir = normalize_dir(dir)
        try:
            with self._get_session() as session:
                model = self._live(session, dir, file_name).first()
                return _model_to_dto(model) if model else None
        except SQLAlchemyError as e:
            raise StorageError(str(e)) from e

    def exists(self, dir: str, file_name: str) -> bool:
        dir = normalize_dir(dir)
        try:
            with self._get_session() as session:
                return self._live(session, dir, file_name).first() is not None
        except SQLAlchemyError as e:
            raise StorageError(str(e)) from e

    def get_by_dir(
        self,
        dir: str,
        filter_by_name: str | None = None,
        order_by: str | None = None,
        order_direction: str | None = None,
    ) -> list[FileRecord]:
        """List live immediate children of ``dir`` without their content.

        An empty list is returned both for an empty directory and for one
        that does not exist.
        """
        options = parse_listing_options(filter_by_name, order_by, order_direction)
        dir = normalize_dir(dir)
        try:
            with self._get_session() as session:
                models = build_listing_query(session, dir, options).all()
                return [_model_to_dto(m, with_content=False) for m in models]
        except SQLAlchemyError as e:
            raise StorageError(str(e)) from e

    def _materialize_parent(self, dir: str, now: datetime) -> None:
        """Insert a directory node for ``dir`` under its parent if missing.

        Only the immediate parent is materialized, not the whole chain. A
        concurrent insert of the same node counts as success.
        """
        parts = split_dir(dir)
        if parts is None:
            return
        parent, base = parts
        with self._get_session() as session:
            if self._live(session, parent, base).first() is not None:
                return
            session.add(
                FileModel(
                    dir=parent,
                    file_name=base,
                    size=0,
                    content=b"",
                    created_at=now,
                    last_modified=now,
                )
            )
            try:
                session.commit()
            except IntegrityError:
                session.rollback()

    def create(self, dir: str, file_name: str, content: bytes) -> FileRecord:
        """Insert a live record, materializing its parent directory node first.

        Raises ConflictError when a live record already holds the address.
        """
        dir = normalize_dir(dir)
        now = _now()
        try:
            self._materialize_parent(dir, now)
            with self._get_session() as session:
                model = FileModel(
                    dir=dir,
                    file_name=file_name,
                    size=len(content),
                    content=content,
                    created_at=now,
                    last_modified=now,
                )
                session.add(model)
                try:
                    session.commit()
                except IntegrityError as e:
                    session.rollback()
                    path = f"{dir}/{file_name}" if dir else file_name
                    raise ConflictError(f"file {path} has already existed") from e
                session.refresh(model)
                return _model_to_dto(model)
        except SQLAlchemyError as e:
            raise StorageError(str(e)) from e

    def update(self, record: FileRecord) -> bool:
        """Overwrite size and content of the row with ``record.id``.

        Returns False when no such row exists.
        """
        content = record.content or b""
        try:
            with self._get_session() as session:
                model = session.get(FileModel, record.id)
                if not model:
                    return False
                model.size = len(content)
                model.content = content
                model.last_modified = _now()
                session.commit()
                return True
        except SQLAlchemyError as e:
            raise StorageError(str(e)) from e

    def mark_as_archived(self, dir: str, file_name: str) -> bool:
        """Archive the live record at the address.

        Returns False when there was nothing live to archive; repeating the
        call is harmless.
        """
        dir = normalize_dir(dir)
        try:
            with self._get_session() as session:
                count = self._live(session, dir, file_name).update(
                    {FileModel.is_archived: True}, synchronize_session=False
                )
                session.commit()
                return count > 0
        except SQLAlchemyError as e:
            raise StorageError(str(e)) from e


files_repository = FilesRepository(SessionLocal)


def get_files_repository() -> FilesRepository:
    """FastAPI dependency returning the process-wide repository."""
    return files_repository
