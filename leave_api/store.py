from __future__ import annotations
from contextlib import contextmanager
from typing import Any, Iterable, Iterator, List, Optional, Sequence, Type, TypeVar

from sqlalchemy import func, select
from sqlalchemy.orm import Session, scoped_session

T = TypeVar('T')


class RecordStore:
    """Thin persistence facade handed to each blueprint factory.

    Wraps a thread-scoped SQLAlchemy session. Nothing here commits on its own
    except `transaction()`; callers decide the durability boundary.
    """

    def __init__(self, session_factory: scoped_session):
        self._session_factory = session_factory

    @property
    def session(self) -> Session:
        return self._session_factory()

    def remove(self) -> None:
        self._session_factory.remove()

    def find_one(self, model: Type[T], ident: Any) -> Optional[T]:
        return self.session.get(model, ident)

    def find_many(
        self,
        model: Type[T],
        criteria: Iterable[Any] = (),
        skip: Optional[int] = None,
        take: Optional[int] = None,
        order_by: Sequence[Any] = (),
        options: Sequence[Any] = (),
    ) -> List[T]:
        stmt = select(model).where(*criteria)
        if order_by:
            stmt = stmt.order_by(*order_by)
        if options:
            stmt = stmt.options(*options)
        if skip:
            stmt = stmt.offset(skip)
        if take is not None:
            stmt = stmt.limit(take)
        return list(self.session.execute(stmt).scalars().all())

    def count(self, model: Type[T], criteria: Iterable[Any] = ()) -> int:
        stmt = select(func.count()).select_from(model).where(*criteria)
        return int(self.session.execute(stmt).scalar_one())

    def create(self, model: Type[T], **values: Any) -> T:
        obj = model(**values)
        self.session.add(obj)
        self.session.flush()
        return obj

    def update(self, obj: T, **values: Any) -> T:
        for key, value in values.items():
            setattr(obj, key, value)
        self.session.flush()
        return obj

    @contextmanager
    def transaction(self) -> Iterator[Session]:
        session = self.session
        try:
            yield session
            session.commit()
        except Exception:
            session.rollback()
            raise


__all__ = ['RecordStore']
