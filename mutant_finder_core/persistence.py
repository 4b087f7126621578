import logging
import threading
from contextlib import nullcontext
from typing import Optional

from sqlalchemy import create_engine, Column, String, Integer
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import declarative_base, sessionmaker
from sqlalchemy.pool import StaticPool

from .config import FinderConfig
from .models import Statistic
from .statistics import CounterStore

logger = logging.getLogger(__name__)

Base = declarative_base()


class DBStatistic(Base):
    __tablename__ = 'statistics'

    name = Column(String, primary_key=True)
    amount = Column(Integer, nullable=False, default=0)


def _is_memory_sqlite(db_url: str) -> bool:
    return db_url in ("sqlite://", "sqlite:///:memory:")


class SqlCounterStore(CounterStore):
    """Counters kept in a relational table, one row per counter name."""

    def __init__(self, db_url: Optional[str] = None):
        super().__init__()
        if db_url is None:
            db_url = FinderConfig.DATABASE_URL

        engine_kwargs = {}
        self._connection_lock = nullcontext()
        if db_url.startswith("sqlite"):
            engine_kwargs["connect_args"] = {"check_same_thread": False}
            if _is_memory_sqlite(db_url):
                # One shared connection, otherwise every session sees a fresh database.
                # Sessions on it must not overlap, whatever counter they touch.
                engine_kwargs["poolclass"] = StaticPool
                self._connection_lock = threading.RLock()

        logger.info(f"Connecting to counter database at {db_url}")
        self.engine = create_engine(db_url, **engine_kwargs)
        Base.metadata.create_all(self.engine)
        self.Session = sessionmaker(bind=self.engine)

    def find_counter(self, name: str) -> Optional[Statistic]:
        with self._connection_lock:
            session = self.Session()
            try:
                row = session.query(DBStatistic).filter_by(name=name).first()
                if row is None:
                    return None
                return Statistic(name=row.name, amount=row.amount)
            finally:
                session.close()

    def save_counter(self, statistic: Statistic) -> None:
        with self._connection_lock:
            session = self.Session()
            try:
                session.merge(DBStatistic(name=statistic.name, amount=statistic.amount))
                session.commit()
            finally:
                session.close()

    def _bump(self, session, name: str) -> int:
        return session.query(DBStatistic).filter_by(name=name).update(
            {DBStatistic.amount: DBStatistic.amount + 1},
            synchronize_session=False
        )

    def increment(self, name: str) -> Statistic:
        """
        Single UPDATE ... SET amount = amount + 1, so concurrent writers in
        other processes cannot lose an update either. A missing row is
        inserted at 1; losing that insert race to another writer turns into
        a plain update.
        """
        with self._lock_for(name), self._connection_lock:
            session = self.Session()
            try:
                if not self._bump(session, name):
                    session.add(DBStatistic(name=name, amount=1))
                try:
                    session.commit()
                except IntegrityError:
                    session.rollback()
                    logger.debug(f"Counter '{name}' created concurrently, retrying as update")
                    self._bump(session, name)
                    session.commit()

                row = session.query(DBStatistic).filter_by(name=name).one()
                return Statistic(name=row.name, amount=row.amount)
            finally:
                session.close()
