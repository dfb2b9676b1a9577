"""SQLAlchemy models for careconnect database."""

from datetime import datetime, UTC
from sqlalchemy import (
    CheckConstraint,
    Column,
    Integer,
    String,
    ForeignKey,
    DateTime,
    Date,
    create_engine,
    event,
)
from sqlalchemy.engine import Engine
from sqlalchemy.orm import declarative_base, relationship, sessionmaker, Session

Base = declarative_base()


class Account(Base):
    """Registered user account model."""

    __tablename__ = "accounts"

    id = Column(Integer, primary_key=True)
    fullname = Column(String, nullable=False)
    email = Column(String, unique=True, nullable=False)
    password_hash = Column(String, nullable=False)
    dob = Column(Date, nullable=False)
    phone = Column(String, nullable=False)
    state = Column(String, nullable=False)
    created_at = Column(DateTime, default=lambda: datetime.now(UTC), nullable=False)

    # Relationships
    donations = relationship("Donation", back_populates="donor", passive_deletes=True)


class Donation(Base):
    """Medicine donation model."""

    __tablename__ = "donations"

    id = Column(Integer, primary_key=True)
    name = Column(String, nullable=False)
    expiry_date = Column(Date, nullable=False)
    quantity = Column(Integer, nullable=False)
    donor_id = Column(Integer, ForeignKey("accounts.id", ondelete="SET NULL"), nullable=True)
    donor_email = Column(String, nullable=False)
    donation_date = Column(DateTime, default=lambda: datetime.now(UTC), nullable=False)

    __table_args__ = (CheckConstraint("quantity > 0", name="ck_donation_quantity_positive"),)

    # Relationships
    donor = relationship("Account", back_populates="donations")


def _configure_sqlite_connection(dbapi_connection, connection_record) -> None:
    # Let SQLAlchemy's "begin" event issue BEGIN instead of pysqlite
    dbapi_connection.isolation_level = None
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def _begin_immediate(conn) -> None:
    # Take the write lock up front so concurrent writers wait on the busy
    # timeout instead of failing with SQLITE_BUSY on lock promotion.
    conn.exec_driver_sql("BEGIN IMMEDIATE")


def create_database_engine(database_url: str) -> Engine:
    """Create an engine and make sure the schema exists."""
    engine = create_engine(database_url, echo=False)
    if engine.dialect.name == "sqlite":
        event.listen(engine, "connect", _configure_sqlite_connection)
        event.listen(engine, "begin", _begin_immediate)
    Base.metadata.create_all(engine)
    return engine


def create_session_factory(engine: Engine) -> sessionmaker[Session]:
    """Create a SQLAlchemy session factory."""
    return sessionmaker(bind=engine, expire_on_commit=False)
