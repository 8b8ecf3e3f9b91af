"""Declarative base shared by all models."""

from sqlalchemy import Integer, MetaData
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column

NAMING_CONVENTION = {
    "ix": "ix_%(column_0_label)s",
    "uq": "uq_%(table_name)s_%(column_0_name)s",
    "fk": "fk_%(table_name)s_%(column_0_name)s_%(referred_table_name)s",
    "pk": "pk_%(table_name)s",
}


class Base(DeclarativeBase):
    """Base class for all database models."""

    metadata = MetaData(naming_convention=NAMING_CONVENTION)


class IntegerIDMixin:
    """Auto-incrementing integer surrogate key.

    Tables using this mixin also set ``sqlite_autoincrement`` so SQLite never
    hands out the id of a deleted row again.
    """

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
