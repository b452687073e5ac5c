"""Declarative base shared by every docver entity."""

from sqlalchemy.orm import DeclarativeBase


class EntityBase(DeclarativeBase):
    pass
