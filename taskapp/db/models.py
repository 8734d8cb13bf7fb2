"""SQLAlchemy models for the task manager."""
from __future__ import annotations

from sqlalchemy import Column, Integer, String
from sqlalchemy.orm import declarative_base

Base = declarative_base()

TITLE_MAX_LENGTH = 64
DESCRIPTION_MAX_LENGTH = 64


class TaskModel(Base):
    __tablename__ = "tasks"
    # AUTOINCREMENT keeps ids of deleted rows from being reused
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, autoincrement=True)
    title = Column(String(TITLE_MAX_LENGTH))
    description = Column(String(DESCRIPTION_MAX_LENGTH))
