"""
Test Data Seeding Utilities

A small SQLAlchemy model and factory functions for paginating real rows.
"""
import uuid
from datetime import datetime, timedelta
from typing import List, Optional

from sqlalchemy import Column, DateTime, Integer, String
from sqlalchemy.orm import Session, declarative_base

Base = declarative_base()


class Record(Base):
    __tablename__ = 'records'

    id = Column(Integer, primary_key=True, autoincrement=True)
    uid = Column(String(36), nullable=False, default=lambda: str(uuid.uuid4()))
    value = Column(String, nullable=False)
    created_at = Column(DateTime, nullable=False, default=datetime.utcnow)

    def __repr__(self):
        return f"<Record(id={self.id}, value='{self.value}')>"


def record_to_dict(record: Record) -> dict:
    return {"id": record.id, "value": record.value}


def seed_records(
    session: Session,
    count: int = 5,
    start: Optional[datetime] = None
) -> List[Record]:
    """
    Insert ``count`` records named "Value [1]" .. "Value [count]".

    Records are inserted in order with increasing ids and timestamps.
    """
    start = start or datetime(2025, 1, 1, 10, 0, 0)
    records = [
        Record(value=f"Value [{i}]", created_at=start + timedelta(minutes=i))
        for i in range(1, count + 1)
    ]
    session.add_all(records)
    session.flush()
    return records
