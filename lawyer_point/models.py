# lawyer_point/models.py

from typing import Optional, List
from datetime import datetime, timezone

from sqlalchemy import UniqueConstraint
from sqlalchemy.types import JSON
from sqlmodel import SQLModel, Field, Column

from .db import new_object_id


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class AppointmentOption(SQLModel, table=True):
    id: str = Field(default_factory=new_object_id, primary_key=True, max_length=24)
    name: str = Field(index=True, unique=True)  # the lawsuit category
    times: List[str] = Field(default_factory=list, sa_column=Column(JSON))
    price: float = 0


class Reservation(SQLModel, table=True):
    __table_args__ = (
        UniqueConstraint("lawsuit", "email", "appointment_date", name="uq_client_lawsuit_date"),
        UniqueConstraint("lawsuit", "appointment_date", "time", name="uq_lawsuit_slot"),
    )

    id: str = Field(default_factory=new_object_id, primary_key=True, max_length=24)

    lawsuit: str
    client_name: Optional[str] = None
    email: str = Field(index=True)
    phone: Optional[str] = None
    appointment_date: str = Field(index=True)  # kept as sent by the client
    time: str
    price: float = 0
    paid: bool = False
    transaction_id: Optional[str] = None


class User(SQLModel, table=True):
    id: str = Field(default_factory=new_object_id, primary_key=True, max_length=24)
    name: Optional[str] = None
    email: str = Field(index=True, unique=True)
    role: Optional[str] = None  # None, "user" or "admin"


class Lawyer(SQLModel, table=True):
    id: str = Field(default_factory=new_object_id, primary_key=True, max_length=24)
    name: str
    email: Optional[str] = None
    specialty: Optional[str] = None
    image: Optional[str] = None


class Payment(SQLModel, table=True):
    id: str = Field(default_factory=new_object_id, primary_key=True, max_length=24)

    reservation_id: str = Field(index=True)
    transaction_id: str
    price: float
    email: str = Field(index=True)
    created_at: datetime = Field(default_factory=utcnow)
