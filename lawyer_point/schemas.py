# lawyer_point/schemas.py

from pydantic import BaseModel, ConfigDict
from enum import Enum
from datetime import datetime
from typing import List, Optional


class Token(BaseModel):
    access_token: str
    token_type: str = "bearer"


class UserRole(str, Enum):
    user = "user"
    admin = "admin"


class UserCreate(BaseModel):
    # extra profile fields (photo url, provider) are kept for the echo reply
    model_config = ConfigDict(extra="allow")

    email: str
    name: Optional[str] = None


class UserPublic(BaseModel):
    id: str
    email: str
    name: Optional[str] = None
    role: Optional[UserRole] = None


class AdminStatus(BaseModel):
    is_admin: bool


class AvailableAppointment(BaseModel):
    id: str
    name: str
    times: List[str]
    price: float


class ReservationCreate(BaseModel):
    lawsuit: str
    client_name: Optional[str] = None
    email: str
    phone: Optional[str] = None
    appointment_date: str  # not parsed: unknown dates just match no reservations
    time: str
    price: float = 0


class ReservationPublic(BaseModel):
    id: str
    lawsuit: str
    client_name: Optional[str] = None
    email: str
    phone: Optional[str] = None
    appointment_date: str
    time: str
    price: float
    paid: bool
    transaction_id: Optional[str] = None


class PaymentIntentCreate(BaseModel):
    price: float


class PaymentIntentPublic(BaseModel):
    client_secret: str


class PaymentCreate(BaseModel):
    reservation_id: str
    transaction_id: str
    price: float
    email: str


class PaymentPublic(BaseModel):
    id: str
    reservation_id: str
    transaction_id: str
    price: float
    email: str
    created_at: datetime


class LawyerCreate(BaseModel):
    name: str
    email: Optional[str] = None
    specialty: Optional[str] = None
    image: Optional[str] = None


class LawyerUpdate(BaseModel):
    name: Optional[str] = None
    email: Optional[str] = None
    specialty: Optional[str] = None
    image: Optional[str] = None


class LawyerPublic(BaseModel):
    id: str
    name: str
    email: Optional[str] = None
    specialty: Optional[str] = None
    image: Optional[str] = None


class InsertResult(BaseModel):
    acknowledged: bool = True
    inserted_id: str


class UpdateResult(BaseModel):
    acknowledged: bool = True
    matched_count: int
    modified_count: int


class DeleteResult(BaseModel):
    acknowledged: bool = True
    deleted_count: int


class Rejection(BaseModel):
    acknowledged: bool = False
    message: str


class PaymentResult(BaseModel):
    acknowledged: bool = True
    inserted_id: str
    modified_count: int
