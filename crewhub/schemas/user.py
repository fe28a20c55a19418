# crewhub/schemas/user.py
from datetime import datetime
from typing import Annotated, Literal, Union

from pydantic import ConfigDict, Field, field_validator, model_validator

from crewhub.models.user import User
from crewhub.schemas.common import APIModel

Role = Literal["customer", "worker", "admin"]
# Admin identities are seeded, never self-registered
RegisterRole = Literal["customer", "worker"]
WorkerType = Literal[
    "Plumber",
    "Electrician",
    "Carpenter",
    "Cleaner",
    "Painter",
    "Mechanic",
]


def _not_blank(v: str) -> str:
    v = v.strip()
    if not v:
        raise ValueError("field cannot be empty")
    return v


# -------- Role-specific profile variants --------


class CustomerProfile(APIModel):
    role: Literal["customer"] = "customer"


class WorkerProfile(APIModel):
    role: Literal["worker"] = "worker"
    worker_type: WorkerType
    visiting_charge: int
    is_available: bool


class AdminProfile(APIModel):
    role: Literal["admin"] = "admin"


Profile = Annotated[
    Union[CustomerProfile, WorkerProfile, AdminProfile],
    Field(discriminator="role"),
]


# -------- Requests --------


class UserRegister(APIModel):
    """
    Self-registration payload.

    Workers must also send `workerType` and a non-negative
    `visitingCharge`. Worker-only fields sent with role="customer"
    are ignored.
    """

    model_config = ConfigDict(extra="forbid")

    username: str
    password: str
    full_name: str
    mobile: str
    address: str
    pincode: str
    role: RegisterRole = "customer"

    worker_type: WorkerType | None = None
    visiting_charge: int | None = Field(default=None, ge=0)
    is_available: bool = True

    @field_validator("username", "full_name", "mobile", "address", "pincode")
    @classmethod
    def not_empty(cls, v: str) -> str:
        return _not_blank(v)

    @field_validator("password")
    @classmethod
    def password_not_empty(cls, v: str) -> str:
        if not v:
            raise ValueError("password cannot be empty")
        return v

    @model_validator(mode="after")
    def check_worker_fields(self) -> "UserRegister":
        if self.role == "worker":
            if self.worker_type is None:
                raise ValueError("workerType is required for workers")
            if self.visiting_charge is None:
                raise ValueError("visitingCharge is required for workers")
        else:
            self.worker_type = None
            self.visiting_charge = None
        return self


class LoginRequest(APIModel):
    model_config = ConfigDict(extra="forbid")

    username: str
    password: str


class AvailabilityUpdate(APIModel):
    model_config = ConfigDict(extra="forbid")

    is_available: bool


# -------- Responses --------


class UserRead(APIModel):
    """
    Public identity envelope plus its role-specific profile.
    """

    id: int
    username: str
    full_name: str
    mobile: str
    address: str
    pincode: str
    role: Role
    created_at: datetime
    profile: Profile

    @classmethod
    def from_user(cls, user: User) -> "UserRead":
        if user.role == "worker":
            profile = WorkerProfile(
                worker_type=user.worker_type,
                visiting_charge=user.visiting_charge or 0,
                is_available=bool(user.is_available),
            )
        elif user.role == "admin":
            profile = AdminProfile()
        else:
            profile = CustomerProfile()

        return cls(
            id=user.id,
            username=user.username,
            full_name=user.full_name,
            mobile=user.mobile,
            address=user.address,
            pincode=user.pincode,
            role=user.role,
            created_at=user.created_at,
            profile=profile,
        )


class WorkerDetailRead(UserRead):
    """Worker profile with the mean of all its review ratings (0 if none)."""

    average_rating: float = 0.0
