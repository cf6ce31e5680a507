import enum


class UserRole(str, enum.Enum):
    PARENT = "parent"
    COACH = "coach"
    STAFF = "staff"


class RegistrationStatus(str, enum.Enum):
    PENDING = "Pending"
    APPROVED = "Approved"
    REJECTED = "Rejected"
