from dataclasses import dataclass


@dataclass
class UserDTO:
    # Outward view of a user; the password never leaves the service layer
    id: int
    name: str
    email: str
