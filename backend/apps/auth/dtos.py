from dataclasses import dataclass


@dataclass
class AuthUserDTO:
    id: int
    username: str
    email: str


@dataclass
class AuthResultDTO:
    token: str
    refresh: str
    user: AuthUserDTO
