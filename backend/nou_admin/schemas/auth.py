from pydantic import BaseModel


class LoginRequest(BaseModel):
    identifier: str
    password: str


class AdminUser(BaseModel):
    """Claims carried by the admin session token."""

    id: int | str
    email: str = ""
    username: str | None = None
    code_adhesion: str | None = None
    nom: str | None = None
    prenom: str | None = None
    role: str

    model_config = {"extra": "ignore"}


class LoginResponse(BaseModel):
    success: bool = True
    user: AdminUser
    backendToken: str | None = None


class MeResponse(BaseModel):
    success: bool = True
    user: AdminUser
    token: str
