"""Pydantic schemas for the member CSV import results."""
from pydantic import BaseModel, Field


class ImportRowError(BaseModel):
    row: int
    field: str
    message: str
    value: str | None = None


class CreatedMember(BaseModel):
    nom: str
    prenom: str
    code_adhesion: str


class RejectedRow(BaseModel):
    nom: str
    prenom: str
    reason: str


class ImportDetails(BaseModel):
    created: list[CreatedMember] = Field(default_factory=list)
    duplicates: list[RejectedRow] = Field(default_factory=list)


class ImportResult(BaseModel):
    success: int = 0
    skipped: int = 0
    errors: list[ImportRowError] = Field(default_factory=list)
    details: ImportDetails = Field(default_factory=ImportDetails)


class ImportResponse(BaseModel):
    success: bool = True
    message: str
    data: ImportResult
