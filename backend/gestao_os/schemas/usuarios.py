"""Schemas for Usuario entities and the auth flows."""

from pydantic import BaseModel, ConfigDict, EmailStr, ValidatorFunctionWrapHandler, field_validator

from gestao_os.schemas import _validators as check


class UsuarioAuthOut(BaseModel):
    id: int
    email: str
    nome: str

    model_config = ConfigDict(from_attributes=True)


class UsuarioLogin(BaseModel):
    email: str
    password: str


class TokenResponse(BaseModel):
    access_token: str
    token_type: str = "bearer"
    user: UsuarioAuthOut


class PasswordResetRequest(BaseModel):
    email: EmailStr

    @field_validator("email", mode="wrap")
    @classmethod
    def email_valid(cls, value: object, handler: ValidatorFunctionWrapHandler) -> str:
        return check.email(value, handler)


class PasswordResetConfirm(BaseModel):
    token: str
    newPassword: str

    @field_validator("newPassword")
    @classmethod
    def password_length(cls, value: str) -> str:
        return check.min_length(value, 6, "A senha deve ter pelo menos 6 caracteres")


class MessageOut(BaseModel):
    detail: str
