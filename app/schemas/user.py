# app/schemas/user.py
from datetime import datetime
from pydantic import BaseModel, EmailStr, Field, field_validator
from typing import Optional


# Схема регистрации
class UserCreate(BaseModel):
    email: EmailStr
    password: str = Field(..., min_length=8)
    first_name: str = Field(..., min_length=1)
    last_name: str = Field(..., min_length=1)
    phone: Optional[str] = None

class LoginData(BaseModel):
    email: EmailStr
    password: str

# Схема пользователя, которую отдаем наружу (без password_hash)
class User(BaseModel):
    id: int
    email: str
    first_name: str
    last_name: str
    phone: str | None = None
    avatar_url: str | None = None
    is_active: bool
    is_admin: bool
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True

# Частичное обновление профиля: применяются только переданные поля
class UserUpdate(BaseModel):
    first_name: Optional[str] = Field(None, min_length=1)
    last_name: Optional[str] = Field(None, min_length=1)
    phone: Optional[str] = None
    avatar_url: Optional[str] = None

    @field_validator("first_name", "last_name")
    @classmethod
    def name_not_null(cls, v):
        # Явный null для обязательных колонок не пропускаем
        if v is None:
            raise ValueError("must not be null")
        return v

# Схема для ответа с токеном
class Token(BaseModel):
    access_token: str
    token_type: str = "bearer"

class AuthResponse(Token):
    user: User
