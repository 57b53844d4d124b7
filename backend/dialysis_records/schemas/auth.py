from pydantic import BaseModel, Field


class RegisterRequest(BaseModel):
    first_name: str = Field(min_length=1)
    last_name: str = Field(min_length=1)
    email: str = Field(min_length=3)
    password: str = Field(min_length=1)


class LoginRequest(BaseModel):
    email: str = Field(min_length=1)
    password: str = Field(min_length=1)


class AccountResponse(BaseModel):
    id: int
    email: str

    class Config:
        from_attributes = True


class RegisterResponse(BaseModel):
    msg: str
    user: AccountResponse


class TokenResponse(BaseModel):
    token: str
    token_type: str = "bearer"
    expires_in: int
