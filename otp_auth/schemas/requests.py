from typing import Optional

from pydantic import BaseModel, Field

# Missing or null fields are read as "" so the use cases report them as
# InvalidInput rather than as a malformed body.


class CredentialsIn(BaseModel):
    username: Optional[str] = Field("", description="The username, case-sensitive")
    password: Optional[str] = Field("", description="The password of the user")


class RegisterIn(CredentialsIn):
    pass


class LoginIn(CredentialsIn):
    pass


class VerifyOTPIn(BaseModel):
    username: Optional[str] = Field(
        "", description="The username the code was issued to"
    )
    otp: Optional[str] = Field("", description="The 6-digit one-time code")
