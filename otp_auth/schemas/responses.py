from pydantic import BaseModel, Field


class MessageOut(BaseModel):
    message: str = Field(..., description="Human-readable outcome")
