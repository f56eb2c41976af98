"""License model."""

from datetime import date
from typing import Optional

from pydantic import BaseModel, Field


class License(BaseModel):
    """Professional license or certification held by an employee."""

    id: str
    name: str = Field(..., min_length=1, max_length=200)
    issuer: Optional[str] = None
    date_obtained: Optional[date] = None
    expiry_date: Optional[date] = None  # Informational only, not checked when matching
    validation_status: bool = False
    category: Optional[str] = None  # "Technical", "Professional", "Industry-specific"
    description: Optional[str] = None

    class Config:
        from_attributes = True
