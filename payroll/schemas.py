from typing import Any, Optional

from pydantic import BaseModel, Field, model_validator


class OrderRequest(BaseModel):
    description: str = Field(
        ..., description="Order description", min_length=1, max_length=255
    )
    # Accepted and discarded unchecked; new orders always start IN_PROGRESS
    status: Optional[Any] = Field(None, description="Ignored on create")


class EmployeeRequest(BaseModel):
    first_name: Optional[str] = Field(None, description="Given name", max_length=100)
    last_name: Optional[str] = Field(None, description="Family name", max_length=100)
    name: Optional[str] = Field(
        None, description="Full name, split into first and last name"
    )
    role: str = Field(..., description="Job role", min_length=1, max_length=100)

    @model_validator(mode="after")
    def split_name(self) -> "EmployeeRequest":
        if self.name and not self.first_name:
            first, _, last = self.name.strip().partition(" ")
            self.first_name = first
            self.last_name = last.strip()
        if not self.first_name:
            raise ValueError("first_name or name is required")
        if self.last_name is None:
            self.last_name = ""
        return self


class Problem(BaseModel):
    title: str = Field(..., description="Short summary of the problem")
    detail: str = Field(..., description="Explanation specific to this occurrence")


class HealthResponse(BaseModel):
    status: str = Field(..., description="Service health status")
    service: str = Field(..., description="Service name")
    version: str = Field(..., description="Service version")
