"""Contact / personal fields with per-field confidence."""

from typing import Dict, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

CONTACT_FIELD_NAMES = ("name", "email", "phone", "location", "linkedin", "github", "website", "summary")


class ContactFields(BaseModel):
    """
    Personal fields found in the resume. A field that could not be determined is None
    and has no confidence entry (never a zero-confidence value).
    """

    model_config = ConfigDict(frozen=True)

    name: Optional[str] = Field(default=None, description="Candidate full name")
    email: Optional[str] = Field(default=None, description="Primary email address")
    phone: Optional[str] = Field(default=None, description="Phone number, digits with optional leading +")
    location: Optional[str] = Field(default=None, description="City, State/Country")
    linkedin: Optional[str] = Field(default=None, description="LinkedIn profile URL or handle")
    github: Optional[str] = Field(default=None, description="GitHub profile URL or handle")
    website: Optional[str] = Field(default=None, description="Personal website")
    summary: Optional[str] = Field(default=None, description="Professional summary line")
    confidence: Dict[str, float] = Field(default_factory=dict, description="Field name -> confidence in [0, 1]")

    @model_validator(mode="after")
    def _check_confidence(self) -> "ContactFields":
        for key, value in self.confidence.items():
            if key not in CONTACT_FIELD_NAMES or getattr(self, key) is None:
                raise ValueError(f"confidence given for absent field: {key}")
            if not 0.0 <= value <= 1.0:
                raise ValueError(f"confidence for {key} out of range: {value}")
        return self
