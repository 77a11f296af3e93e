"""People resource models."""

import json
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Person(BaseModel):
    """A snapshot of a remote user record as returned by the People endpoint."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    user_name: str = Field(alias="UserName", description="Unique user identifier")
    first_name: Optional[str] = Field(None, alias="FirstName")
    last_name: Optional[str] = Field(None, alias="LastName")
    middle_name: Optional[str] = Field(None, alias="MiddleName")
    gender: Optional[str] = Field(None, alias="Gender")
    emails: List[str] = Field(default_factory=list, alias="Emails")
    favorite_feature: Optional[str] = Field(None, alias="FavoriteFeature")
    features: List[str] = Field(default_factory=list, alias="Features")

    # Address entries are passed through untouched
    address_info: List[Dict[str, Any]] = Field(
        default_factory=list, alias="AddressInfo"
    )
    home_address: Optional[Dict[str, Any]] = Field(None, alias="HomeAddress")

    @field_validator("emails", "features", "address_info", mode="before")
    @classmethod
    def null_to_empty_list(cls, v: Any) -> Any:
        return [] if v is None else v

    @property
    def full_name(self) -> str:
        return f"{self.first_name or ''} {self.last_name or ''}".strip()

    def to_wire(self) -> Dict[str, Any]:
        """Return the record keyed by its API field names."""
        return self.model_dump(by_alias=True)

    def __str__(self) -> str:
        return json.dumps(self.to_wire(), indent=2)
