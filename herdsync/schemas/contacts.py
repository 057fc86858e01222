import uuid
from typing import ClassVar, List, Optional

from pydantic import field_validator

from .common import SyncedPayload
from ..services.field_codec import RemoteModel, Timestamp, column


class ContactPhoneNumberPayload(RemoteModel):
    __entity__: ClassVar[str] = "contact_phone_number"

    id: uuid.UUID = column("id", default_factory=uuid.uuid4)
    phone_number: str = column("phone_number", required=True)
    phone_type: str = column("phone_type", default="mobile")
    is_primary: bool = column("is_primary", default=False)
    notes: Optional[str] = column("notes")
    created_at: Timestamp = column("created_at")
    modified_at: Timestamp = column("updated_at", "modified_at")


class ContactEmailPayload(RemoteModel):
    __entity__: ClassVar[str] = "contact_email"

    id: uuid.UUID = column("id", default_factory=uuid.uuid4)
    email: str = column("email", required=True)
    email_type: str = column("email_type", default="work")
    is_primary: bool = column("is_primary", default=False)
    notes: Optional[str] = column("notes")
    created_at: Timestamp = column("created_at")
    modified_at: Timestamp = column("updated_at", "modified_at")


class ContactPersonPayload(RemoteModel):
    __entity__: ClassVar[str] = "contact_person"

    id: uuid.UUID = column("id", default_factory=uuid.uuid4)
    name: str = column("name", required=True)
    title: Optional[str] = column("title")
    email: Optional[str] = column("email")
    phone: Optional[str] = column("phone")
    is_primary: bool = column("is_primary", default=False)
    notes: Optional[str] = column("notes")
    created_at: Timestamp = column("created_at")
    modified_at: Timestamp = column("updated_at", "modified_at")


class ContactPayload(SyncedPayload):
    __entity__: ClassVar[str] = "contact"

    name: str = column("name", required=True)
    contact_type: Optional[str] = column("type", "contact_type")
    company: Optional[str] = column("company")
    is_business: Optional[bool] = column("is_business")

    # Legacy single-value fields
    phone: Optional[str] = column("phone")
    email: Optional[str] = column("email")
    address: Optional[str] = column("address")

    address_line1: Optional[str] = column("address_line1")
    address_line2: Optional[str] = column("address_line2")
    city: Optional[str] = column("city")
    state: Optional[str] = column("state")
    zip_code: Optional[str] = column("zip_code")
    country: Optional[str] = column("country")

    website: Optional[str] = column("website")
    tax_id: Optional[str] = column("tax_id")
    payment_terms: Optional[str] = column("payment_terms")

    status: Optional[str] = column("status")
    preferred_contact_method: Optional[str] = column("preferred_contact_method")
    notes: Optional[str] = column("notes")

    phone_numbers: Optional[List[ContactPhoneNumberPayload]] = column("phone_numbers")
    emails: Optional[List[ContactEmailPayload]] = column("emails")
    contact_persons: Optional[List[ContactPersonPayload]] = column("contact_persons")

    @field_validator("phone", "email", "address", "website", mode="before")
    @classmethod
    def empty_to_none(cls, v):
        if isinstance(v, str) and v.strip() == "":
            return None
        return v
