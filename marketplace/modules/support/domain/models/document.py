# 📄 File: marketplace/modules/support/domain/models/document.py
# 🧭 Purpose (Layman Explanation):
# Uploaded files (ID proofs, licences, images, attachments) and whether an admin has
# checked them.
# 🧪 Purpose (Technical Summary):
# Document entity holding file metadata, storage location (local, cloudinary, s3),
# optional owning record references and the shared Verification block.
# 🔗 Dependencies:
# pydantic, marketplace.shared.domain, identity UserRole
# 🔄 Connected Modules / Calls From:
# providers (KYC documents), support tickets (attachments), catalog images

import uuid
from enum import Enum
from typing import Optional

from pydantic import Field

from marketplace.modules.identity.domain.models import UserRole
from marketplace.shared.domain.base import SoftDeletableModel, ValueObject
from marketplace.shared.domain.value_objects import Verification


class DocumentType(str, Enum):
    PROFILE_IMAGE = "profile-image"
    IDENTITY_PROOF = "identity-proof"
    ADDRESS_PROOF = "address-proof"
    LICENSE = "license"
    CERTIFICATE = "certificate"
    INVOICE = "invoice"
    PRODUCT_IMAGE = "product-image"
    MENU_IMAGE = "menu-image"
    PROPERTY_IMAGE = "property-image"
    TICKET_ATTACHMENT = "ticket-attachment"
    OTHER = "other"


class StorageProvider(str, Enum):
    LOCAL = "local"
    CLOUDINARY = "cloudinary"
    S3 = "s3"


class DocumentStorage(ValueObject):
    provider: StorageProvider = StorageProvider.CLOUDINARY
    url: str = Field(min_length=1, max_length=1000)
    public_id: Optional[str] = None
    bucket: Optional[str] = None
    key: Optional[str] = None


class Document(SoftDeletableModel):
    user_id: uuid.UUID
    role: Optional[UserRole] = None
    type: DocumentType = DocumentType.OTHER
    file_name: str = Field(min_length=1, max_length=255)
    original_name: Optional[str] = Field(None, max_length=255)
    mime_type: str = Field(min_length=1, max_length=100)
    size: int = Field(ge=0, description="Size in bytes")
    storage: DocumentStorage
    order_id: Optional[uuid.UUID] = None
    booking_id: Optional[uuid.UUID] = None
    support_ticket_id: Optional[uuid.UUID] = None
    product_id: Optional[uuid.UUID] = None
    verification: Verification = Field(default_factory=Verification)
    is_active: bool = True

    @property
    def is_image(self) -> bool:
        return self.mime_type.startswith("image/")

    def verify(self, admin_id: uuid.UUID) -> None:
        self.verification = Verification.approved(admin_id)
        self.touch()

    def reject(self, reason: str) -> None:
        self.verification = Verification.rejected(reason)
        self.touch()
