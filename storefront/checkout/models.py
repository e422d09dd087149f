"""Checkout models."""
from dataclasses import dataclass
from typing import Optional

from pydantic import BaseModel, ConfigDict, field_validator

from storefront.config import STOREFRONT_LANGUAGE
from storefront.errors import RESULT_TITLE_ERROR, RESULT_TITLE_OK
from storefront.i18n import get_text


class CustomerInfo(BaseModel):
    """Customer details typed into the checkout form."""
    model_config = ConfigDict(extra="ignore")

    name: str = ""
    phone: str = ""
    address: Optional[str] = None  # Optional, never validated

    @field_validator("name", "phone", mode="before")
    @classmethod
    def normalize_text(cls, v):
        # Kept as typed; only an empty or absent value counts as missing
        if v is None:
            return ""
        return v if isinstance(v, str) else str(v)

    @field_validator("address", mode="before")
    @classmethod
    def passthrough_address(cls, v):
        if v is None or isinstance(v, str):
            return v
        return str(v)

    @property
    def is_complete(self) -> bool:
        """Name and phone are both filled in."""
        return bool(self.name) and bool(self.phone)


@dataclass(frozen=True)
class CheckoutResult:
    """Outcome shown to the user until acknowledged."""
    ok: bool
    message: str

    def title(self, lang: str = STOREFRONT_LANGUAGE) -> str:
        """Localized heading for the result banner."""
        return get_text(RESULT_TITLE_OK if self.ok else RESULT_TITLE_ERROR, lang)

    def to_dict(self) -> dict:
        return {"ok": self.ok, "message": self.message}
