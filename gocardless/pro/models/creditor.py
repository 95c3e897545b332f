"""Creditor resource model."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from .resource import Resource


class CreditorLinks(BaseModel):
    """Related resource identities of a creditor."""

    default_eur_payout_account: str | None = None
    default_gbp_payout_account: str | None = None
    logo: str | None = None

    model_config = ConfigDict(frozen=True, extra="allow")


class Creditor(Resource):
    """Party to whom payments are paid out."""

    created_at: datetime | None = None
    name: str | None = None
    address_line1: str | None = None
    address_line2: str | None = None
    address_line3: str | None = None
    city: str | None = None
    region: str | None = None
    postal_code: str | None = None
    country_code: str | None = None
    logo_url: str | None = None
    links: CreditorLinks = Field(default_factory=CreditorLinks)
