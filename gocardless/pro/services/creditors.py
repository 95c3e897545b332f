"""Service for working with creditor resources.

Each payment taken through the API is linked to a creditor, to whom the
payment is then paid out. In most cases an organisation has a single
creditor, but the API also supports collecting payments on behalf of others.
"""

from __future__ import annotations

from typing import Self

from ..api.request_builder import (
    CreateRequestBuilder,
    UpdateRequestBuilder,
)
from ..core.fields import NestedFields
from ..core.request import ResourceEndpoint
from ..models import Creditor
from .base import ResourceService

CREDITORS = ResourceEndpoint.for_collection("creditors", Creditor)


class _CreditorAddressFields:
    """Address and name setters shared by create and update."""

    def address_line1(self, address_line1: str | None) -> Self:
        """The first line of the creditor's address."""
        return self.set("address_line1", address_line1)

    def address_line2(self, address_line2: str | None) -> Self:
        """The second line of the creditor's address."""
        return self.set("address_line2", address_line2)

    def address_line3(self, address_line3: str | None) -> Self:
        """The third line of the creditor's address."""
        return self.set("address_line3", address_line3)

    def city(self, city: str | None) -> Self:
        return self.set("city", city)

    def country_code(self, country_code: str | None) -> Self:
        """ISO 3166-1 alpha-2 code."""
        return self.set("country_code", country_code)

    def name(self, name: str | None) -> Self:
        return self.set("name", name)

    def postal_code(self, postal_code: str | None) -> Self:
        return self.set("postal_code", postal_code)

    def region(self, region: str | None) -> Self:
        """The creditor's address region, county or department."""
        return self.set("region", region)

    def links_logo(self, logo: str | None) -> Self:
        """ID of the logo used on the Redirect Flow payment pages."""
        return self.set_link("logo", logo)


class CreditorCreateLinks(NestedFields):
    def logo(self, logo: str | None) -> CreditorCreateLinks:
        return self.set("logo", logo)


class CreditorUpdateLinks(CreditorCreateLinks):
    def default_eur_payout_account(self, account: str | None) -> CreditorUpdateLinks:
        """ID of the bank account set up to receive payouts in EUR."""
        return self.set("default_eur_payout_account", account)

    def default_gbp_payout_account(self, account: str | None) -> CreditorUpdateLinks:
        """ID of the bank account set up to receive payouts in GBP."""
        return self.set("default_gbp_payout_account", account)


class CreditorCreateRequestBuilder(_CreditorAddressFields, CreateRequestBuilder[Creditor]):
    """Creates a new creditor."""


class CreditorUpdateRequestBuilder(_CreditorAddressFields, UpdateRequestBuilder[Creditor]):
    """Updates a creditor. Supports every field create does, plus payout accounts."""

    def links_default_eur_payout_account(self, account: str | None) -> Self:
        return self.set_link("default_eur_payout_account", account)

    def links_default_gbp_payout_account(self, account: str | None) -> Self:
        return self.set_link("default_gbp_payout_account", account)


class CreditorService(ResourceService[Creditor]):
    """Create, retrieve, update and list creditors.

    Obtain an instance from ``Client.creditors`` rather than constructing it.
    """

    endpoint = CREDITORS
    create_builder = CreditorCreateRequestBuilder
    update_builder = CreditorUpdateRequestBuilder

    def create(self) -> CreditorCreateRequestBuilder:
        return super().create()

    def update(self, identity: str) -> CreditorUpdateRequestBuilder:
        return super().update(identity)
