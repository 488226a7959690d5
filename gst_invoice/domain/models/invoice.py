# gst_invoice/domain/models/invoice.py
"""
Input models for the GST engine.

These mirror the records held by the remote data store (catalog items,
customers, business profile, invoices). Each field accepts both the
snake_case name and the camelCase name the store uses, so raw store
payloads can be validated directly with ``Model.model_validate(payload)``.
"""

from __future__ import annotations

from decimal import Decimal
from enum import Enum
from typing import Union

from pydantic import AliasChoices, BaseModel, Field

# Store ids are integers; string ids are accepted for imported data.
ItemId = Union[int, str]


class InvoiceStatus(str, Enum):
    draft = "draft"
    finalized = "finalized"
    cancelled = "cancelled"


class LineItem(BaseModel):
    catalog_item_id: ItemId = Field(
        validation_alias=AliasChoices("catalog_item_id", "catalogItemId", "itemId"),
    )
    quantity: Decimal = Field(ge=0)
    unit_price: Decimal = Field(ge=0, validation_alias=AliasChoices("unit_price", "unitPrice"))
    # Absolute currency amount, not a percentage
    discount: Decimal = Field(default=Decimal("0"), ge=0)


class CatalogItem(BaseModel):
    id: ItemId
    name: str = ""
    description: str | None = None
    hsn_sac: str | None = Field(default=None, validation_alias=AliasChoices("hsn_sac", "hsnSac"))
    unit_price: Decimal = Field(
        default=Decimal("0"), ge=0, validation_alias=AliasChoices("unit_price", "unitPrice")
    )
    default_gst_rate: Decimal = Field(
        default=Decimal("0"),
        ge=0,
        le=100,
        validation_alias=AliasChoices("default_gst_rate", "defaultGstRate"),
    )


class Customer(BaseModel):
    id: ItemId
    name: str = ""
    state: str | None = None
    gstin: str | None = None
    billing_address: str = Field(default="", validation_alias=AliasChoices("billing_address", "billingAddress"))
    contact_info: str | None = Field(default=None, validation_alias=AliasChoices("contact_info", "contactInfo"))


class BankingDetails(BaseModel):
    bank_name: str = Field(default="", validation_alias=AliasChoices("bank_name", "bankName"))
    account_name: str = Field(default="", validation_alias=AliasChoices("account_name", "accountName"))
    account_number: str = Field(default="", validation_alias=AliasChoices("account_number", "accountNumber"))
    ifsc_code: str = Field(default="", validation_alias=AliasChoices("ifsc_code", "ifscCode"))
    branch: str | None = None


class BusinessProfile(BaseModel):
    business_name: str = Field(default="", validation_alias=AliasChoices("business_name", "businessName"))
    state: str | None = None
    gstin: str | None = None
    address: str = ""
    invoice_prefix: str = Field(default="INV", validation_alias=AliasChoices("invoice_prefix", "invoicePrefix"))
    starting_number: int = Field(
        default=1, ge=1, validation_alias=AliasChoices("starting_number", "startingNumber")
    )
    banking_details: BankingDetails | None = Field(
        default=None, validation_alias=AliasChoices("banking_details", "bankingDetails")
    )


class Invoice(BaseModel):
    id: int = Field(ge=0)  # sequential id assigned by the store
    customer_id: ItemId = Field(validation_alias=AliasChoices("customer_id", "customerId"))
    invoice_date: str = Field(validation_alias=AliasChoices("invoice_date", "invoiceDate"))
    line_items: list[LineItem] = Field(
        default_factory=list, validation_alias=AliasChoices("line_items", "lineItems")
    )
    status: InvoiceStatus = InvoiceStatus.draft

    # Explicitly assigned number (manual override or carried over from a prior system)
    invoice_number: str | None = Field(
        default=None, validation_alias=AliasChoices("invoice_number", "invoiceNumber")
    )
    purchase_order_number: str | None = Field(
        default=None, validation_alias=AliasChoices("purchase_order_number", "purchaseOrderNumber")
    )
    # Buyer state override; wins over the customer's registered state when set
    place_of_supply: str | None = Field(
        default=None, validation_alias=AliasChoices("place_of_supply", "placeOfSupply")
    )


def status_label(status: InvoiceStatus) -> str:
    if status == InvoiceStatus.cancelled:
        return "Cancelled"
    return "Draft" if status == InvoiceStatus.draft else "Finalized"
