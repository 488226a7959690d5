"""Shared test fixtures for the GST engine test suite."""

from decimal import Decimal

import pytest

from gst_invoice.domain.models.invoice import (
    BusinessProfile,
    CatalogItem,
    Customer,
    Invoice,
    LineItem,
)


@pytest.fixture
def catalog() -> list[CatalogItem]:
    """A small catalog: two goods sharing an HSN code, one service, one item without a code."""
    return [
        CatalogItem(id=1, name="Steel Rod", hsn_sac="7214", unit_price=Decimal("500"), default_gst_rate=Decimal("18")),
        CatalogItem(id=2, name="Steel Bar", hsn_sac="7214", unit_price=Decimal("250"), default_gst_rate=Decimal("18")),
        CatalogItem(id=3, name="Installation", hsn_sac="9954", unit_price=Decimal("1000"), default_gst_rate=Decimal("12")),
        CatalogItem(id=4, name="Packing", hsn_sac=None, unit_price=Decimal("50"), default_gst_rate=Decimal("5")),
    ]


@pytest.fixture
def business_profile() -> BusinessProfile:
    return BusinessProfile(
        business_name="ABC Traders Pvt Ltd",
        state="Karnataka",
        gstin="29AABCU9603R1ZM",
        invoice_prefix="INV",
        starting_number=1,
    )


@pytest.fixture
def local_customer() -> Customer:
    return Customer(id=10, name="Bengaluru Hardware", state="Karnataka")


@pytest.fixture
def outstation_customer() -> Customer:
    return Customer(id=11, name="XYZ Enterprises", state="Maharashtra", gstin="27AADCB2230M1ZP")


@pytest.fixture
def customer_lookup(local_customer, outstation_customer):
    by_id = {c.id: c for c in (local_customer, outstation_customer)}
    return by_id.get


@pytest.fixture
def mixed_lines() -> list[LineItem]:
    """Lines across three HSN buckets, with a discount on one line."""
    return [
        LineItem(catalog_item_id=1, quantity=Decimal("2"), unit_price=Decimal("500")),
        LineItem(catalog_item_id=3, quantity=Decimal("1"), unit_price=Decimal("1000"), discount=Decimal("100")),
        LineItem(catalog_item_id=2, quantity=Decimal("4"), unit_price=Decimal("250")),
        LineItem(catalog_item_id=4, quantity=Decimal("3"), unit_price=Decimal("50")),
    ]


@pytest.fixture
def make_invoice():
    """Factory for a one-line invoice of item 1 (18%)."""

    def _make(invoice_id: int, invoice_date: str, customer_id=10, quantity="1", unit_price="1000", **kwargs):
        return Invoice(
            id=invoice_id,
            customer_id=customer_id,
            invoice_date=invoice_date,
            line_items=[
                LineItem(catalog_item_id=1, quantity=Decimal(quantity), unit_price=Decimal(unit_price)),
            ],
            **kwargs,
        )

    return _make
