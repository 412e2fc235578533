"""Pytest configuration and fixtures for stayquote tests.

This module provides reusable fixtures for testing:
- DynamoDB mocking with moto
- Sample pricing configurations (the documented 7-night example)
"""

import os
from decimal import Decimal
from typing import Any, Generator

import boto3
import pytest
from moto import mock_aws

from stayquote.models import AdditionalService, BookingKind, PricingConfig

# === Environment Setup ===

os.environ.setdefault("AWS_DEFAULT_REGION", "us-east-1")
os.environ.setdefault("DYNAMODB_TABLE_PREFIX", "test-stayquote")

if not os.environ.get("AWS_PROFILE") and not os.environ.get("AWS_ACCESS_KEY_ID"):
    os.environ.setdefault("AWS_ACCESS_KEY_ID", "testing")
    os.environ.setdefault("AWS_SECRET_ACCESS_KEY", "testing")

TABLE_PREFIX = os.environ["DYNAMODB_TABLE_PREFIX"]


# === Singleton Reset ===


@pytest.fixture(autouse=True)
def reset_singletons() -> Generator[None, None, None]:
    """Reset the DynamoDB singleton and cached stores around each test."""
    from stayquote.api.dependencies import reset_services
    from stayquote.services.dynamodb import reset_dynamodb_service

    reset_dynamodb_service()
    reset_services()
    yield
    reset_dynamodb_service()
    reset_services()


# === DynamoDB Fixtures ===


@pytest.fixture
def aws_credentials() -> None:
    """Mocked AWS credentials for moto."""
    if not os.environ.get("AWS_PROFILE"):
        os.environ["AWS_ACCESS_KEY_ID"] = "testing"
        os.environ["AWS_SECRET_ACCESS_KEY"] = "testing"
        os.environ["AWS_SECURITY_TOKEN"] = "testing"
        os.environ["AWS_SESSION_TOKEN"] = "testing"
    os.environ["AWS_DEFAULT_REGION"] = "us-east-1"


@pytest.fixture
def dynamodb_client(aws_credentials: None) -> Generator[Any, None, None]:
    """Create a mocked DynamoDB client."""
    with mock_aws():
        client = boto3.client("dynamodb", region_name="us-east-1")
        yield client


@pytest.fixture
def create_tables(dynamodb_client: Any) -> None:
    """Create all DynamoDB tables used by the stores."""
    tables = [
        {
            "TableName": f"{TABLE_PREFIX}-pricing-configs",
            "KeySchema": [{"AttributeName": "property_id", "KeyType": "HASH"}],
            "AttributeDefinitions": [
                {"AttributeName": "property_id", "AttributeType": "S"},
            ],
            "BillingMode": "PAY_PER_REQUEST",
        },
        {
            "TableName": f"{TABLE_PREFIX}-calendar-overrides",
            "KeySchema": [
                {"AttributeName": "property_id", "KeyType": "HASH"},
                {"AttributeName": "override_key", "KeyType": "RANGE"},
            ],
            "AttributeDefinitions": [
                {"AttributeName": "property_id", "AttributeType": "S"},
                {"AttributeName": "override_key", "AttributeType": "S"},
            ],
            "BillingMode": "PAY_PER_REQUEST",
        },
        {
            "TableName": f"{TABLE_PREFIX}-reservation-quotes",
            "KeySchema": [{"AttributeName": "reservation_id", "KeyType": "HASH"}],
            "AttributeDefinitions": [
                {"AttributeName": "reservation_id", "AttributeType": "S"},
            ],
            "BillingMode": "PAY_PER_REQUEST",
        },
    ]

    for table_config in tables:
        dynamodb_client.create_table(**table_config)


# === Sample Data Fixtures ===


@pytest.fixture
def sample_config() -> PricingConfig:
    """Pricing config of the documented example.

    180,000 per night, low season multiplier 0.9, no discount for 2 guests,
    10% for a 6-7 night stay, 50,000 cleaning, 5% service fee, 5,000
    tourism tax per night and 19% IVA.
    """
    return PricingConfig(
        property_id="jardin-aguilas",
        base_price_per_night=Decimal("180000"),
        seasonal_multipliers={
            "low": Decimal("0.9"),
            "medium": Decimal("1.0"),
            "high": Decimal("1.2"),
            "peak": Decimal("1.4"),
        },
        group_discounts={
            "1": Decimal("0"),
            "2": Decimal("0"),
            "3-4": Decimal("0.05"),
            "5-6": Decimal("0.10"),
            "7-8": Decimal("0.15"),
            "9+": Decimal("0.20"),
        },
        stay_discounts={
            "1": Decimal("0"),
            "2": Decimal("0"),
            "3-5": Decimal("0.05"),
            "6-7": Decimal("0.10"),
            "8-14": Decimal("0.15"),
            "15+": Decimal("0.20"),
        },
        cleaning_fee=Decimal("50000"),
        service_fee_percentage=Decimal("0.05"),
        tourism_tax_per_night=Decimal("5000"),
        iva_percentage=Decimal("0.19"),
        apply_iva=True,
        max_guests=8,
        additional_services={
            "desayuno": AdditionalService(label="Desayuno incluido", price=Decimal("25000")),
            "traslado-aeropuerto": AdditionalService(
                label="Traslado al aeropuerto", price=Decimal("50000")
            ),
            "cena-privada": AdditionalService(label="Cena privada", price=Decimal("150000")),
        },
    )


@pytest.fixture
def flat_config() -> PricingConfig:
    """100,000 per night with no seasons, discounts, fees or taxes."""
    return PricingConfig(
        property_id="flat-cabin",
        base_price_per_night=Decimal("100000"),
    )


@pytest.fixture
def tour_config() -> PricingConfig:
    """Single-day tour priced at 120,000 with a 10% discount for 3-4 guests."""
    return PricingConfig(
        property_id="isla-cholon",
        kind=BookingKind.TOUR,
        base_price_per_night=Decimal("120000"),
        seasonal_multipliers={"high": Decimal("1.2")},
        group_discounts={"3-4": Decimal("0.10")},
        service_fee_percentage=Decimal("0.05"),
        tourism_tax_per_night=Decimal("5000"),
        iva_percentage=Decimal("0.19"),
        apply_iva=True,
    )
