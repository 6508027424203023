"""Pytest fixtures for catalog, pagination and API tests."""

import pytest
from fastapi.testclient import TestClient

from storefront.core.config import Settings
from storefront.database.catalog import Catalog
from storefront.main import create_app
from storefront.middleware import NO_DELAY
from storefront.models.product import RawProduct

CATEGORY_NAMES = ["Coffee", "Tea", "Bakery"]


def make_raw_products(count, categories=CATEGORY_NAMES):
    """Raw products cycling through the given category names"""
    return [
        RawProduct(
            name=f"Product {i + 1}",
            description=f"Description of product {i + 1}",
            price=f"{i + 1}.99",
            currency="USD",
            category=categories[i % len(categories)],
            available=i % 4 != 0,
            min_amount=1,
            max_amount=10,
            image=f"/public/images/product-{i + 1}.svg",
        )
        for i in range(count)
    ]


@pytest.fixture
def raw_products():
    """25 products across 3 categories"""
    return make_raw_products(25)


@pytest.fixture
def catalog(raw_products):
    return Catalog.from_raw(raw_products)


@pytest.fixture
def public_dir(tmp_path):
    directory = tmp_path / "public"
    (directory / "images").mkdir(parents=True)
    (directory / "images" / "logo.svg").write_text("<svg/>")
    return directory


@pytest.fixture
def settings(public_dir):
    return Settings(public_dir=str(public_dir), request_timeout=6.0, latency_enabled=False)


@pytest.fixture
def client(settings, catalog):
    """Client for an app with latency injection switched off"""
    app = create_app(settings=settings, catalog=catalog)
    with TestClient(app) as test_client:
        yield test_client
