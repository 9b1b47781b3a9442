from datetime import datetime, timezone

import pytest


@pytest.fixture
def complete_deal():
    """A pending deal row with every optional checklist field filled in."""
    return {
        "id": 101,
        "title": "Noise-cancelling headphones",
        "url": "https://shop.example.com/headphones",
        "price": 199.0,
        "original_price": 349.0,
        "discount_percentage": 43,
        "merchant": "Example Audio",
        "category_id": 7,
        "deal_type": "sale",
        "coupon_code": "QUIET20",
        "coupon_type": "code",
        "starts_at": datetime(2026, 10, 1, tzinfo=timezone.utc),
        "expires_at": datetime(2026, 11, 1, tzinfo=timezone.utc),
        "stock_status": "in_stock",
        "stock_quantity": 40,
        "tags": ["audio", "headphones"],
        "image_url": "https://cdn.example.com/headphones.jpg",
        "description": "Over-ear, 30h battery.",
        "terms_conditions": "While stocks last.",
    }


@pytest.fixture
def complete_coupon():
    """A pending coupon row with every optional checklist field filled in."""
    return {
        "id": 202,
        "title": "10% off groceries",
        "coupon_code": "FRESH10",
        "minimum_order_amount": 50.0,
        "maximum_discount_amount": 15.0,
        "usage_limit": 1000,
        "usage_limit_per_user": 1,
        "starts_at": "2026-10-01T00:00:00Z",
        "expires_at": "2026-12-31T23:59:59Z",
        "source_url": "https://grocer.example.com/offers",
        "category_id": 3,
        "description": "Valid on fresh produce.",
        "terms_conditions": "One use per account.",
    }
