import pytest

from seller_analytics import AnalysisOptions

from .factories import make_item


@pytest.fixture
def options():
    return AnalysisOptions()


@pytest.fixture
def sample_data():
    """Four sellers with distinct positive profits: seller_3 > seller_1 > seller_4 > seller_2."""
    return {
        "sellers": [
            {"id": "seller_1", "first_name": "Alexey", "last_name": "Petrov"},
            {"id": "seller_2", "first_name": "Maria", "last_name": "Lopez"},
            {"id": "seller_3", "first_name": "Kenji", "last_name": "Sato"},
            {"id": "seller_4", "first_name": "Ada", "last_name": "Byrne"},
        ],
        "products": [
            {"sku": "SKU_001", "purchase_price": 10},
            {"sku": "SKU_002", "purchase_price": 4.5},
            {"sku": "SKU_003", "purchase_price": 100},
        ],
        "purchase_records": [
            # seller_1: revenue 60 + 27 = 87, cost 40 + 18 = 58, profit 29
            {
                "seller_id": "seller_1",
                "items": [make_item("SKU_001", 4, 15), make_item("SKU_002", 4, 7.5, 10)],
            },
            # seller_2: revenue 12, cost 10, profit 2
            {"seller_id": "seller_2", "items": [make_item("SKU_001", 1, 12)]},
            # seller_3: revenue 150, cost 100, profit 50
            {"seller_id": "seller_3", "items": [make_item("SKU_003", 1, 150)]},
            # seller_4: revenue 20, cost 9, profit 11
            {"seller_id": "seller_4", "items": [make_item("SKU_002", 2, 10)]},
        ],
    }
