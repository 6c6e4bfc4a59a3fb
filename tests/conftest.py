"""Pytest configuration and fixtures."""

import json
from typing import Dict, List
from unittest.mock import Mock

import pytest


@pytest.fixture
def sample_brewery_data() -> List[Dict]:
    """Sample brewery listing as returned by the API."""
    return [
        {
            "id": "5128df48-79fc-4f0f-8b52-d06be54d0cec",
            "name": "Test Brewery 1",
            "brewery_type": "micro",
            "street": "123 Main St",
            "address_1": "123 Main St",
            "city": "San Francisco",
            "state": "California",
            "state_province": "California",
            "postal_code": "94102",
            "country": "United States",
            "longitude": "-122.419906",
            "latitude": "37.774929",
            "phone": "4155551234",
            "website_url": "http://testbrewery1.com",
            "updated_at": "2023-01-04T04:46:02.393Z",
            "created_at": "2023-01-04T04:46:02.393Z",
        },
        {
            "id": "9c5a66c8-cc13-416f-a5d9-0a769c87d318",
            "name": "Test Brewery 2",
            "brewery_type": "regional",
            "street": "456 Oak Ave",
            "city": "Portland",
            "state": "Oregon",
            "postal_code": "97201",
            "country": "United States",
            "longitude": "-122.676207",
            "latitude": "45.520247",
            "updated_at": "2023-01-04T04:46:02.393Z",
            "created_at": "2023-01-04T04:46:02.393Z",
        },
        {
            "id": "34e8c68b-6146-453f-a4b9-1f6cd99a5ada",
            "name": "Test Brewery 3",
            "brewery_type": "micro",
            "street": None,
            "city": "Denver",
            "state": "Colorado",
            "postal_code": "80202",
            "country": "United States",
            "longitude": None,
            "latitude": None,
            "phone": "3035551234",
            "website_url": "http://testbrewery3.com",
            "updated_at": "2023-01-04T04:46:02.393Z",
            "created_at": "2023-01-04T04:46:02.393Z",
        },
    ]


@pytest.fixture
def api_config():
    """Test API configuration."""
    from brewery_fetch.utils.config import APIConfig

    return APIConfig(
        base_url="https://api.openbrewerydb.org/breweries",
        timeout=10,
    )


@pytest.fixture
def make_response():
    """Build a fake requests.Response carrying the given JSON payload."""

    def _make(payload, status_code: int = 200) -> Mock:
        response = Mock()
        response.status_code = status_code
        response.ok = 200 <= status_code < 400
        if isinstance(payload, (bytes, str)):
            response.content = payload if isinstance(payload, bytes) else payload.encode()
        else:
            response.content = json.dumps(payload).encode("utf-8")
        return response

    return _make
