"""Brewery record schema and the strict decoder for listing responses."""

from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict, TypeAdapter


class Brewery(BaseModel):
    """A single brewery as returned by the listing endpoint."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    id: str
    name: str
    brewery_type: str
    street: Optional[str] = None
    city: str
    state: str
    postal_code: str
    country: str
    longitude: Optional[str] = None
    latitude: Optional[str] = None
    phone: Optional[str] = None
    website_url: Optional[str] = None
    updated_at: str
    created_at: str

    def to_wire(self) -> Dict[str, Any]:
        """Return the wire mapping, leaving out absent optional fields."""
        return self.model_dump(mode="json", exclude_none=True)


_BREWERY_LIST = TypeAdapter(List[Brewery])


def decode_breweries(body: Union[str, bytes]) -> List[Brewery]:
    """
    Decode a JSON array of breweries.

    Args:
        body: Raw response body

    Returns:
        Breweries in the order they appear in the array

    Raises:
        pydantic.ValidationError: If the body is not valid JSON, is not an
            array, or any element misses or mistypes a required field
    """
    return _BREWERY_LIST.validate_json(body)
