"""Address geocoding endpoints."""

from __future__ import annotations

from fastapi import APIRouter, HTTPException, Query, status

from ...schemas.geocoding import GeocodeResponse
from ...services.geocoding import extract_house_number, get_geocoder, normalize_postal_code

router = APIRouter(prefix="/geocode", tags=["geocoding"])


@router.get("", response_model=GeocodeResponse, status_code=status.HTTP_200_OK)
def geocode(
    postal_code: str = Query(..., min_length=4, description="Dutch postal code, e.g. '1234 AB'."),
    address: str = Query(..., min_length=1, description="Street address including the house number."),
) -> GeocodeResponse:
    house_number = extract_house_number(address)
    if not house_number:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"No house number found in address '{address}'.",
        )

    coordinate = get_geocoder().geocode(postal_code, house_number)
    if coordinate is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Address {normalize_postal_code(postal_code)} {house_number} could not be geocoded.",
        )
    return GeocodeResponse(
        postal_code=normalize_postal_code(postal_code),
        house_number=house_number,
        lat=coordinate.latitude,
        lng=coordinate.longitude,
    )
