"""
House listing API endpoints for CRUD operations and filtering.
"""

from fastapi import APIRouter, Depends, Path, Query
from typing import Any, Dict, List, Optional
from gohome.schemas.house import HouseCreate, HouseUpdate
from gohome.schemas.result import DeleteResult, InsertResult, UpdateResult
from gohome.services.house import HouseService
from gohome.utils.dependencies import get_house_service
from gohome.utils.serialization import (
    delete_result_to_dict,
    insert_result_to_dict,
    serialize_document,
    serialize_documents,
    update_result_to_dict
)


router = APIRouter(prefix="/houses", tags=["Houses"])


@router.post(
    "",
    response_model=InsertResult,
    summary="Create house listing",
    description="Store the submitted listing fields with a server creation timestamp"
)
async def create_house(
    house_data: HouseCreate,
    house_service: HouseService = Depends(get_house_service)
) -> Dict[str, Any]:
    result = await house_service.create_house(house_data)
    return insert_result_to_dict(result)


@router.get(
    "",
    summary="List house listings",
    description="Optional case-insensitive substring filters on house name and city, combinable"
)
async def list_houses(
    houseName: Optional[str] = Query(None, description="Substring of the listing name"),
    city: Optional[str] = Query(None, description="Substring of the city"),
    house_service: HouseService = Depends(get_house_service)
) -> List[Dict[str, Any]]:
    """
    List house listings.

    Args:
        houseName: Optional name filter
        city: Optional city filter
        house_service: House service instance

    Returns:
        Listings matching every given filter
    """
    houses = await house_service.list_houses(house_name=houseName, city=city)
    return serialize_documents(houses)


@router.get(
    "/{id}",
    summary="Get house listing",
    description="Returns null when there is no listing with this identifier"
)
async def get_house(
    id: str = Path(..., description="Listing identifier"),
    house_service: HouseService = Depends(get_house_service)
) -> Optional[Dict[str, Any]]:
    house = await house_service.get_house(id)
    return serialize_document(house)


@router.put(
    "/{id}",
    response_model=UpdateResult,
    summary="Replace house listing",
    description="Overwrite the listing fields; a missing listing is created under this identifier"
)
async def update_house(
    house_data: HouseUpdate,
    id: str = Path(..., description="Listing identifier"),
    house_service: HouseService = Depends(get_house_service)
) -> Dict[str, Any]:
    """
    Replace a listing's fields with upsert semantics.

    Returns:
        Update result; upsertedId is set when the listing was created
    """
    result = await house_service.update_house(id, house_data)
    return update_result_to_dict(result)


@router.delete(
    "/{id}",
    response_model=DeleteResult,
    summary="Delete house listing"
)
async def delete_house(
    id: str = Path(..., description="Listing identifier"),
    house_service: HouseService = Depends(get_house_service)
) -> Dict[str, Any]:
    result = await house_service.delete_house(id)
    return delete_result_to_dict(result)
