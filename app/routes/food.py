"""
GetUs.Fit API - Food Lookup Routes.

Proxy to the food database so clients can prefill meal entries.
"""

import re
from typing import List, Optional

from fastapi import APIRouter, Depends, Query

from app.dependencies import get_current_caller
from app.schemas.food import FoodItem
from app.services.authorization import Caller, Operation, authorize, enforce
from app.services.food_service import FoodService, get_food_service
from app.utils.errors import ValidationError

router = APIRouter()

BARCODE_PATTERN = re.compile(r"^\d{6,14}$")


@router.get("/search", response_model=List[FoodItem])
async def search_food(
    q: Optional[str] = Query(None, description="Product name to search for"),
    caller: Caller = Depends(get_current_caller),
    food_service: FoodService = Depends(get_food_service)
):
    """
    Search products by name.

    Raises:
        ValidationError 400: Empty query
        UpstreamError 503: Food database unavailable
    """
    enforce(authorize(caller, Operation.SEARCH_FOOD))
    query = (q or "").strip()
    if not query:
        raise ValidationError("Query parameter q is required.")
    return await food_service.search(query)


@router.get("/barcode/{barcode}", response_model=FoodItem)
async def lookup_barcode(
    barcode: str,
    caller: Caller = Depends(get_current_caller),
    food_service: FoodService = Depends(get_food_service)
):
    """
    Look up a product by its 6-14 digit barcode.

    Raises:
        ValidationError 400: Malformed barcode
        NotFoundError 404: Unknown barcode
        UpstreamError 503: Food database unavailable
    """
    enforce(authorize(caller, Operation.SEARCH_FOOD))
    barcode = barcode.strip()
    if not BARCODE_PATTERN.match(barcode):
        raise ValidationError("Invalid barcode format.")
    return await food_service.lookup_barcode(barcode)
