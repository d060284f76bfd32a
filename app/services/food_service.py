"""
GetUs.Fit API - Food Lookup Service.

Text search and barcode lookup against Open Food Facts. Nutrient values are
returned per 100g; any upstream problem surfaces as UpstreamError so callers
can fall back to manual entry.
"""

from typing import Any, Dict, List, Optional
import logging

import httpx

from settings import settings
from app.utils.errors import NotFoundError, UpstreamError

logger = logging.getLogger(__name__)

PRODUCT_FIELDS = "product_name,nutriments"


def _nutrients(product: Dict[str, Any], name: Optional[str] = None) -> Dict[str, Any]:
    nutriments = product.get("nutriments") or {}
    return {
        "name": name or product.get("product_name"),
        "calories": nutriments.get("energy-kcal_100g"),
        "protein": nutriments.get("proteins_100g"),
        "carbs": nutriments.get("carbohydrates_100g"),
        "fat": nutriments.get("fat_100g"),
    }


class FoodService:
    """Client for the Open Food Facts API."""

    def __init__(self, transport: Optional[httpx.AsyncBaseTransport] = None):
        """
        Args:
            transport: Optional httpx transport (tests pass a MockTransport).
        """
        self.client = httpx.AsyncClient(
            base_url=settings.FOOD_API_URL,
            timeout=settings.FOOD_API_TIMEOUT,
            headers={"User-Agent": settings.FOOD_API_USER_AGENT},
            transport=transport,
        )

    async def _get_json(self, path: str, params: Dict[str, Any], failure: str) -> Dict[str, Any]:
        try:
            response = await self.client.get(path, params=params)
            response.raise_for_status()
            return response.json()
        except (httpx.HTTPError, ValueError) as e:
            logger.error(f"Food API request to {path} failed: {e}")
            raise UpstreamError(f"{failure} unavailable. Please enter details manually.")

    async def search(self, query: str, page_size: int = 10) -> List[Dict[str, Any]]:
        """
        Search products by name.

        Returns:
            List of {name, calories, protein, carbs, fat}; unnamed products skipped.

        Raises:
            UpstreamError: API unreachable, timed out or returned an error.
        """
        data = await self._get_json(
            "/cgi/search.pl",
            {
                "search_terms": query,
                "json": "true",
                "page_size": page_size,
                "fields": PRODUCT_FIELDS,
            },
            "Food search",
        )
        return [
            _nutrients(product)
            for product in data.get("products") or []
            if product.get("product_name")
        ]

    async def lookup_barcode(self, barcode: str) -> Dict[str, Any]:
        """
        Look up a single product by barcode.

        Raises:
            NotFoundError: No product for this barcode.
            UpstreamError: API unreachable, timed out or returned an error.
        """
        data = await self._get_json(
            f"/api/v2/product/{barcode}.json",
            {"fields": PRODUCT_FIELDS},
            "Barcode lookup",
        )
        product = data.get("product")
        if data.get("status") != 1 or not product:
            raise NotFoundError("Product not found for this barcode.")
        return _nutrients(product, name=product.get("product_name") or "Unknown product")

    async def close(self) -> None:
        await self.client.aclose()


_food_service: Optional[FoodService] = None


def get_food_service() -> FoodService:
    """Shared FoodService instance (FastAPI dependency)."""
    global _food_service
    if _food_service is None:
        _food_service = FoodService()
    return _food_service


async def close_food_service() -> None:
    """Close the shared client; the next get_food_service() builds a new one."""
    global _food_service
    if _food_service is not None:
        await _food_service.close()
        _food_service = None
