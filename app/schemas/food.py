"""
GetUs.Fit API - Food Lookup Schemas.
"""

from typing import Optional

from pydantic import BaseModel, Field


class FoodItem(BaseModel):
    """
    Nutrition facts for one product, per 100g.

    Values the food database does not know are null.
    """

    name: str = Field(..., description="Product name")
    calories: Optional[float] = Field(None, description="kcal per 100g")
    protein: Optional[float] = Field(None, description="Protein grams per 100g")
    carbs: Optional[float] = Field(None, description="Carbohydrate grams per 100g")
    fat: Optional[float] = Field(None, description="Fat grams per 100g")
