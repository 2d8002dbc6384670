"""Data models for menu documents stored in Firestore"""
from pydantic import BaseModel, Field
from typing import Optional, List, Dict, Any


class MenuVariant(BaseModel):
    """One orderable size/option of a menu item"""
    id: str
    name: str
    basePrice: float = Field(ge=0, description="Restaurant price in dollars")
    platformPricing: Dict[str, float] = Field(
        default_factory=dict,
        description="Delivery platform -> displayed price, derived from basePrice"
    )
    size: Optional[str] = None
    description: Optional[str] = None
    options: Optional[List[Any]] = None
    prepMethod: Optional[str] = None
    count: Optional[int] = None
    slices: Optional[int] = None

    class Config:
        # Variant fields differ by menu category
        extra = "allow"

    def to_firestore(self) -> dict:
        return self.model_dump(exclude_none=True)


class MenuItem(BaseModel):
    """Menu document owning an ordered list of variants"""
    id: str
    name: str
    category: Optional[str] = None
    description: Optional[str] = None
    imageUrl: Optional[str] = None
    active: bool = True
    variants: List[MenuVariant] = Field(default_factory=list)

    class Config:
        extra = "allow"

    def to_firestore(self) -> dict:
        return self.model_dump(exclude_none=True)
