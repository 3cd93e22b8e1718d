from datetime import datetime
from typing import Optional
from pydantic import BaseModel, Field
from app.schemas.base import TimestampSchema

class VegetableCreate(BaseModel):
    name: Optional[str] = None
    image: Optional[str] = None

class Vegetable(TimestampSchema):
    id: int
    name: str
    image: str

class VegetableAdded(BaseModel):
    message: str
    vegetable: Vegetable

class StockUpdate(BaseModel):
    quantity: float = Field(ge=0)

class FarmerVegetable(TimestampSchema):
    id: int
    farmer_id: int
    vegetable_id: int
    quantity: float
    updated_at: datetime
    vegetable: Vegetable
