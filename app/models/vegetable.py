from sqlalchemy import Column, String, Numeric, ForeignKey, Integer, DateTime, UniqueConstraint
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from app.models.base import BaseModel

class Vegetable(BaseModel):
    __tablename__ = "vegetables"
    
    name = Column(String(100), nullable=False)
    image = Column(String(255), nullable=False)

class FarmerVegetable(BaseModel):
    __tablename__ = "farmer_vegetables"
    __table_args__ = (UniqueConstraint("farmer_id", "vegetable_id"),)
    
    farmer_id = Column(Integer, ForeignKey('farmers.id'), nullable=False)
    vegetable_id = Column(Integer, ForeignKey('vegetables.id'), nullable=False)
    quantity = Column(Numeric(10, 2), nullable=False, default=0)
    updated_at = Column(DateTime, default=func.now(), onupdate=func.now(), nullable=False)
    
    farmer = relationship("Farmer")
    vegetable = relationship("Vegetable")
