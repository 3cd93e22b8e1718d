from sqlalchemy import Column, Integer, DateTime
from sqlalchemy.sql import func
from app.db.session import Base

class BaseModel(Base):
    __abstract__ = True
    
    id = Column(Integer, primary_key=True, index=True)
    created_at = Column(DateTime, default=func.now(), nullable=False)
