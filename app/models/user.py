from sqlalchemy import Column, String
from app.models.base import BaseModel

class UserAccount(BaseModel):
    __abstract__ = True

    # Unique per table, so a phone may appear once as buyer and once as farmer
    name = Column(String(100), nullable=False)
    phone = Column(String(20), unique=True, index=True, nullable=False)
    location = Column(String(100), nullable=False)
    hashed_password = Column(String(255), nullable=False)

class Buyer(UserAccount):
    __tablename__ = "buyers"

class Farmer(UserAccount):
    __tablename__ = "farmers"
