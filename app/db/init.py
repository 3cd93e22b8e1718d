from app.models.user import Buyer, Farmer
from app.models.vegetable import Vegetable, FarmerVegetable
from app.db.session import engine, Base

def init_db(bind=None):
    # Create all tables
    Base.metadata.create_all(bind=bind or engine)
