import logging
from datetime import datetime, timezone
from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.responses import JSONResponse
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session
from typing import List
from app.db.session import get_db
from app.models.user import Farmer
from app.models.vegetable import Vegetable, FarmerVegetable
from app.schemas.vegetable import (
    Vegetable as VegetableSchema,
    VegetableAdded,
    VegetableCreate,
    FarmerVegetable as FarmerVegetableSchema,
    StockUpdate,
)

logger = logging.getLogger(__name__)

router = APIRouter()


def _server_error(exc: Exception) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"message": "Server error", "error": str(exc)},
    )

# --------------------------------------------------------------------
# Catalog -> GET /vegetables
# --------------------------------------------------------------------
@router.get("/vegetables", response_model=List[VegetableSchema])
def read_vegetables(db: Session = Depends(get_db)):
    try:
        vegetables = db.query(Vegetable).order_by(Vegetable.id).all()
    except SQLAlchemyError as e:
        logger.exception("Error fetching vegetables")
        return _server_error(e)
    logger.debug("Fetched %d vegetables", len(vegetables))
    return vegetables

# --------------------------------------------------------------------
# Add to catalog -> POST /addvegetable
# --------------------------------------------------------------------
@router.post("/addvegetable", response_model=VegetableAdded, status_code=status.HTTP_201_CREATED)
def add_vegetable(
    vegetable: VegetableCreate,
    db: Session = Depends(get_db)
):
    if not vegetable.name or not vegetable.image:
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"message": "Name and image are required"},
        )

    db_vegetable = Vegetable(
        name=vegetable.name,
        image=vegetable.image,
        created_at=datetime.now(timezone.utc),
    )
    try:
        db.add(db_vegetable)
        db.commit()
        db.refresh(db_vegetable)
    except SQLAlchemyError as e:
        db.rollback()
        logger.exception("Error adding vegetable")
        return _server_error(e)

    logger.info("Vegetable added: %s (%s)", db_vegetable.name, db_vegetable.id)
    return VegetableAdded(
        message="Vegetable added successfully",
        vegetable=VegetableSchema.model_validate(db_vegetable),
    )

def _find_stock(db: Session, farmer_id: int, vegetable_id: int):
    return db.query(FarmerVegetable).filter(
        FarmerVegetable.farmer_id == farmer_id,
        FarmerVegetable.vegetable_id == vegetable_id,
    ).first()


def _save_stock(db: Session, farmer_id: int, vegetable_id: int, quantity: float) -> FarmerVegetable:
    now = datetime.now(timezone.utc)
    db_stock = _find_stock(db, farmer_id, vegetable_id)
    if db_stock is None:
        db_stock = FarmerVegetable(
            farmer_id=farmer_id,
            vegetable_id=vegetable_id,
            created_at=now,
        )
    db_stock.quantity = quantity
    db_stock.updated_at = now

    db.add(db_stock)
    db.commit()
    db.refresh(db_stock)
    return db_stock

# --------------------------------------------------------------------
# Farmer stock -> GET /farmers/{farmer_id}/vegetables
# --------------------------------------------------------------------
@router.get("/farmers/{farmer_id}/vegetables", response_model=List[FarmerVegetableSchema])
def read_farmer_vegetables(
    farmer_id: int,
    db: Session = Depends(get_db)
):
    try:
        if db.get(Farmer, farmer_id) is None:
            raise HTTPException(status_code=404, detail="Farmer not found")

        stock = (
            db.query(FarmerVegetable)
            .filter(FarmerVegetable.farmer_id == farmer_id)
            .order_by(FarmerVegetable.vegetable_id)
            .all()
        )
        return [FarmerVegetableSchema.model_validate(s) for s in stock]
    except SQLAlchemyError as e:
        logger.exception("Error fetching stock for farmer %s", farmer_id)
        return _server_error(e)

# --------------------------------------------------------------------
# Set farmer stock -> PUT /farmers/{farmer_id}/vegetables/{vegetable_id}
# --------------------------------------------------------------------
@router.put("/farmers/{farmer_id}/vegetables/{vegetable_id}", response_model=FarmerVegetableSchema)
def update_farmer_vegetable(
    farmer_id: int,
    vegetable_id: int,
    stock: StockUpdate,
    db: Session = Depends(get_db)
):
    try:
        if db.get(Farmer, farmer_id) is None:
            raise HTTPException(status_code=404, detail="Farmer not found")
        if db.get(Vegetable, vegetable_id) is None:
            raise HTTPException(status_code=404, detail="Vegetable not found")

        try:
            db_stock = _save_stock(db, farmer_id, vegetable_id, stock.quantity)
        except IntegrityError:
            # A concurrent first write created the row; update that one instead
            db.rollback()
            db_stock = _save_stock(db, farmer_id, vegetable_id, stock.quantity)
        return FarmerVegetableSchema.model_validate(db_stock)
    except SQLAlchemyError as e:
        db.rollback()
        logger.exception("Error updating stock for farmer %s", farmer_id)
        return _server_error(e)
