from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from app.api.deps import get_db
import app.repositories.category as category_repo
from app.services.category import create_category
from app.schemas.category import Category, CategoryCreate

router = APIRouter(prefix="/categories", tags=["categories"])


@router.get("", response_model=list[Category])
def get_all_categories(db: Session = Depends(get_db)):
    """Get all categories."""
    categories = category_repo.get_all_categories(db)
    return [Category.model_validate(category) for category in categories]


@router.post("", response_model=Category, status_code=status.HTTP_201_CREATED)
def create_new_category(category_data: CategoryCreate, db: Session = Depends(get_db)):
    """
    Create a new category. Names are unique.
    """
    category = create_category(db, name=category_data.name)
    return Category.model_validate(category)
