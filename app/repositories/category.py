from sqlalchemy.orm import Session

from app.db.models.category import Category as CategoryModel


def get_category_by_id(db: Session, category_id: int) -> CategoryModel | None:
    """Get a category by ID."""
    return db.query(CategoryModel).filter(CategoryModel.id == category_id).first()


def get_category_by_name(db: Session, name: str) -> CategoryModel | None:
    """Get a category by its name. Used to check for duplicates."""
    return db.query(CategoryModel).filter(CategoryModel.name == name).first()


def get_all_categories(db: Session) -> list[CategoryModel]:
    """Get all categories."""
    return db.query(CategoryModel).order_by(CategoryModel.id).all()


def create_category(db: Session, name: str) -> CategoryModel:
    """Create a new category in the database. Pure data access - no business logic."""
    db_category = CategoryModel(name=name)
    db.add(db_category)
    db.commit()
    db.refresh(db_category)
    return db_category
