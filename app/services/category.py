from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

import app.repositories.category as category_repo
from app.db.models.category import Category as CategoryModel
from app.errors import DuplicateResourceError


def create_category(db: Session, name: str) -> CategoryModel:
    """
    Create a category with domain validation.

    Raises:
        DuplicateResourceError: If a category with the same name exists
    """
    if category_repo.get_category_by_name(db, name):
        raise DuplicateResourceError(f"Category '{name}' already exists")

    try:
        return category_repo.create_category(db, name=name)
    except IntegrityError as exc:
        db.rollback()
        raise DuplicateResourceError(f"Category '{name}' already exists") from exc
