"""
Store and User Repositories - Data Access Layer
"""
from typing import List, Optional
from sqlalchemy.orm import Session
from sqlalchemy.exc import IntegrityError

from storefront.exceptions import ConflictError
from storefront.models.store import Store, User


class StoreRepository:
    """Repository for Store CRUD operations"""
    
    def __init__(self, db: Session):
        self.db = db
    
    def get_all(self) -> List[Store]:
        """Get all stores"""
        return self.db.query(Store).order_by(Store.id).all()
    
    def get_by_id(self, store_id: int) -> Optional[Store]:
        """Get store by ID"""
        return self.db.query(Store).filter(Store.id == store_id).first()
    
    def get_by_slug(self, slug: str) -> Optional[Store]:
        """Get store by slug"""
        return self.db.query(Store).filter(Store.slug == slug).first()
    
    def exists(self, store_id: int) -> bool:
        return self.db.query(Store.id).filter(Store.id == store_id).first() is not None
    
    def create(self, store_data: dict) -> Store:
        """Create new store"""
        store = Store(**store_data)
        self.db.add(store)
        try:
            self.db.commit()
        except IntegrityError:
            self.db.rollback()
            raise ConflictError(f"Store slug '{store_data.get('slug')}' is already taken.")
        self.db.refresh(store)
        return store
    
    def update(self, store_id: int, update_data: dict) -> Optional[Store]:
        """Update only the provided fields"""
        store = self.get_by_id(store_id)
        if not store:
            return None
        
        for field, value in update_data.items():
            setattr(store, field, value)
        
        try:
            self.db.commit()
        except IntegrityError:
            self.db.rollback()
            raise ConflictError(f"Store slug '{update_data.get('slug')}' is already taken.")
        self.db.refresh(store)
        return store
    
    def create_with_owner(self, store_data: dict, user_data: dict) -> User:
        """
        Create a store and its owner in one transaction
        
        Args:
            store_data: Store fields
            user_data: User fields (without store_id)
        
        Returns:
            Created user, with its store loaded
        
        Raises:
            ConflictError: If the slug or email was taken concurrently
        """
        store = Store(**store_data)
        user = User(**user_data, store=store)
        self.db.add_all([store, user])
        try:
            self.db.commit()
        except IntegrityError:
            self.db.rollback()
            raise ConflictError("User email or store slug is already taken.")
        self.db.refresh(user)
        return user


class UserRepository:
    """Repository for merchant accounts"""
    
    def __init__(self, db: Session):
        self.db = db
    
    def get_by_id(self, user_id: int) -> Optional[User]:
        return self.db.query(User).filter(User.id == user_id).first()
    
    def get_by_email(self, email: str) -> Optional[User]:
        return self.db.query(User).filter(User.email == email).first()
