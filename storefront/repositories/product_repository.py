"""
Product Repository - Data Access Layer
"""
from typing import List, Optional
from sqlalchemy.orm import Session
from sqlalchemy.exc import IntegrityError
from sqlalchemy import desc

from storefront.exceptions import ConflictError
from storefront.models.product import Product


class ProductRepository:
    """Repository for Product CRUD operations"""
    
    def __init__(self, db: Session):
        self.db = db
    
    def get_all(self, skip: int = 0, limit: int = 10, store_id: Optional[int] = None) -> List[Product]:
        """Get products, newest first, optionally scoped to one store"""
        query = self.db.query(Product)
        if store_id is not None:
            query = query.filter(Product.store_id == store_id)
        return query.order_by(
            desc(Product.created_at), desc(Product.id)
        ).offset(skip).limit(limit).all()
    
    def get_by_id(self, product_id: int) -> Optional[Product]:
        """Get product by ID"""
        return self.db.query(Product).filter(Product.id == product_id).first()
    
    def create(self, product_data: dict) -> Product:
        """
        Create new product
        
        Raises:
            ConflictError: If the SKU already exists
        """
        product = Product(**product_data)
        self.db.add(product)
        try:
            self.db.commit()
        except IntegrityError:
            self.db.rollback()
            raise ConflictError(f"Product with SKU '{product_data.get('sku')}' already exists.")
        self.db.refresh(product)
        return product
    
    def update(self, product_id: int, update_data: dict) -> Optional[Product]:
        """Update existing product"""
        product = self.get_by_id(product_id)
        if not product:
            return None
        
        # Update only provided fields
        for field, value in update_data.items():
            setattr(product, field, value)
        
        self.db.commit()
        self.db.refresh(product)
        return product
    
    def sku_exists(self, sku: str) -> bool:
        return self.db.query(Product.id).filter(Product.sku == sku).first() is not None
    
    def reserve_stock(self, product_id: int, quantity: int) -> bool:
        """
        Conditionally decrement stock without committing
        
        Returns:
            False if the product does not have `quantity` units left
        """
        updated = self.db.query(Product).filter(
            Product.id == product_id,
            Product.stock >= quantity
        ).update(
            {Product.stock: Product.stock - quantity},
            synchronize_session=False
        )
        return updated == 1
    
    def get_low_stock(self, store_id: int, threshold: int) -> List[Product]:
        """Products with stock strictly below the threshold"""
        return self.db.query(Product).filter(
            Product.store_id == store_id,
            Product.stock < threshold
        ).order_by(Product.stock, Product.id).all()
    
    def count(self, store_id: Optional[int] = None) -> int:
        """Get total count of products"""
        query = self.db.query(Product)
        if store_id is not None:
            query = query.filter(Product.store_id == store_id)
        return query.count()
    
    def count_low_stock(self, store_id: int, threshold: int) -> int:
        return self.db.query(Product).filter(
            Product.store_id == store_id,
            Product.stock < threshold
        ).count()
