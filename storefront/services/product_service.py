"""
Product Service - Business Logic Layer
"""
from typing import List, Optional
from sqlalchemy.orm import Session

from storefront.exceptions import AuthorizationError, ConflictError, NotFoundError
from storefront.repositories.product_repository import ProductRepository
from storefront.repositories.store_repository import StoreRepository
from storefront.schemas.product import ProductCreate, ProductUpdate, ProductResponse

# Explicit nulls for these are ignored on update
NON_NULLABLE_FIELDS = {"name", "price", "stock", "active"}


class ProductService:
    """Service layer for catalog business logic"""
    
    def __init__(self, db: Session):
        self.repository = ProductRepository(db)
        self.store_repository = StoreRepository(db)
    
    def get_products(self, skip: int = 0, limit: int = 10, store_id: Optional[int] = None) -> List[ProductResponse]:
        """Get products with pagination, newest first"""
        products = self.repository.get_all(skip=skip, limit=limit, store_id=store_id)
        return [ProductResponse.model_validate(p) for p in products]
    
    def get_product_by_id(self, product_id: int) -> ProductResponse:
        """Get product by ID"""
        product = self.repository.get_by_id(product_id)
        if not product:
            raise NotFoundError(f"Product with id={product_id} not found")
        return ProductResponse.model_validate(product)
    
    def create_product(self, product_data: ProductCreate) -> ProductResponse:
        """
        Create new product
        
        Raises:
            NotFoundError: If the store does not exist
            ConflictError: If the SKU is already used by any store
        """
        if not self.store_repository.exists(product_data.store_id):
            raise NotFoundError(f"Store with id={product_data.store_id} not found")
        if self.repository.sku_exists(product_data.sku):
            raise ConflictError(f"Product with SKU '{product_data.sku}' already exists.")
        
        product = self.repository.create(product_data.model_dump())
        return ProductResponse.model_validate(product)
    
    def update_product(
        self,
        product_id: int,
        product_data: ProductUpdate,
        store_id: Optional[int] = None
    ) -> ProductResponse:
        """
        Update existing product
        
        Price changes apply to future orders only; order items keep the
        price they were created with.
        
        Args:
            product_id: Product ID
            product_data: Fields to change
            store_id: When given, the product must belong to this store
        """
        product = self.repository.get_by_id(product_id)
        if not product:
            raise NotFoundError(f"Product with id={product_id} not found")
        if store_id is not None and product.store_id != store_id:
            raise AuthorizationError("You do not have access to this product")
        
        update_data = {
            field: value
            for field, value in product_data.model_dump(exclude_unset=True).items()
            if value is not None or field not in NON_NULLABLE_FIELDS
        }
        product = self.repository.update(product_id, update_data)
        return ProductResponse.model_validate(product)
