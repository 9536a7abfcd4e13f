"""
Store Service - Business Logic Layer
"""
from typing import List

from sqlalchemy.orm import Session

from storefront.exceptions import ConflictError, NotFoundError
from storefront.repositories.store_repository import StoreRepository
from storefront.repositories.product_repository import ProductRepository
from storefront.schemas.product import ProductResponse
from storefront.schemas.store import StoreCreate, StoreUpdate, StoreResponse, StorefrontResponse

# Public storefront page size
STOREFRONT_PRODUCT_LIMIT = 100


class StoreService:
    """Service layer for store business logic"""
    
    def __init__(self, db: Session):
        self.repository = StoreRepository(db)
        self.product_repository = ProductRepository(db)
    
    def get_all_stores(self) -> List[StoreResponse]:
        """Get all stores"""
        return [StoreResponse.model_validate(s) for s in self.repository.get_all()]
    
    def get_storefront(self, slug: str) -> StorefrontResponse:
        """Get a store by slug together with its products"""
        store = self.repository.get_by_slug(slug)
        if not store:
            raise NotFoundError(f"Store with slug '{slug}' not found")
        
        products = self.product_repository.get_all(limit=STOREFRONT_PRODUCT_LIMIT, store_id=store.id)
        return StorefrontResponse(
            **StoreResponse.model_validate(store).model_dump(),
            products=[ProductResponse.model_validate(p) for p in products]
        )
    
    def create_store(self, store_data: StoreCreate) -> StoreResponse:
        """Create a store; the slug must be unused"""
        if self.repository.get_by_slug(store_data.slug):
            raise ConflictError(f"Store slug '{store_data.slug}' is already taken.")
        store = self.repository.create(store_data.model_dump())
        return StoreResponse.model_validate(store)
    
    def update_store(self, store_id: int, store_data: StoreUpdate) -> StoreResponse:
        """Update store settings; only provided fields change"""
        update_data = {
            field: value
            for field, value in store_data.model_dump(exclude_unset=True).items()
            if value is not None or field not in ("name", "slug")
        }
        
        new_slug = update_data.get("slug")
        if new_slug:
            existing = self.repository.get_by_slug(new_slug)
            if existing and existing.id != store_id:
                raise ConflictError(f"Store slug '{new_slug}' is already taken.")
        
        store = self.repository.update(store_id, update_data)
        if not store:
            raise NotFoundError(f"Store with id={store_id} not found")
        return StoreResponse.model_validate(store)
