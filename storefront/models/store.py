"""
SQLAlchemy Store and User models
"""
from sqlalchemy import Column, Integer, String, DateTime, Text, ForeignKey
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from storefront.database import Base


class Store(Base):
    """Store (tenant) database model"""
    
    __tablename__ = "stores"
    
    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    name = Column(String(255), nullable=False)
    slug = Column(String(255), nullable=False, unique=True, index=True)
    about = Column(Text, nullable=True)
    template = Column(String(50), nullable=True)
    hero_image = Column(String(500), nullable=True)
    primary_color = Column(String(20), nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    
    products = relationship(
        "Product",
        back_populates="store",
        cascade="all, delete-orphan",
        order_by="Product.id",
    )
    orders = relationship("Order", back_populates="store", cascade="all, delete-orphan")
    users = relationship("User", back_populates="store", cascade="all, delete-orphan")
    
    def __repr__(self):
        return f"<Store(id={self.id}, slug='{self.slug}')>"


class User(Base):
    """Merchant account; each user belongs to one store"""
    
    __tablename__ = "users"
    
    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    email = Column(String(255), nullable=False, unique=True, index=True)
    password_hash = Column(String(255), nullable=False)
    name = Column(String(255), nullable=False)
    role = Column(String(50), nullable=False, default="OWNER")
    store_id = Column(Integer, ForeignKey("stores.id", ondelete="CASCADE"), nullable=False, index=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    
    store = relationship("Store", back_populates="users")
    
    def __repr__(self):
        return f"<User(id={self.id}, email='{self.email}', role='{self.role}')>"
