"""
Pydantic schemas for generated text and upload signatures
"""
from pydantic import Field

from storefront.schemas.base import CamelModel


class DescriptionRequest(CamelModel):
    """Inputs for a product description"""
    name: str = Field(..., min_length=1, max_length=255)
    category: str = Field(..., min_length=1, max_length=100)


class DescriptionResponse(CamelModel):
    description: str


class SalesSummaryResponse(CamelModel):
    summary: str


class UploadSignature(CamelModel):
    """Signed-upload credential for the asset host"""
    signature: str
    timestamp: int
    cloud_name: str
    api_key: str
