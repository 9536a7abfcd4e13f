"""
Generated product copy and upload signature endpoints
"""
from fastapi import APIRouter, Depends

from storefront.api.deps import get_ai_service, get_current_user
from storefront.schemas.ai import DescriptionRequest, DescriptionResponse, UploadSignature
from storefront.schemas.auth import TokenClaims
from storefront.services.ai_service import AiService
from storefront.services.upload_service import UploadService

router = APIRouter(tags=["ai"])


@router.post("/ai/description", response_model=DescriptionResponse, summary="Generate product description")
async def generate_description(
    data: DescriptionRequest,
    user: TokenClaims = Depends(get_current_user),
    service: AiService = Depends(get_ai_service)
):
    """
    Two-sentence marketing description for a product
    
    - **name**: Product name
    - **category**: Product category
    """
    return DescriptionResponse(description=await service.generate_description(data.name, data.category))


@router.get("/uploads/signature", response_model=UploadSignature, summary="Get upload signature")
def get_upload_signature(user: TokenClaims = Depends(get_current_user)):
    """Signed credential for uploading a product image directly to Cloudinary"""
    return UploadService().get_upload_signature()
