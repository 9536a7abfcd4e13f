"""
Upload Service - signed upload credentials for the image host
"""
import time

import cloudinary.utils

from storefront.config import settings
from storefront.exceptions import UpstreamUnavailableError
from storefront.schemas.ai import UploadSignature


class UploadService:
    """Signs direct browser uploads to Cloudinary"""
    
    def get_upload_signature(self) -> UploadSignature:
        """
        Sign the current timestamp with the Cloudinary secret
        
        Raises:
            UpstreamUnavailableError: If Cloudinary credentials are not configured
        """
        if not (settings.CLOUDINARY_CLOUD_NAME and settings.CLOUDINARY_API_KEY and settings.CLOUDINARY_API_SECRET):
            raise UpstreamUnavailableError("Image uploads are not configured")
        
        timestamp = int(time.time())
        signature = cloudinary.utils.api_sign_request(
            {"timestamp": timestamp},
            settings.CLOUDINARY_API_SECRET
        )
        return UploadSignature(
            signature=signature,
            timestamp=timestamp,
            cloud_name=settings.CLOUDINARY_CLOUD_NAME,
            api_key=settings.CLOUDINARY_API_KEY
        )
