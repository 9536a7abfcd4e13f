"""
HTTP Client for the Gemini text-generation API with retry logic
"""
import logging
from typing import Optional

import httpx
from tenacity import retry, stop_after_attempt, wait_exponential, retry_if_exception_type

from storefront.config import settings

logger = logging.getLogger(__name__)


class TextGenerationError(Exception):
    """Base exception for text-generation errors"""
    pass


class TextGenerationUnavailableError(TextGenerationError):
    """Text-generation service is unreachable"""
    pass


class TextGenerationClient:
    """Client for the Gemini generateContent endpoint"""
    
    def __init__(self, api_key: Optional[str] = None, transport: Optional[httpx.AsyncBaseTransport] = None):
        self.api_key = api_key if api_key is not None else settings.GEMINI_API_KEY
        self.base_url = settings.GEMINI_API_URL.rstrip("/")
        self.model = settings.GEMINI_MODEL
        self.timeout = settings.AI_TIMEOUT
        self.transport = transport
    
    @property
    def configured(self) -> bool:
        """Whether an API key is available"""
        return bool(self.api_key)
    
    @retry(
        stop=stop_after_attempt(settings.MAX_RETRIES),
        wait=wait_exponential(multiplier=settings.RETRY_DELAY, min=1, max=10),
        retry=retry_if_exception_type(TextGenerationUnavailableError),
        reraise=True
    )
    async def generate(self, prompt: str) -> str:
        """
        Generate text for a prompt
        
        Args:
            prompt: Prompt text
        
        Returns:
            Generated text
        
        Raises:
            TextGenerationError: If the API rejects the call or returns no text
            TextGenerationUnavailableError: If the API is unreachable
        """
        if not self.configured:
            raise TextGenerationError("GEMINI_API_KEY is not configured")
        
        url = f"{self.base_url}/models/{self.model}:generateContent"
        payload = {"contents": [{"parts": [{"text": prompt}]}]}
        
        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
                response = await client.post(url, params={"key": self.api_key}, json=payload)
        except (httpx.TimeoutException, httpx.ConnectError) as e:
            logger.warning("Error calling text-generation API: %s", e)
            raise TextGenerationUnavailableError(f"Text-generation API unavailable: {e}")
        except httpx.HTTPError as e:
            raise TextGenerationError(f"Text-generation request failed: {e}")
        
        if response.status_code != 200:
            raise TextGenerationError(f"Unexpected status code: {response.status_code}")
        
        try:
            body = response.json()
        except ValueError:
            raise TextGenerationError("Text-generation API returned invalid JSON")
        return self._extract_text(body)
    
    @staticmethod
    def _extract_text(body: dict) -> str:
        try:
            parts = body["candidates"][0]["content"]["parts"]
        except (KeyError, IndexError, TypeError):
            raise TextGenerationError("Text-generation API returned no candidates")
        if not isinstance(parts, list) or not all(isinstance(part, dict) for part in parts):
            raise TextGenerationError("Text-generation API returned malformed content parts")
        text = "".join(str(part.get("text") or "") for part in parts)
        if not text.strip():
            raise TextGenerationError("Text-generation API returned empty text")
        return text
