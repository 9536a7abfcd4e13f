"""
AI Service - product copy and sales summaries from a text-generation model

Without an API key both operations return canned text so the dashboard
keeps working in development.
"""
import logging
from typing import Optional

from storefront.exceptions import UpstreamUnavailableError
from storefront.schemas.analytics import SalesData
from storefront.services.text_generation_client import TextGenerationClient, TextGenerationError

logger = logging.getLogger(__name__)

DESCRIPTION_PROMPT = (
    'Write a compelling, professional, and exciting 2-sentence product description '
    'for a product name "{name}" in the category "{category}". '
    'Highlight its key benefits using persuasive sales language.'
)

SALES_SUMMARY_PROMPT = """
Act as a Retail Manager. Analyze this sales data for the week:
- Total Revenue: ${total_revenue}
- Total Orders: {total_orders}
- Top Selling Products: {top_selling}
- Low Stock Alerts: {low_stock}

Write a concise 3-bullet point summary for the store owner.
1. Revenue Insight
2. Inventory Action Item
3. Sales Trend
"""


def fallback_description(name: str, category: str) -> str:
    return (
        f"[MOCK AI] Experience the ultimate {category} with the new {name}. "
        f"Designed for performance and style. (Real AI requires GEMINI_API_KEY in .env)"
    )


def fallback_sales_summary(data: SalesData) -> str:
    top_item = data.top_selling[0] if data.top_selling else "None"
    return (
        f"[MOCK AI SUMMARY] Revenue: ${data.total_revenue}. Top Item: {top_item}. "
        f"(Add GEMINI_API_KEY for real insights)"
    )


class AiService:
    """Text Generation Adapter"""
    
    def __init__(self, client: Optional[TextGenerationClient] = None):
        self.client = client or TextGenerationClient()
    
    async def generate_description(self, name: str, category: str) -> str:
        """
        Generate a short marketing description for a product
        
        Falls back to a template when the model is unconfigured or fails.
        """
        if not self.client.configured:
            logger.warning("GEMINI_API_KEY is missing. Returning mock description.")
            return fallback_description(name, category)
        
        try:
            return await self.client.generate(DESCRIPTION_PROMPT.format(name=name, category=category))
        except TextGenerationError as e:
            logger.error("Description generation failed, using fallback: %s", e)
            return fallback_description(name, category)
    
    async def generate_sales_summary(self, data: SalesData) -> str:
        """
        Turn sales aggregates into a three-point summary for the merchant
        
        Raises:
            UpstreamUnavailableError: If the configured model call fails
        """
        if not self.client.configured:
            logger.warning("GEMINI_API_KEY is missing. Returning mock sales summary.")
            return fallback_sales_summary(data)
        
        prompt = SALES_SUMMARY_PROMPT.format(
            total_revenue=data.total_revenue,
            total_orders=data.total_orders,
            top_selling=", ".join(data.top_selling),
            low_stock=", ".join(data.low_stock)
        )
        try:
            return await self.client.generate(prompt)
        except TextGenerationError as e:
            logger.exception("Sales summary generation failed")
            raise UpstreamUnavailableError(f"Failed to generate sales summary: {e}")
