"""
RabbitMQ Event Publisher for order lifecycle events
"""
import json
import logging
import uuid
from datetime import datetime, timezone
from typing import Dict

import pika

from storefront.config import settings

logger = logging.getLogger(__name__)

ORDER_CREATED_ROUTING_KEY = "order.created"
ORDER_STATUS_CHANGED_ROUTING_KEY = "order.status.changed"


class EventPublisher:
    """Publisher for sending order events to RabbitMQ"""
    
    def __init__(self):
        self.rabbitmq_url = settings.RABBITMQ_URL
        self.exchange = settings.RABBITMQ_EXCHANGE
    
    def publish_order_created(self, order_data: Dict) -> bool:
        """
        Publish OrderCreated event
        
        Args:
            order_data: Order data to publish
        
        Returns:
            True if published successfully, False otherwise
        """
        return self._publish("OrderCreated", ORDER_CREATED_ROUTING_KEY, order_data)
    
    def publish_order_status_changed(self, order_data: Dict) -> bool:
        """
        Publish OrderStatusChanged event
        
        Args:
            order_data: Order id with old and new status
        
        Returns:
            True if published successfully, False otherwise
        """
        return self._publish("OrderStatusChanged", ORDER_STATUS_CHANGED_ROUTING_KEY, order_data)
    
    def build_event(self, event_type: str, data: Dict) -> Dict:
        """Wrap a payload in the event envelope"""
        return {
            "event_type": event_type,
            "event_id": str(uuid.uuid4()),
            "event_version": "1.0",
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "source": settings.SERVICE_NAME,
            "data": data
        }
    
    def _publish(self, event_type: str, routing_key: str, data: Dict) -> bool:
        event = self.build_event(event_type, data)
        try:
            connection = pika.BlockingConnection(
                pika.URLParameters(self.rabbitmq_url)
            )
            try:
                channel = connection.channel()
                channel.exchange_declare(
                    exchange=self.exchange,
                    exchange_type='topic',
                    durable=True
                )
                
                # Enable publisher confirms
                channel.confirm_delivery()
                
                channel.basic_publish(
                    exchange=self.exchange,
                    routing_key=routing_key,
                    body=json.dumps(event, default=str),
                    properties=pika.BasicProperties(
                        delivery_mode=2,  # Persistent message
                        content_type='application/json',
                        correlation_id=event["event_id"]
                    )
                )
            finally:
                connection.close()
            
            logger.info("Event published: %s (ID: %s)", event_type, event["event_id"])
            return True
        
        except (pika.exceptions.AMQPError, OSError) as e:
            logger.warning("Error publishing %s event: %s", event_type, e)
            return False
