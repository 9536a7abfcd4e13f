"""
Order event publishing
"""
import json

import pika

from storefront.publishers import event_publisher
from storefront.publishers.event_publisher import EventPublisher


class RecordingChannel:
    def __init__(self):
        self.published = []
    
    def exchange_declare(self, **kwargs):
        self.exchange = kwargs
    
    def confirm_delivery(self):
        pass
    
    def basic_publish(self, **kwargs):
        self.published.append(kwargs)


class RecordingConnection:
    def __init__(self, params):
        self.channel_obj = RecordingChannel()
        self.closed = False
    
    def channel(self):
        return self.channel_obj
    
    def close(self):
        self.closed = True


def test_event_envelope():
    event = EventPublisher().build_event("OrderCreated", {"order_id": 1})
    
    assert event["event_type"] == "OrderCreated"
    assert event["source"] == "storefront-service"
    assert event["data"] == {"order_id": 1}
    assert event["event_id"]


def test_publish_order_created(monkeypatch):
    connections = []
    
    def connect(params):
        connection = RecordingConnection(params)
        connections.append(connection)
        return connection
    
    monkeypatch.setattr(event_publisher.pika, "BlockingConnection", connect)
    
    assert EventPublisher().publish_order_created({"order_id": 7, "total": "9.00"})
    
    connection = connections[0]
    message = connection.channel_obj.published[0]
    assert message["routing_key"] == "order.created"
    assert json.loads(message["body"])["data"] == {"order_id": 7, "total": "9.00"}
    assert connection.closed


def test_publish_returns_false_when_broker_down(monkeypatch):
    def refuse(params):
        raise pika.exceptions.AMQPConnectionError("refused")
    
    monkeypatch.setattr(event_publisher.pika, "BlockingConnection", refuse)
    
    assert EventPublisher().publish_order_status_changed({"order_id": 7}) is False
