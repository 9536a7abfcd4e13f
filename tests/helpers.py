from datetime import datetime, timezone


class FakeTextClient:
    """Stands in for the Gemini client"""
    
    def __init__(self, reply="Generated text", error=None, configured=True):
        self.reply = reply
        self.error = error
        self.configured = configured
        self.prompts = []
    
    async def generate(self, prompt):
        self.prompts.append(prompt)
        if self.error:
            raise self.error
        return self.reply


class FakePublisher:
    """Records events instead of sending them to RabbitMQ"""
    
    def __init__(self, result=True):
        self.result = result
        self.created = []
        self.status_changed = []
    
    def publish_order_created(self, order_data):
        self.created.append(order_data)
        return self.result
    
    def publish_order_status_changed(self, order_data):
        self.status_changed.append(order_data)
        return self.result


def utc(year, month, day, hour=12):
    return datetime(year, month, day, hour, tzinfo=timezone.utc)
