"""In-memory publish/subscribe service with topics, subscribers and messages."""