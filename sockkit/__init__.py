"""Building blocks for HTTP and WebSocket servers: bloom filter, backpressure buffer, CRC-32, option parsing and helpers."""

__version__ = "0.1.0"