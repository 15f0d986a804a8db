"""Chrome DevTools Protocol messages, a WebSocket transport and polling helpers."""

__version__ = "0.1.0"