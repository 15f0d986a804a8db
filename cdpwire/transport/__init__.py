"""WebSocket transport, waiting-call registry and connection handling."""