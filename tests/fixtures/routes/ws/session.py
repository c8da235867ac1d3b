route = {
    "path": "/session",
    "method": "post",
    "tags": ["sessions"],
    "description": "Opens a browser session over a WebSocket.",
    "accepts": [],
    "contentTypes": [],
}
