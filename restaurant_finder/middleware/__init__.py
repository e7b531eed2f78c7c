"""
Restaurant Finder - Middleware Package
=======================================

What:  Cross-cutting concerns applied to every request.

Middleware Chain:
    Request → [Request ID] → [Logging] → [Upload Size Limit] → [GZip] → [CORS] → Route Handler

    1. Request ID: assigns the correlation ID used by every log line
    2. Logging: one access line per request, tagged with that ID
    3. Upload Size Limit: turns away oversized POST /upload bodies unread
    4. GZip / CORS: Starlette built-ins configured in main.py
"""
