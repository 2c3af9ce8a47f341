"""
Blog API - Middleware Package
==============================

Middleware Chain:
    Request → [Request ID] → [Access Log] → [CORS] → Route Handler

    - Request ID: assigns/propagates X-Request-ID and stores it in a ContextVar
    - Access Log: logs method, path, status and duration with the request ID;
      answers any exception no handler claimed with a 05X99 envelope
    - CORS: FastAPI's CORSMiddleware (handles preflight)
"""
