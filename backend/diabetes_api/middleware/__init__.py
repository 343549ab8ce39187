"""
Diabetes Diagnosis API — Middleware Package
=============================================

Middleware Chain:
    Request → [Access: request ID + log] → [GZip] → [CORS] → Route Handler

GZip and CORS are Starlette's own middleware, configured in main.py.
"""
