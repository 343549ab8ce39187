"""
FastAPI dependencies.

The `Database` handle lives on `app.state.database` (set by `create_app`);
handlers ask for its gateway instead of importing a module-level engine.
Tests either build the app with their own `Database` or override
`get_gateway` through `app.dependency_overrides`.
"""

from fastapi import Request

from diabetes_api.database import Database
from diabetes_api.gateway import QueryGateway


def get_database(request: Request) -> Database:
    return request.app.state.database


def get_gateway(request: Request) -> QueryGateway:
    return get_database(request).gateway
