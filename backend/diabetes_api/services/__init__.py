# Services package init
"""
Diabetes Diagnosis API — Services Layer
=========================================

Business logic between the routes (HTTP) and the query gateway.

Service Inventory:
    - scoring:           pure score / risk-level functions
    - AuthService:       admin name + secret lookup
    - CatalogService:    unfiltered listings of the four read-only resources
    - DiagnosisService:  scoring plus the best-effort DiagnosisRecorder write
    - StatsService:      concurrent dashboard counters

Services are stateless and receive the gateway on every call, so tests can
pass a SQLite-backed gateway or an AsyncMock.
"""
