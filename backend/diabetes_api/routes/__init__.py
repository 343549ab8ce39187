# Routes package init
"""
Diabetes Diagnosis API — Routes Package
=========================================

Route Inventory:
    - health.py:     GET  /                     (plain-text banner)
                     GET  /health               (liveness)
                     GET  /test-db              (SELECT 1 + 1 through the gateway)
                     GET  /api/info             (static service descriptor)
    - admin.py:      GET  /admin/login          (hint to use POST)
                     POST /admin/login          (plaintext credential check)
    - resources.py:  GET  /api/users, /api/symptoms,
                          /api/diagnoses, /api/recommendations
    - diagnosis.py:  POST /api/diagnosis/process
    - stats.py:      GET  /api/stats

Routes stay thin: extract the body, call a service, shape the response.
"""
