# Schemas package init
"""
Pydantic request/response models defining the HTTP contract.

    records.py    rows returned by the listing endpoints
    admin.py      admin login body and response
    diagnosis.py  diagnosis submission body and scoring result
    system.py     health, test-db, info, stats and error bodies
"""
