"""
Diabetes Diagnosis API — Data Store Models
============================================

Five tables share `Base.metadata`:

    admin            operator accounts (plaintext secret, unique name)
    users            end users referenced by diagnoses
    symptoms         seeded symptom catalogue (unique code)
    diagnoses        recorded scoring results, user_id SET NULL on delete
    recommendations  static advice text per risk level

Importing this package registers every table.
"""

from diabetes_api.models.admin import Admin
from diabetes_api.models.diagnosis import Diagnosis
from diabetes_api.models.recommendation import Recommendation
from diabetes_api.models.symptom import Symptom
from diabetes_api.models.types import RISK_LEVELS, SEXES
from diabetes_api.models.user import User

__all__ = [
    "Admin",
    "Diagnosis",
    "Recommendation",
    "Symptom",
    "User",
    "RISK_LEVELS",
    "SEXES",
]
