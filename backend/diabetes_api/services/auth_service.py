"""
Diabetes Diagnosis API — Admin Authentication
===============================================

What:  Checks an admin name/secret pair against the `admin` table.
How:   One parameterized SELECT with exact equality on both columns.
       No session or token is issued; every login call re-authenticates.

The secret is compared as plaintext, exactly as stored.
"""

import logging

from sqlalchemy import select

from diabetes_api.exceptions import AuthError
from diabetes_api.gateway import QueryGateway
from diabetes_api.models import Admin
from diabetes_api.schemas.admin import AdminRecord

logger = logging.getLogger(__name__)


class AuthService:

    async def authenticate_admin(
        self,
        gateway: QueryGateway,
        name: str,
        sandi: str,
    ) -> AdminRecord:
        """
        Return the admin whose name and secret both match.

        Raises:
            AuthError: no row matches (→ 401)
            DatabaseError: lookup failed (→ 500)
        """
        admin = Admin.__table__
        row = await gateway.fetch_one(
            select(admin)
            .where(admin.c.name == name, admin.c.sandi == sandi)
            .limit(1)
        )
        if row is None:
            logger.warning("Admin login failed for name=%r", name)
            raise AuthError()

        logger.info("Admin login succeeded: %s", name)
        return AdminRecord.model_validate(row)


auth_service = AuthService()
