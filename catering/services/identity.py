# catering/services/identity.py
"""
Hosted identity provider client.

Sign-up, login and sessions live entirely with the provider; this service
only asks it who a bearer token belongs to.
"""
from typing import Optional
import requests

from catering.core.config import settings
from catering.core.logging import get_logger
from catering.models.schemas import Identity

logger = get_logger(__name__)


class IdentityProvider:
    def __init__(self, base_url: Optional[str], api_key: Optional[str], timeout: float = 5.0):
        self.base_url = (base_url or "").rstrip("/")
        self.api_key = api_key
        self.timeout = timeout

    @property
    def configured(self) -> bool:
        return bool(self.base_url and self.api_key)

    def get_user(self, token: str) -> Optional[Identity]:
        """Return the identity owning `token`, or None if the provider rejects it."""
        if not self.configured:
            logger.warning("Identity provider is not configured, rejecting token")
            return None

        url = f"{self.base_url}/auth/v1/user"
        headers = {"apikey": self.api_key, "Authorization": f"Bearer {token}"}
        try:
            response = requests.get(url, headers=headers, timeout=self.timeout)
        except requests.RequestException as e:
            logger.error("Identity provider unreachable: %s", e)
            return None

        if response.status_code != 200:
            logger.warning("Token rejected by identity provider (HTTP %s)", response.status_code)
            return None

        try:
            data = response.json()
        except ValueError:
            logger.warning("Identity provider returned a non-JSON body")
            return None
        return Identity(
            id=str(data.get("id", "")),
            email=data.get("email"),
            user_metadata=data.get("user_metadata") or {},
        )


class AdminPolicy:
    """Admin capability lookup keyed by the authenticated email"""

    def __init__(self, admin_emails):
        self.admin_emails = frozenset(admin_emails)

    def is_admin(self, identity: Identity) -> bool:
        return bool(identity.email) and identity.email in self.admin_emails


def get_identity_provider() -> IdentityProvider:
    return IdentityProvider(
        settings.SUPABASE_URL,
        settings.identity_api_key,
        timeout=settings.IDENTITY_TIMEOUT_SECONDS,
    )


def get_admin_policy() -> AdminPolicy:
    return AdminPolicy(settings.ADMIN_EMAILS)
