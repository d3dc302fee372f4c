"""Credential Resolver - turns a credential id into a topic token."""

import logging

from ..errors import CredentialNotFound
from .base import CredentialScope, CredentialStore

logger = logging.getLogger(__name__)


class CredentialResolver:
    """Resolves credential ids against a store for a caller's scope."""

    def __init__(self, store: CredentialStore):
        self.store = store

    def resolve(self, credential_id: str, scope: CredentialScope) -> str:
        """
        Return the secret for credential_id as visible to scope.

        Raises:
            CredentialNotFound: if the id is empty, unknown, outside the
                scope, or has an empty secret
        """
        if not credential_id:
            raise CredentialNotFound(credential_id, "credential id is empty")

        credential = self.store.lookup(credential_id, scope)
        if credential is None:
            raise CredentialNotFound(credential_id)
        if not credential.secret:
            raise CredentialNotFound(credential_id, "secret is empty")

        logger.debug("Resolved credential %s for %s", credential_id, scope.item or scope.principal)
        return credential.secret
