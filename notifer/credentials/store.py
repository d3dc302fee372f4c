import json
import logging
from pathlib import Path
from typing import Dict, Iterable, Optional

from ..errors import CredentialNotFound
from .base import Credential, CredentialScope, CredentialStore

logger = logging.getLogger(__name__)


class JsonFileCredentialStore(CredentialStore):
    """
    Credential store backed by a JSON secrets file.

    File format:
        {"credentials": [{"id": "ci-token", "secret": "tk_...", "scopes": ["my-job"]}]}

    The file is read on every lookup so rotated secrets are picked up
    without a restart.
    """

    def __init__(self, path):
        self.path = Path(path)

    def _load(self, credential_id: str) -> Dict[str, Credential]:
        if not self.path.is_file():
            logger.warning("Credentials file not found: %s", self.path)
            return {}

        try:
            with open(self.path, encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, ValueError) as e:
            logger.error("Failed to read credentials file %s: %s", self.path, e)
            raise CredentialNotFound(credential_id, f"credentials file unreadable: {e}") from e

        entries = data.get("credentials", []) if isinstance(data, dict) else []
        credentials = {}
        for entry in entries:
            if not isinstance(entry, dict) or not entry.get("id"):
                logger.debug("Skipping malformed credential entry")
                continue
            credentials[str(entry["id"])] = Credential(
                id=str(entry["id"]),
                secret=str(entry.get("secret") or ""),
                scopes=frozenset(str(s) for s in entry.get("scopes") or []),
            )
        return credentials

    def lookup(self, credential_id: str, scope: CredentialScope) -> Optional[Credential]:
        credential = self._load(credential_id).get(credential_id)
        if credential is None or not credential.visible_to(scope):
            return None
        return credential


class InMemoryCredentialStore(CredentialStore):
    """In-memory store for testing."""

    def __init__(self, credentials: Optional[Iterable[Credential]] = None):
        self.data: Dict[str, Credential] = {}
        self.lookups = 0
        for credential in credentials or []:
            self.add(credential)

    def add(self, credential: Credential) -> None:
        self.data[credential.id] = credential

    def add_secret(self, credential_id: str, secret: str, *scopes: str) -> None:
        """Test helper to register a plain secret."""
        self.add(Credential(id=credential_id, secret=secret, scopes=frozenset(scopes)))

    def lookup(self, credential_id: str, scope: CredentialScope) -> Optional[Credential]:
        self.lookups += 1
        credential = self.data.get(credential_id)
        if credential is None or not credential.visible_to(scope):
            return None
        return credential
