from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import FrozenSet, Optional


@dataclass(frozen=True)
class CredentialScope:
    """Authorization context supplied by the host for one invocation."""

    principal: str = "SYSTEM"
    item: Optional[str] = None

    def names(self) -> FrozenSet[str]:
        """Names a credential's scope list is matched against."""
        return frozenset(n for n in (self.item, self.principal) if n)


@dataclass(frozen=True)
class Credential:
    """A stored secret. The secret is masked in repr()."""

    id: str
    secret: str = field(repr=False)
    # Empty means visible to every scope
    scopes: FrozenSet[str] = frozenset()

    def visible_to(self, scope: CredentialScope) -> bool:
        if not self.scopes:
            return True
        return bool(self.scopes & scope.names())


class CredentialStore(ABC):
    """Abstract interface for secret lookup. Implementations are read-only."""

    @abstractmethod
    def lookup(self, credential_id: str, scope: CredentialScope) -> Optional[Credential]:
        """Return the credential visible to scope, or None."""
        pass
