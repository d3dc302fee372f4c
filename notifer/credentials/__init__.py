from .base import Credential, CredentialScope, CredentialStore
from .store import InMemoryCredentialStore, JsonFileCredentialStore
from .resolver import CredentialResolver

__all__ = [
    'Credential',
    'CredentialScope',
    'CredentialStore',
    'InMemoryCredentialStore',
    'JsonFileCredentialStore',
    'CredentialResolver',
]
