"""Tests for credential stores and the resolver."""

import json

import pytest

from notifer.credentials.base import Credential, CredentialScope
from notifer.credentials.resolver import CredentialResolver
from notifer.credentials.store import InMemoryCredentialStore, JsonFileCredentialStore
from notifer.dispatch.orchestrator import NotificationDispatcher
from notifer.errors import CredentialNotFound
from notifer.models.outcome import Outcome
from notifer.models.step import NotifyStepParams


class TestCredentialResolver:
    def test_resolves_global_credential(self, credential_store, scope):
        resolver = CredentialResolver(credential_store)
        assert resolver.resolve("ci-token", scope) == "tk_global_secret"

    def test_resolves_scoped_credential_for_matching_item(self, credential_store, scope):
        resolver = CredentialResolver(credential_store)
        assert resolver.resolve("deploy-token", scope) == "tk_deploy_secret"

    def test_scoped_credential_hidden_from_other_jobs(self, credential_store):
        resolver = CredentialResolver(credential_store)
        other = CredentialScope(principal="jenkins", item="frontend")
        with pytest.raises(CredentialNotFound):
            resolver.resolve("deploy-token", other)

    def test_unknown_id(self, credential_store, scope):
        resolver = CredentialResolver(credential_store)
        with pytest.raises(CredentialNotFound) as excinfo:
            resolver.resolve("nope", scope)
        assert excinfo.value.credential_id == "nope"

    def test_empty_id_rejected_without_lookup(self, credential_store, scope):
        resolver = CredentialResolver(credential_store)
        with pytest.raises(CredentialNotFound):
            resolver.resolve("", scope)
        assert credential_store.lookups == 0

    def test_empty_secret(self, scope):
        store = InMemoryCredentialStore([Credential(id="blank", secret="")])
        with pytest.raises(CredentialNotFound, match="secret is empty"):
            CredentialResolver(store).resolve("blank", scope)


class TestCredential:
    def test_secret_masked_in_repr(self):
        credential = Credential(id="ci-token", secret="tk_very_secret")
        assert "tk_very_secret" not in repr(credential)

    def test_principal_scope_match(self):
        credential = Credential(id="x", secret="s", scopes=frozenset({"alice"}))
        assert credential.visible_to(CredentialScope(principal="alice"))
        assert not credential.visible_to(CredentialScope(principal="bob"))


class TestJsonFileCredentialStore:
    def test_lookup_from_file(self, tmp_path, scope):
        path = tmp_path / "credentials.json"
        path.write_text(json.dumps({
            "credentials": [
                {"id": "ci-token", "secret": "tk_file"},
                {"id": "other-job", "secret": "tk_other", "scopes": ["frontend"]},
                {"secret": "no id"},
            ]
        }))
        store = JsonFileCredentialStore(path)

        assert store.lookup("ci-token", scope).secret == "tk_file"
        assert store.lookup("other-job", scope) is None

    def test_missing_file_finds_nothing(self, tmp_path, scope):
        store = JsonFileCredentialStore(tmp_path / "absent.json")
        assert store.lookup("ci-token", scope) is None

    def test_rotated_secret_picked_up(self, tmp_path, scope):
        path = tmp_path / "credentials.json"
        path.write_text(json.dumps({"credentials": [{"id": "ci-token", "secret": "old"}]}))
        store = JsonFileCredentialStore(path)
        assert store.lookup("ci-token", scope).secret == "old"

        path.write_text(json.dumps({"credentials": [{"id": "ci-token", "secret": "new"}]}))
        assert store.lookup("ci-token", scope).secret == "new"

    def test_corrupt_file_raises_credential_not_found(self, tmp_path, scope):
        path = tmp_path / "credentials.json"
        path.write_text("{not json")
        resolver = CredentialResolver(JsonFileCredentialStore(path))

        with pytest.raises(CredentialNotFound, match="credentials file unreadable") as excinfo:
            resolver.resolve("ci-token", scope)
        assert excinfo.value.credential_id == "ci-token"

    def test_corrupt_file_reported_as_configuration_error(self, tmp_path, mock_transport, build_env, scope, sink):
        path = tmp_path / "credentials.json"
        path.write_text("{not json")
        dispatcher = NotificationDispatcher(CredentialResolver(JsonFileCredentialStore(path)), mock_transport)
        params = NotifyStepParams(credentials_id="ci-token", topic="ci-builds", fail_on_error=False)

        with pytest.raises(CredentialNotFound):
            dispatcher.dispatch(params, Outcome.SUCCESS, build_env, scope, sink=sink.append)

        assert sink[0].startswith("[Notifer] Configuration error: ")
        assert mock_transport.call_count == 0
