"""Tests for outcome classification and message composition."""

import pytest

from notifer.dispatch.composer import (
    compose,
    default_message,
    default_title,
    priority_for_auto,
    should_notify,
)
from notifer.models.outcome import NotifyPolicy, Outcome


class TestShouldNotify:
    def test_defaults(self):
        policy = NotifyPolicy()
        assert should_notify(Outcome.SUCCESS, policy)
        assert should_notify(Outcome.FAILURE, policy)
        assert should_notify(Outcome.UNSTABLE, policy)
        assert not should_notify(Outcome.ABORTED, policy)

    @pytest.mark.parametrize("outcome,field", [
        (Outcome.SUCCESS, "notify_on_success"),
        (Outcome.FAILURE, "notify_on_failure"),
        (Outcome.UNSTABLE, "notify_on_unstable"),
        (Outcome.ABORTED, "notify_on_aborted"),
    ])
    def test_each_flag_controls_its_outcome(self, outcome, field):
        enabled = NotifyPolicy(**{field: True})
        disabled = NotifyPolicy(**{field: False})
        assert should_notify(outcome, enabled)
        assert not should_notify(outcome, disabled)


class TestPriorityForAuto:
    def test_mapping(self):
        assert priority_for_auto(Outcome.SUCCESS) == 2
        assert priority_for_auto(Outcome.UNSTABLE) == 3
        assert priority_for_auto(Outcome.FAILURE) == 5
        assert priority_for_auto(Outcome.ABORTED) == 1


class TestDefaults:
    def test_titles(self):
        assert default_title(Outcome.SUCCESS) == "Build Succeeded"
        assert default_title(Outcome.FAILURE) == "Build Failed"
        assert default_title(Outcome.UNSTABLE) == "Build Unstable"
        assert default_title(Outcome.ABORTED) == "Build Aborted"

    def test_message_with_full_context(self, build_env):
        message = default_message(Outcome.FAILURE, build_env)
        assert message == "deploy-api #42 failed\nhttps://ci.example.com/job/deploy-api/42/"

    def test_message_with_build_number_only(self):
        assert default_message(Outcome.SUCCESS, {"BUILD_NUMBER": "7"}) == "Build #7 succeeded"

    def test_message_without_context(self):
        assert default_message(Outcome.ABORTED, {}) == "Build was aborted"


class TestCompose:
    def test_explicit_values_used(self, build_env):
        composed = compose(Outcome.FAILURE, build_env, message="Deployed", title="Deploy", priority=4)
        assert composed.message == "Deployed"
        assert composed.title == "Deploy"
        assert composed.priority == 4

    def test_auto_priority_for_failure(self, build_env):
        composed = compose(Outcome.FAILURE, build_env, message="x", priority=0)
        assert composed.priority == 5

    def test_explicit_priority_clamped(self, build_env):
        assert compose(Outcome.SUCCESS, build_env, priority=42).priority == 5
        assert compose(Outcome.SUCCESS, build_env, priority=-3).priority == 1

    def test_blank_message_and_title_synthesized(self, build_env):
        composed = compose(Outcome.UNSTABLE, build_env, message="   ", title="")
        assert composed.message.startswith("deploy-api #42 is unstable")
        assert composed.title == "Build Unstable"

    def test_message_never_empty(self):
        for outcome in Outcome:
            assert compose(outcome, {}).message
