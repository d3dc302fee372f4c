"""Tests for step parameters, outcomes and response parsing."""

import pytest

from notifer.errors import CompositionError
from notifer.models.notification import NotificationRequest, NotificationResponse
from notifer.models.outcome import NotifyPolicy, Outcome
from notifer.models.step import AUTO_PRIORITY, NotifyStepParams, parse_priority


class TestParsePriority:
    @pytest.mark.parametrize("value,expected", [
        (None, AUTO_PRIORITY),
        ("", AUTO_PRIORITY),
        ("auto", AUTO_PRIORITY),
        (0, 0),
        (4, 4),
        ("3", 3),
        (" high ", 4),
        ("MAX", 5),
        ("min", 1),
        (12, 12),
        ("3.5", 3),
        (4.9, 4),
        ("-2.5", -2),
        ("0.4", 1),
        ("0.0", AUTO_PRIORITY),
    ])
    def test_accepted_values(self, value, expected):
        assert parse_priority(value) == expected

    @pytest.mark.parametrize("value", ["loud", "nan", "inf", True])
    def test_rejected_values(self, value):
        with pytest.raises(CompositionError):
            parse_priority(value)


class TestNotifyStepParams:
    def test_defaults(self):
        params = NotifyStepParams(credentials_id="ci-token", topic="ci-builds")
        assert params.priority == AUTO_PRIORITY
        assert params.fail_on_error is False
        assert params.policy == NotifyPolicy()
        assert params.message is None

    def test_required_fields(self):
        with pytest.raises(ValueError, match="Credentials are required"):
            NotifyStepParams(credentials_id=" ", topic="ci-builds")
        with pytest.raises(ValueError, match="Topic is required"):
            NotifyStepParams(credentials_id="ci-token", topic="")

    def test_named_priority_parsed(self):
        params = NotifyStepParams(credentials_id="ci-token", topic="t", priority="urgent")
        assert params.priority == 5


class TestOutcome:
    def test_parse_case_insensitive(self):
        assert Outcome.parse("FAILURE") == Outcome.FAILURE
        assert Outcome.parse(" unstable ") == Outcome.UNSTABLE
        assert Outcome.parse(Outcome.ABORTED) == Outcome.ABORTED

    def test_parse_unknown(self):
        with pytest.raises(ValueError):
            Outcome.parse("NOT_BUILT")


class TestNotificationResponse:
    def test_from_dict(self, sample_api_response):
        response = NotificationResponse.from_dict(sample_api_response)
        assert response.id == "msg_01HZX4"
        assert response.priority == 5
        assert response.tags == ["ci", "deploy"]

    def test_from_dict_missing_fields(self):
        response = NotificationResponse.from_dict({"id": "x"})
        assert response.topic == ""
        assert response.tags == []

    def test_echo(self):
        request = NotificationRequest(topic="t", message="m", priority=4, tags=["a"])
        response = NotificationResponse.echo(request)
        assert response.id == ""
        assert response.to_dict() == {"id": "", "topic": "t", "message": "m", "priority": 4, "tags": ["a"]}
