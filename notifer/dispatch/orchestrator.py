"""
Dispatch Orchestrator

Runs one notify step: resolve the token, expand variables, compose and build
the request, send it, and apply the fail policy.

Progress and errors are written to the caller's sink (the build console),
one line per major stage, each prefixed with [Notifer].
"""

import logging
from typing import Callable, Mapping, Optional, Union

from ..api.client import NotificationTransport, NotiferClient
from ..config import DispatchConfig
from ..credentials.base import CredentialScope, CredentialStore
from ..credentials.resolver import CredentialResolver
from ..errors import CompositionError, CredentialNotFound, DispatchError, ExpansionError, TransportError
from ..helpers.expand import expand, expand_all, snapshot_environment
from ..models.notification import DispatchResult, DispatchState, NotificationResponse
from ..models.outcome import Outcome
from ..models.step import NotifyStepParams
from ..monitoring.sentry.setup import capture_exception, set_dispatch_context
from ..monitoring.tracker import DispatchTracker
from .composer import compose, should_notify
from .payload import build

logger = logging.getLogger(__name__)

LOG_PREFIX = "[Notifer]"

Sink = Callable[[str], None]


def _discard(line: str) -> None:
    pass


class NotificationDispatcher:
    """
    Wires credential resolution, expansion, composition and transport.

    The dispatcher keeps no per-invocation state, so a single instance can
    serve concurrent invocations.

    Usage:
        dispatcher = NotificationDispatcher(CredentialResolver(store), NotiferClient())
        result = dispatcher.dispatch(params, Outcome.FAILURE, os.environ, scope, sink=print)
    """

    def __init__(
        self,
        resolver: CredentialResolver,
        transport: NotificationTransport,
        config: Optional[DispatchConfig] = None,
    ):
        self.resolver = resolver
        self.transport = transport
        self.config = config or DispatchConfig()

    @classmethod
    def from_config(cls, config: DispatchConfig, store: CredentialStore) -> "NotificationDispatcher":
        """Production wiring: HTTP transport configured from config."""
        return cls(CredentialResolver(store), NotiferClient.from_config(config), config)

    def dispatch(
        self,
        params: NotifyStepParams,
        outcome: Union[Outcome, str],
        env: Optional[Mapping[str, str]] = None,
        scope: Optional[CredentialScope] = None,
        sink: Optional[Sink] = None,
    ) -> DispatchResult:
        """
        Send one notification for a build outcome.

        Args:
            params: Step parameters
            outcome: Build outcome
            env: Environment variables of the build, snapshotted on entry
            scope: Authorization scope for credential lookup
            sink: Receives human-readable progress and error lines

        Returns:
            DispatchResult; SKIPPED when the policy disables the outcome,
            FAILED with the error when delivery failed without fail_on_error

        Raises:
            CredentialNotFound: always, before any network call
            ExpansionError: in strict mode, for unknown variables
            CompositionError: when the topic expands to nothing
            DispatchError: on delivery failure when fail_on_error is set
        """
        outcome = Outcome.parse(outcome)
        env = snapshot_environment(env)
        scope = scope or CredentialScope()
        emit = sink or _discard
        tracker = DispatchTracker(slow_stage_seconds=self.config.slow_send_warning_seconds)

        if not should_notify(outcome, params.policy):
            logger.info("Notifications disabled for %s builds, skipping", outcome.value)
            tracker.finish(DispatchState.SKIPPED)
            return DispatchResult(DispatchState.SKIPPED, fail_on_error=params.fail_on_error)

        try:
            with tracker.stage(DispatchState.RESOLVING_CREDENTIAL):
                token = self.resolver.resolve(params.credentials_id, scope)
            emit(f"{LOG_PREFIX} Using credentials: {params.credentials_id}")

            strict = self.config.strict_variables
            with tracker.stage(DispatchState.EXPANDING):
                topic = expand(params.topic, env, strict=strict).strip()
                message = expand(params.message, env, strict=strict)
                title = expand(params.title, env, strict=strict)
                tags = expand_all(params.tags, env, strict=strict)
                if not topic:
                    raise CompositionError(f"Topic '{params.topic}' is empty after expansion")

            set_dispatch_context(
                topic=topic,
                outcome=outcome.value,
                credentials_id=params.credentials_id,
                fail_on_error=params.fail_on_error,
            )

            with tracker.stage(DispatchState.COMPOSING):
                composed = compose(outcome, env, message=message, title=title, priority=params.priority)

            with tracker.stage(DispatchState.BUILDING):
                request = build(topic, composed.message, composed.title, composed.priority, tags)

        except (CredentialNotFound, ExpansionError, CompositionError) as e:
            emit(f"{LOG_PREFIX} Configuration error: {e}")
            logger.error("Notification not sent, configuration error: %s", e)
            raise

        emit(f"{LOG_PREFIX} Sending notification to topic: {topic}")
        logger.info("Sending %s notification to %s (priority %d)", outcome.value, topic, request.priority)

        try:
            with tracker.stage(DispatchState.SENDING):
                response = self.transport.send(topic, request, token)
        except TransportError as e:
            return self._handle_failure(e, params, outcome, topic, emit)

        tracker.finish(DispatchState.SUCCEEDED)
        emit(f"{LOG_PREFIX} Notification sent successfully. ID: {response.id}")
        return DispatchResult(DispatchState.SUCCEEDED, response=response, fail_on_error=params.fail_on_error)

    def _handle_failure(
        self,
        error: TransportError,
        params: NotifyStepParams,
        outcome: Outcome,
        topic: str,
        emit: Sink,
    ) -> DispatchResult:
        line = f"{LOG_PREFIX} Failed to send notification: {error}"
        emit(line)
        logger.warning("Notification to %s failed: %s", topic, error)

        capture_exception(
            exception=error,
            level="error" if params.fail_on_error else "warning",
            tags={"topic": topic, "outcome": outcome.value},
            extra={"status_code": error.status_code},
        )

        if params.fail_on_error:
            raise DispatchError(line, error) from error

        return DispatchResult(DispatchState.FAILED, error=error, fail_on_error=False)


def notify(
    dispatcher: NotificationDispatcher,
    params: NotifyStepParams,
    outcome: Union[Outcome, str],
    env: Optional[Mapping[str, str]] = None,
    scope: Optional[CredentialScope] = None,
    sink: Optional[Sink] = None,
) -> Optional[NotificationResponse]:
    """Dispatch and return only the response (None when skipped or not confirmed)."""
    return dispatcher.dispatch(params, outcome, env=env, scope=scope, sink=sink).response
