from __future__ import annotations

from typing import Any, Callable, Dict, Mapping, Optional

from loguru import logger

from wf_storage_server.config.settings import Settings
from wf_storage_server.core.decoder import decode_action
from wf_storage_server.core.errors import WorkflowStorageError
from wf_storage_server.core.orchestrator import StorageOrchestrator
from wf_storage_server.core.responses import shape_failure, shape_success
from wf_storage_server.models import Action, ActionResponse, ActionResult, ActionVerb


class ActionDispatcher:
    """
    Single entry point for action envelopes: decode, dispatch by verb, shape.

    Request-level failures come back as a failed ActionResponse; they never
    propagate out of ``submit_action``.
    """

    def __init__(self, orchestrator: StorageOrchestrator, settings: Settings) -> None:
        self.orchestrator = orchestrator
        self.settings = settings
        self._handlers: Dict[ActionVerb, Callable[[Action], ActionResult]] = {
            ActionVerb.STORE: orchestrator.store_action,
            ActionVerb.RETRIEVE: orchestrator.retrieve_action,
            ActionVerb.DELETE: orchestrator.delete_action,
        }

    def submit_action(self, envelope: Any, namespace: Optional[str] = None) -> ActionResponse:
        try:
            action = decode_action(envelope, self.settings, namespace=namespace)
        except WorkflowStorageError as exc:
            logger.info("Rejected action: {} ({})", exc.message, exc.code)
            raw = envelope if isinstance(envelope, Mapping) else None
            return shape_failure(exc, envelope=raw)

        try:
            result = self._handlers[action.verb](action)
        except WorkflowStorageError as exc:
            log = logger.info if exc.kind.is_client_error else logger.warning
            log("{} {} failed: {} ({})", action.action_type, action.identifier, exc.message, exc.code)
            return shape_failure(exc, action=action)

        return shape_success(action, result, self.settings.uri_scheme)


__all__ = ["ActionDispatcher"]
