"""Classification gateway contract and factory."""

import logging
import os
from typing import Any, Protocol, runtime_checkable

from ..exceptions import GatewayError
from ..langgraph.workflow import create_initial_state
from ..models.record import ClassificationRecord

logger = logging.getLogger(__name__)


@runtime_checkable
class ClassificationGateway(Protocol):
    """Capabilities the analysis core needs from a classifier backend.

    ``classify_sample`` and ``analyze_source`` raise ``GatewayError`` on any
    fault. ``poll_recent`` never raises and returns an empty list instead.
    """

    def classify_sample(self, text: str) -> ClassificationRecord: ...

    def analyze_source(self, reference: str) -> list[ClassificationRecord]: ...

    def poll_recent(self, reference: str) -> list[ClassificationRecord]: ...


def create_gateway(use_mock: bool | None = None) -> ClassificationGateway:
    """Create the gateway for the current environment.

    Args:
        use_mock: Force the offline simulator (True) or OpenAI (False).
            When None, OpenAI is used if OPENAI_API_KEY is set.

    Returns:
        A classification gateway

    """
    from .mock_gateway import MockGateway
    from .openai_gateway import OpenAIGateway

    if use_mock:
        return MockGateway()

    if not os.getenv("OPENAI_API_KEY"):
        if use_mock is False:
            raise ValueError("OPENAI_API_KEY environment variable not set")
        logger.warning("OPENAI_API_KEY not set, using offline mock gateway")
        return MockGateway()

    return OpenAIGateway()


def classify_with_workflow(workflow: Any, text: str) -> ClassificationRecord:
    """Run one comment through a compiled classification workflow.

    Args:
        workflow: Compiled LangGraph workflow
        text: Comment to classify

    Returns:
        The resulting record

    Raises:
        GatewayError: If the workflow fails or reports an error

    """
    try:
        final_state = workflow.invoke(create_initial_state(text))
    except Exception as e:
        logger.error(f"Classification workflow error: {e!s}")
        raise GatewayError(f"Classification failed: {e!s}") from e

    if final_state.get("error"):
        raise GatewayError(final_state["error"])

    return ClassificationRecord.from_payload(
        {
            "isSpam": final_state.get("is_spam"),
            "confidence": final_state.get("confidence"),
            "category": final_state.get("category"),
            "reason": final_state.get("reason"),
        },
        text=text,
    )
