"""Offline classification gateway for demos and tests without an API key."""

import logging
import random

from ..config import POLL_MAX_NEW_COMMENTS
from ..exceptions import GatewayError
from ..langgraph.workflow import get_compiled_workflow
from ..models.record import ClassificationRecord
from .gateway import classify_with_workflow

logger = logging.getLogger(__name__)

# 2 genuine, 1 crypto scam, 1 sub4sub, 1 bot praise, 1 self-promotion
SOURCE_COMMENTS = [
    "This finally made recursion click for me, thank you so much!!",
    "the part at 4:32 about caching was super clear, bookmarking this one",
    "I made $4,800 this week trading bitcoin with Mr. Alex, message him on telegram @alexfx_trades",
    "sub4sub?? i always sub back within 5 min",
    "Nice video",
    "If you enjoyed this, check out my channel where I explain the same topic in under 5 minutes",
]

LIVE_COMMENTS = [
    "who else is watching this in 2026",
    "can you do a follow up on the edge cases you mentioned?",
    "Great video",
    "DM me on whatsapp for a guaranteed 20% daily crypto profit",
    "lol the cat walking by at 7:10",
    "sub 4 sub anyone? reply done",
    "been following for years and this is still the best explanation out there",
    "check out my latest video, I tested this on real hardware",
]


class MockGateway:
    """Gateway that simulates comment feeds and classifies them with heuristics.

    Classification runs through the same LangGraph workflow as the OpenAI
    gateway, with the keyword-heuristic classifier node. Polling draws from
    a canned pool using a seeded random generator so runs are repeatable.
    """

    def __init__(self, seed: int | None = None) -> None:
        self.workflow = get_compiled_workflow(use_mock=True)
        self._random = random.Random(seed)

    def classify_sample(self, text: str) -> ClassificationRecord:
        return classify_with_workflow(self.workflow, text)

    def analyze_source(self, reference: str) -> list[ClassificationRecord]:
        logger.info(f"Simulating comment sample for {reference}")
        records = [self.classify_sample(text) for text in SOURCE_COMMENTS]
        if not records:
            raise GatewayError(f"No comments returned for {reference}")
        return records

    def poll_recent(self, reference: str) -> list[ClassificationRecord]:
        try:
            count = self._random.randint(1, POLL_MAX_NEW_COMMENTS)
            texts = self._random.sample(LIVE_COMMENTS, count)
            return [self.classify_sample(text) for text in texts]
        except Exception as e:
            logger.error(f"Live polling error for {reference}: {e!s}")
            return []
