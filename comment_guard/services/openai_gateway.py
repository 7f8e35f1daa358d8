"""Classification gateway backed by the OpenAI API."""

import logging
import os

from langchain_core.output_parsers import JsonOutputParser
from langchain_core.prompts import ChatPromptTemplate
from pydantic import BaseModel, Field

from ..config import CATEGORY_NAMES, POLL_MAX_NEW_COMMENTS, SOURCE_SAMPLE_SIZE
from ..exceptions import GatewayError
from ..langgraph.nodes.classifier import CommentVerdict, build_llm
from ..langgraph.workflow import get_compiled_workflow
from ..models.record import ClassificationRecord
from .gateway import classify_with_workflow

logger = logging.getLogger(__name__)

SOURCE_SIMULATION_PROMPT = """Act as a YouTube data simulator. Generate a list of comments and
their spam analysis. Ensure the comments look like real internet users (slang, typos, etc.).

Categories: {categories}.

You must respond with valid JSON of the form:
{{{{"comments": [{{{{"text": "...", "isSpam": true or false, "confidence": 0.0 to 1.0,
"category": one of the categories, "reason": "..."}}}}]}}}}"""

LIVE_FEED_PROMPT = """You are a real-time YouTube comment feed simulator. Provide 1 or 2 new
comments that just arrived, and analyze them.

Categories: {categories}.

You must respond with valid JSON of the form:
{{{{"comments": [{{{{"text": "...", "isSpam": true or false, "confidence": 0.0 to 1.0,
"category": one of the categories, "reason": "..."}}}}]}}}}"""


class SimulatedComment(CommentVerdict):
    """A generated comment together with its classification."""

    text: str = Field(description="The comment text")


class SimulatedFeed(BaseModel):
    """Schema for a batch of generated comments."""

    comments: list[SimulatedComment] = Field(default_factory=list)


class OpenAIGateway:
    """Gateway that classifies and simulates comments with OpenAI models."""

    def __init__(self) -> None:
        if not os.getenv("OPENAI_API_KEY"):
            raise ValueError("OPENAI_API_KEY environment variable not set")

        self.workflow = get_compiled_workflow()
        self._parser = JsonOutputParser(pydantic_object=SimulatedFeed)

    def classify_sample(self, text: str) -> ClassificationRecord:
        """Classify one comment through the LangGraph workflow."""
        return classify_with_workflow(self.workflow, text)

    def analyze_source(self, reference: str) -> list[ClassificationRecord]:
        """Generate and classify a realistic comment sample for a video URL."""
        request = (
            f"Generate {SOURCE_SAMPLE_SIZE} realistic YouTube comments that might appear on a "
            f"video at this URL: {{url}}. Include a variety: 2 safe/genuine comments, 1 obvious "
            "crypto scam with telegram link, 1 'sub4sub' request, 1 generic bot-like praise, and "
            "1 sophisticated self-promotion. Then analyze each of them."
        )
        try:
            records = self._simulate(SOURCE_SIMULATION_PROMPT, request, reference)
        except Exception as e:
            logger.error(f"Source simulation error for {reference}: {e!s}")
            raise GatewayError(f"Source analysis failed: {e!s}") from e

        if not records:
            raise GatewayError(f"No comments returned for {reference}")
        return records

    def poll_recent(self, reference: str) -> list[ClassificationRecord]:
        """Generate 1-2 newly arrived comments; returns [] on any failure."""
        request = (
            "Generate 1-2 new incoming comments for this YouTube video: {url}. "
            "Occasionally make one a spam comment (30% chance). Analyze them."
        )
        try:
            records = self._simulate(LIVE_FEED_PROMPT, request, reference)
        except Exception as e:
            logger.error(f"Live polling error for {reference}: {e!s}")
            return []
        return records[:POLL_MAX_NEW_COMMENTS]

    def _simulate(
        self, system_prompt: str, request: str, reference: str
    ) -> list[ClassificationRecord]:
        prompt = ChatPromptTemplate.from_messages(
            [
                ("system", system_prompt.format(categories=", ".join(CATEGORY_NAMES))),
                ("user", request),
            ]
        )
        llm = build_llm("simulation_model", "simulation_temperature")
        chain = prompt | llm | self._parser

        result = chain.invoke({"url": reference})
        feed = SimulatedFeed.model_validate(result)

        return [
            ClassificationRecord.from_payload(
                comment.model_dump(by_alias=True), text=comment.text
            )
            for comment in feed.comments
        ]
