import logging
import os

from langchain_core.output_parsers import JsonOutputParser
from langchain_core.prompts import ChatPromptTemplate
from langchain_openai import ChatOpenAI
from pydantic import BaseModel, ConfigDict, Field

from ...config import CATEGORY_NAMES, MODEL_CONFIG
from ...utils.error_handling import check_state_for_errors, create_error_response
from ..state import CommentState

logger = logging.getLogger(__name__)

MODERATOR_SYSTEM_PROMPT = """You are an expert YouTube comment moderator.
Detect common spam patterns: 'sub4sub', telegram links, crypto scams, repetitive
promotional text, or bot-like behavior.

Categorize every comment as exactly one of: {categories}.
- "Scam": fraud, fake giveaways, crypto or investment schemes, contact-me-on-telegram/whatsapp
- "Spam": sub4sub, like4like, link dumps, repetitive junk
- "Self-Promotion": advertising the author's own channel, product or service
- "Bot": generic, templated praise that could be posted under any video
- "Safe": genuine engagement with the video

You must respond with valid JSON containing these exact fields:
{{{{
    "isSpam": true or false,
    "confidence": 0.0 to 1.0,
    "category": one of the categories above,
    "reason": "short explanation of the decision"
}}}}"""


class CommentVerdict(BaseModel):
    """Schema for a comment classification result."""

    model_config = ConfigDict(populate_by_name=True)

    is_spam: bool = Field(alias="isSpam", description="True if the comment is malicious")
    confidence: float = Field(description="Confidence score between 0 and 1")
    category: str = Field(description="One of: " + ", ".join(CATEGORY_NAMES))
    reason: str = Field(description="Brief explanation of the classification decision")


def build_llm(model_key: str = "classification_model", temperature_key: str = "temperature") -> ChatOpenAI:
    """Create a JSON-mode chat model from MODEL_CONFIG."""
    return ChatOpenAI(
        model=str(MODEL_CONFIG[model_key]),
        temperature=float(MODEL_CONFIG[temperature_key]),
        max_tokens=int(MODEL_CONFIG["max_tokens"]),
        model_kwargs={"response_format": {"type": "json_object"}},
    )


def classify_comment(state: CommentState) -> dict:
    """Classify a comment using OpenAI."""
    if check_state_for_errors(state):
        return {}

    if not os.getenv("OPENAI_API_KEY"):
        return create_error_response("OPENAI_API_KEY environment variable not set")

    try:
        llm = build_llm()

        prompt = ChatPromptTemplate.from_messages(
            [
                (
                    "system",
                    MODERATOR_SYSTEM_PROMPT.format(categories=", ".join(CATEGORY_NAMES)),
                ),
                (
                    "user",
                    'Analyze the following YouTube comment for spam, scams, or malicious intent: "{comment}"',
                ),
            ]
        )

        parser = JsonOutputParser(pydantic_object=CommentVerdict)
        chain = prompt | llm | parser

        result = chain.invoke({"comment": state.get("prepared_text") or state["text"]})
        verdict = CommentVerdict.model_validate(result)

        logger.debug(
            f"Classified comment as {verdict.category} ({verdict.confidence:.2f})"
        )

        return {
            "is_spam": verdict.is_spam,
            "confidence": verdict.confidence,
            "category": verdict.category,
            "reason": verdict.reason,
        }

    except Exception as e:
        logger.error(f"Comment classification error: {e!s}")
        return create_error_response(e)
