"""Production implementation of AI suggestions using the OpenAI SDK."""

import logging

import httpx
import openai
from openai import OpenAI
from pydantic import BaseModel, Field

from gh_labels.errors import NetworkError, OpenAIError, PublicError, RateLimitError
from gh_labels.gateway.ai.abc import SuggestionGateway
from gh_labels.gateway.ai.instructions import build_issue_prompt, build_pull_request_prompt
from gh_labels.gateway.ai.types import ContentSuggestion, DescriptionSuggestion, LabelSuggestion
from gh_labels.gateway.github.types import IssueDetails, Label, PullRequestDetails

logger = logging.getLogger(__name__)

MISSING_API_KEY_MESSAGE = (
    "OpenAI API key not found. Please set the OPENAI_API_KEY environment variable."
)
UNPARSED_RESPONSE_MESSAGE = "Failed to get suggestions from OpenAI"

TEMPERATURE = 0.3
# Fixed seed for repeatable suggestions
SEED = 42


class LabelSuggestionSchema(BaseModel):
    name: str = Field(description="The name of the suggested label")
    description: str = Field(description="Why this label is appropriate")
    confidence: int = Field(description="Confidence score between 1-100")
    is_new: bool = Field(
        description="Whether this is a new label (true) or exists in the repository (false)"
    )


class DescriptionSchema(BaseModel):
    content: str = Field(description="Suggested description")
    confidence: int = Field(description="Confidence score between 1-100 for the description")


class BilingualDescriptionSchema(BaseModel):
    en: DescriptionSchema | None = Field(description="English version of the description")
    pl: DescriptionSchema | None = Field(description="Polish version of the description")


class ContentSuggestionSchema(BaseModel):
    """Structured output requested from the model."""

    labels: list[LabelSuggestionSchema] = Field(description="Label suggestions")
    description: BilingualDescriptionSchema = Field(description="Multilingual descriptions")


class RealSuggestionGateway(SuggestionGateway):
    """Suggestion gateway backed by OpenAI chat completions with structured outputs.

    SDK retries are disabled; each suggestion is a single request.
    """

    def __init__(
        self,
        *,
        api_key: str | None,
        model: str,
        http_client: httpx.Client | None = None,
    ) -> None:
        """Create the gateway.

        A missing API key does not fail construction; it fails every call
        instead, so commands that never reach the AI step still work.

        Args:
            api_key: OpenAI API key, or None when not configured
            model: Chat model name
            http_client: Optional httpx client handed to the SDK, used by tests
        """
        self._model = model
        self._client: OpenAI | None = None
        if api_key:
            self._client = OpenAI(api_key=api_key, max_retries=0, http_client=http_client)
        else:
            logger.debug("No OpenAI API key configured")

    def suggest_pr_content(
        self,
        pull_request: PullRequestDetails,
        labels: list[Label],
        template: str | None,
    ) -> ContentSuggestion:
        return self._complete(build_pull_request_prompt(pull_request, labels, template))

    def suggest_issue_content(
        self,
        issue: IssueDetails,
        labels: list[Label],
        template: str | None,
    ) -> ContentSuggestion:
        return self._complete(build_issue_prompt(issue, labels, template))

    def _complete(self, prompt: str) -> ContentSuggestion:
        if self._client is None:
            raise PublicError(MISSING_API_KEY_MESSAGE)

        logger.debug("Requesting suggestions from %s (%d prompt chars)", self._model, len(prompt))
        try:
            completion = self._client.chat.completions.parse(
                model=self._model,
                messages=[{"role": "user", "content": prompt}],
                temperature=TEMPERATURE,
                seed=SEED,
                response_format=ContentSuggestionSchema,
            )
        except openai.RateLimitError as error:
            raise RateLimitError(str(error)) from error
        except openai.APIConnectionError as error:
            raise NetworkError(f"network request to OpenAI failed: {error}") from error
        except openai.OpenAIError as error:
            raise OpenAIError(str(error)) from error

        message = completion.choices[0].message
        if message.refusal:
            logger.debug("Model refused the request: %s", message.refusal)
        if message.parsed is None:
            raise OpenAIError(UNPARSED_RESPONSE_MESSAGE)

        return _to_content_suggestion(message.parsed)


def _to_content_suggestion(parsed: ContentSuggestionSchema) -> ContentSuggestion:
    return ContentSuggestion(
        labels=[
            LabelSuggestion(
                name=label.name,
                description=label.description,
                confidence=label.confidence,
                is_new=label.is_new,
            )
            for label in parsed.labels
        ],
        description_en=_to_description(parsed.description.en),
        description_pl=_to_description(parsed.description.pl),
    )


def _to_description(parsed: DescriptionSchema | None) -> DescriptionSuggestion | None:
    if parsed is None:
        return None
    return DescriptionSuggestion(content=parsed.content, confidence=parsed.confidence)
