"""
Summarization service: one transcript, one prompt, one LLM call.
"""
from loguru import logger

from app.core.prompts import SummarizationPrompts
from app.core.providers.llm_provider import LLMProvider, LLMMessage
from app.models import SummarizationResult
from app.models.enums import LLMRole


class SummarizationService:
    """
    Turns transcript text into a bullet-point summary.

    Provider failures never escape as exceptions; they come back as a failed
    SummarizationResult so the caller can tell a summary from an error.
    """

    def __init__(self, llm_provider: LLMProvider):
        self.llm_provider = llm_provider

    @staticmethod
    def build_prompt(transcript_text: str) -> str:
        return SummarizationPrompts.VIDEO_SUMMARY.format(transcript=transcript_text)

    async def summarize(self, transcript_text: str) -> SummarizationResult:
        """
        Summarize a transcript.

        Args:
            transcript_text: Plain transcript text.

        Returns:
            SummarizationResult with either the model's text or the error.
        """
        if not transcript_text or not transcript_text.strip():
            logger.warning("Refusing to summarize an empty transcript")
            return SummarizationResult.failed("Transcript is empty.")

        messages = [LLMMessage(role=LLMRole.USER, content=self.build_prompt(transcript_text))]
        logger.info(
            f"Summarizing {len(transcript_text)} characters with {self.llm_provider.model_name}"
        )

        try:
            response = await self.llm_provider.generate_text(messages=messages)
        except Exception as e:
            logger.error(f"Summarization failed: {e}")
            return SummarizationResult.failed(str(e))

        if not response.content:
            logger.warning("LLM returned an empty summary")
            return SummarizationResult.failed("The language model returned an empty response.")

        logger.info("Received summary from LLM.")
        return SummarizationResult.ok(response.content)
