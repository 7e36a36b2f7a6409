"""
Centralized configuration for LLM Prompts.
"""


class SummarizationPrompts:
    """Prompt templates for the video Summarization Service."""

    VIDEO_SUMMARY = """You are a helpful assistant that summarizes YouTube videos for users.
Summarize the following YouTube video transcript in a clear and structured way.
Transcript:
\"\"\"
{transcript}
\"\"\"
Please include the following in your summary:
1. **Key Points or Sections**: List the main topics or arguments made in the video, broken down into detailed bullet points. Please expand these points to get the full idea across to lay users. For hard to understand concepts, it is best to expand on it further in a clear way.
2. **Conclusion or Takeaway**: Summarize the main message or action the video encourages.
Make the language natural and viewer-friendly. Avoid repetition and filler."""
