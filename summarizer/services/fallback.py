"""Template-based summary used when the inference API is unavailable.

This is not real summarization: it fills a fixed template with a few
statistics about the transcript and, for bullet-style prompts, the first
long sentences verbatim. Output is deterministic for a given input.
"""

import math
import re

SENTENCE_BOUNDARY = re.compile(r"[.!?]+")
KEY_POINT_MIN_CHARS = 50
MAX_KEY_POINTS = 5
WORDS_PER_MINUTE = 200


def split_sentences(text: str) -> list:
    return [s for s in SENTENCE_BOUNDARY.split(text or "") if s.strip()]


def count_words(text: str) -> int:
    return len((text or "").split())


def reading_minutes(word_count: int) -> int:
    return math.ceil(word_count / WORDS_PER_MINUTE)


def key_points(sentences: list) -> list:
    """First sentences (in order) longer than KEY_POINT_MIN_CHARS once trimmed."""
    points = [s.strip() for s in sentences if len(s.strip()) > KEY_POINT_MIN_CHARS]
    return points[:MAX_KEY_POINTS]


def generate_fallback_summary(transcript: str, prompt: str) -> str:
    sentences = split_sentences(transcript)
    word_count = count_words(transcript)
    wanted = (prompt or "").lower()

    summary = f'**Summary based on your request: "{prompt}"**\n\n'

    # bullet/points wins over executive when a prompt mentions both
    if "bullet" in wanted or "points" in wanted:
        # heading is written even when no sentence qualifies
        points = key_points(sentences)
        summary += "**Key Points:**\n" + "\n".join(f"• {p}" for p in points) + "\n\n"
    elif "executive" in wanted:
        summary += "**Executive Summary:**\n"
        summary += f"This meeting transcript contains {word_count} words across {len(sentences)} main points. "
        summary += "Key discussion areas include the main topics covered in the conversation.\n\n"

    summary += "**Meeting Statistics:**\n"
    summary += f"• Total words: {word_count}\n"
    summary += f"• Main discussion points: {len(sentences)}\n"
    summary += f"• Estimated reading time: {reading_minutes(word_count)} minutes\n\n"

    summary += ("**Note:** This is a basic summary. For AI-powered summaries, "
                "please configure an AI API key (AI_API_KEY) in the server environment variables.")
    return summary
