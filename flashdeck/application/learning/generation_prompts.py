"""Prompts and response schema for flashcard generation."""

from typing import Any

MIN_GENERATED_FLASHCARDS = 3
MAX_GENERATED_FLASHCARDS = 10

FLASHCARD_GENERATION_SCHEMA: dict[str, Any] = {
    "type": "object",
    "properties": {
        "flashcards": {
            "type": "array",
            "description": "Array of generated flashcard candidates",
            "items": {
                "type": "object",
                "properties": {
                    "front": {
                        "type": "string",
                        "description": "The question or prompt for the flashcard (front side)",
                    },
                    "back": {
                        "type": "string",
                        "description": "The answer or explanation for the flashcard (back side)",
                    },
                },
                "required": ["front", "back"],
                "additionalProperties": False,
            },
            "minItems": MIN_GENERATED_FLASHCARDS,
            "maxItems": MAX_GENERATED_FLASHCARDS,
        },
    },
    "required": ["flashcards"],
    "additionalProperties": False,
}

SYSTEM_PROMPT = """You are an expert educational content creator specializing in creating high-quality flashcards.

Your task is to analyze the provided text and generate flashcards that:
- Focus on key concepts, definitions, and important information
- Are clear, concise, and easy to understand
- Have questions (front) that are specific and unambiguous
- Have answers (back) that are accurate and complete
- Are pedagogically effective for learning and retention

Generate between 5-8 flashcards based on the content richness of the text."""


def build_user_prompt(source_text: str) -> str:
    return f"""Generate flashcards from the following text:

{source_text}

Create flashcards that capture the most important information from this text."""
