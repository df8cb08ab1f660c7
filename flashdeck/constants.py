"""
Application constants.

Field bounds shared by the API schemas, the domain entities and the
generation review workflow.
"""

from typing import Literal

MAX_FLASHCARD_FRONT_LENGTH = 200
MAX_FLASHCARD_BACK_LENGTH = 500

MIN_SOURCE_TEXT_LENGTH = 1000
MAX_SOURCE_TEXT_LENGTH = 10000

MAX_DECK_NAME_LENGTH = 100

# Batch commit of reviewed candidates
MAX_BATCH_FLASHCARDS = 50

# Provenance of a flashcard
FlashcardSource = Literal["manual", "ai-full", "ai-edited"]
AIFlashcardSource = Literal["ai-full", "ai-edited"]

SOURCE_MANUAL: FlashcardSource = "manual"
SOURCE_AI_FULL: FlashcardSource = "ai-full"
SOURCE_AI_EDITED: FlashcardSource = "ai-edited"
