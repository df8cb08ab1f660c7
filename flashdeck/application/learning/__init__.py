"""
Learning bounded context - Application layer.

Contains use cases for decks, flashcards and AI generation:
- Commands: Create decks and flashcards, generate candidates, commit a
  reviewed generation
- Queries: List decks, list flashcards of a deck
"""
