"""
Learning bounded context - Domain layer.

This context handles flashcard-based learning features:
- Decks and flashcard management
- AI-powered flashcard generation records
- The review workflow for generated candidates

Aggregates:
- Deck: Owns its flashcards
- Generation: One model call and its acceptance metrics
"""
