"""
Domain layer.

The domain layer contains the core business logic of the application.
It has no dependencies on external frameworks or infrastructure.

This layer contains:
- Entities: Decks, flashcards and generation records
- Value Objects: Identifiers and content fingerprints
- The generation review workflow (pure state transitions)
"""
