"""Flashcard decks with AI-assisted card generation."""
