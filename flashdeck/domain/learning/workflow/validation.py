"""Local validation used by the review workflow before anything leaves the client."""

from flashdeck.constants import MAX_SOURCE_TEXT_LENGTH, MIN_SOURCE_TEXT_LENGTH
from flashdeck.domain.learning.entities.flashcard import validate_back, validate_front


def source_text_problem(source_text: str) -> str | None:
    """
    Check the length of text submitted for generation.

    Returns:
        A user-facing message, or None when the text is acceptable
    """
    length = len(source_text)
    if length < MIN_SOURCE_TEXT_LENGTH:
        return (
            f"Source text must be at least {MIN_SOURCE_TEXT_LENGTH} characters "
            f"({MIN_SOURCE_TEXT_LENGTH - length} more required)"
        )
    if length > MAX_SOURCE_TEXT_LENGTH:
        return (
            f"Source text must not exceed {MAX_SOURCE_TEXT_LENGTH} characters "
            f"(remove {length - MAX_SOURCE_TEXT_LENGTH})"
        )
    return None


def validate_candidate_text(front: str, back: str) -> tuple[str, str]:
    """
    Apply flashcard field bounds to edited candidate text.

    Raises:
        ValidationError: If either side is empty or too long
    """
    return validate_front(front), validate_back(back)
