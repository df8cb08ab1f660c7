"""
Events consumed by the generation review workflow.

Each user action or backend outcome is one frozen dataclass. ``transition``
dispatches on the event type.
"""

from dataclasses import dataclass

from .state import FlashcardCandidate


@dataclass(frozen=True)
class GenerationRequested:
    """User submitted source text for generation."""

    source_text: str


@dataclass(frozen=True)
class GenerationSucceeded:
    generation_id: str
    candidates: tuple[FlashcardCandidate, ...]


@dataclass(frozen=True)
class GenerationFailed:
    message: str


@dataclass(frozen=True)
class CandidateAccepted:
    candidate_id: str


@dataclass(frozen=True)
class CandidateRejected:
    candidate_id: str


@dataclass(frozen=True)
class EditOpened:
    candidate_id: str


@dataclass(frozen=True)
class EditClosed:
    pass


@dataclass(frozen=True)
class EditSaved:
    """User confirmed new text for a candidate. Saving implies acceptance."""

    candidate_id: str
    front: str
    back: str


@dataclass(frozen=True)
class SubmitRequested:
    pass


@dataclass(frozen=True)
class SubmissionSucceeded:
    created_count: int = 0


@dataclass(frozen=True)
class SubmissionFailed:
    message: str


@dataclass(frozen=True)
class WorkflowReset:
    pass


WorkflowEvent = (
    GenerationRequested
    | GenerationSucceeded
    | GenerationFailed
    | CandidateAccepted
    | CandidateRejected
    | EditOpened
    | EditClosed
    | EditSaved
    | SubmitRequested
    | SubmissionSucceeded
    | SubmissionFailed
    | WorkflowReset
)
