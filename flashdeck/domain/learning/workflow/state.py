"""State values of the generation review workflow."""

from dataclasses import dataclass, field
from typing import Literal

WorkflowStep = Literal["input", "loading", "review", "submitting", "error"]
CandidateStatus = Literal["pending", "accepted", "rejected"]

STEP_INPUT: WorkflowStep = "input"
STEP_LOADING: WorkflowStep = "loading"
STEP_REVIEW: WorkflowStep = "review"
STEP_SUBMITTING: WorkflowStep = "submitting"
STEP_ERROR: WorkflowStep = "error"

# A request is in flight; the workflow waits for its outcome.
IN_FLIGHT_STEPS: frozenset[WorkflowStep] = frozenset({STEP_LOADING, STEP_SUBMITTING})


@dataclass(frozen=True)
class CandidateDraft:
    """A front/back pair as returned by the generation endpoint."""

    front: str
    back: str


@dataclass(frozen=True)
class FlashcardCandidate:
    """
    Unconfirmed flashcard under review.

    ``has_edits`` remembers that the user rewrote the text. ``is_edited`` only
    reports it while the candidate is accepted, so an edited candidate that is
    rejected and accepted again keeps its ai-edited provenance.
    """

    id: str
    front: str
    back: str
    status: CandidateStatus = "pending"
    has_edits: bool = False

    @property
    def is_edited(self) -> bool:
        return self.has_edits and self.status == "accepted"

    @property
    def is_accepted(self) -> bool:
        return self.status == "accepted"


@dataclass(frozen=True)
class GenerationWorkflowState:
    """
    Aggregate driving the review workflow.

    Instances are immutable; ``transition`` is the only way to derive a new one.
    ``validation_message`` carries local problems (source text length, empty
    accepted set, invalid edit) that do not change the step, while ``error``
    is set only together with the error step.
    """

    step: WorkflowStep = STEP_INPUT
    candidates: tuple[FlashcardCandidate, ...] = field(default_factory=tuple)
    generation_id: str | None = None
    error: str | None = None
    candidate_to_edit: FlashcardCandidate | None = None
    validation_message: str | None = None

    @property
    def accepted_candidates(self) -> tuple[FlashcardCandidate, ...]:
        return tuple(c for c in self.candidates if c.is_accepted)

    @property
    def accepted_count(self) -> int:
        return len(self.accepted_candidates)

    @property
    def is_editing(self) -> bool:
        return self.candidate_to_edit is not None

    def find_candidate(self, candidate_id: str) -> FlashcardCandidate | None:
        for candidate in self.candidates:
            if candidate.id == candidate_id:
                return candidate
        return None
