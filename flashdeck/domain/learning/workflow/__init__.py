"""
Generation review workflow.

Users curate AI-generated flashcard candidates (accept, reject, edit) and
commit the accepted ones to a deck. The workflow is an immutable state value
plus a pure ``transition`` function; I/O lives in the client controller.
"""

from .events import (
    CandidateAccepted,
    CandidateRejected,
    EditClosed,
    EditOpened,
    EditSaved,
    GenerationFailed,
    GenerationRequested,
    GenerationSucceeded,
    SubmissionFailed,
    SubmissionSucceeded,
    SubmitRequested,
    WorkflowEvent,
    WorkflowReset,
)
from .state import (
    CandidateDraft,
    CandidateStatus,
    FlashcardCandidate,
    GenerationWorkflowState,
    WorkflowStep,
)
from .transitions import build_batch_payload, is_in_flight, materialize_candidates, transition

__all__ = [
    "CandidateAccepted",
    "CandidateDraft",
    "CandidateRejected",
    "CandidateStatus",
    "EditClosed",
    "EditOpened",
    "EditSaved",
    "FlashcardCandidate",
    "GenerationFailed",
    "GenerationRequested",
    "GenerationSucceeded",
    "GenerationWorkflowState",
    "SubmissionFailed",
    "SubmissionSucceeded",
    "SubmitRequested",
    "WorkflowEvent",
    "WorkflowReset",
    "WorkflowStep",
    "build_batch_payload",
    "is_in_flight",
    "materialize_candidates",
    "transition",
]
