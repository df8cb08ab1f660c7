"""
Pure transition function of the generation review workflow.

    input --GenerationRequested--> loading --GenerationSucceeded--> review
    loading --GenerationFailed--> error
    review --SubmitRequested--> submitting --SubmissionSucceeded--> input
    submitting --SubmissionFailed--> error
    error --WorkflowReset--> input

Accept, reject and edit events keep the workflow in review. A failed
submission never returns to review on its own.
"""

from collections.abc import Callable, Iterable
from dataclasses import replace
from uuid import uuid4

from flashdeck.constants import SOURCE_AI_EDITED, SOURCE_AI_FULL
from flashdeck.domain.common.exceptions import InvalidTransitionError, ValidationError

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
    IN_FLIGHT_STEPS,
    STEP_ERROR,
    STEP_INPUT,
    STEP_LOADING,
    STEP_REVIEW,
    STEP_SUBMITTING,
    CandidateDraft,
    FlashcardCandidate,
    GenerationWorkflowState,
    WorkflowStep,
)
from .validation import source_text_problem, validate_candidate_text

MISSING_GENERATION_MESSAGE = "No generation ID found. Please generate flashcards again."
NOTHING_ACCEPTED_MESSAGE = "Accept at least one flashcard before saving."

_ALLOWED_STEPS: dict[type, frozenset[WorkflowStep]] = {
    GenerationRequested: frozenset({STEP_INPUT}),
    GenerationSucceeded: frozenset({STEP_LOADING}),
    GenerationFailed: frozenset({STEP_LOADING}),
    CandidateAccepted: frozenset({STEP_REVIEW}),
    CandidateRejected: frozenset({STEP_REVIEW}),
    EditOpened: frozenset({STEP_REVIEW}),
    EditClosed: frozenset({STEP_REVIEW}),
    EditSaved: frozenset({STEP_REVIEW}),
    SubmitRequested: frozenset({STEP_REVIEW}),
    SubmissionSucceeded: frozenset({STEP_SUBMITTING}),
    SubmissionFailed: frozenset({STEP_SUBMITTING}),
    WorkflowReset: frozenset({STEP_INPUT, STEP_REVIEW, STEP_ERROR}),
}


def transition(state: GenerationWorkflowState, event: WorkflowEvent) -> GenerationWorkflowState:
    """
    Derive the next workflow state.

    Args:
        state: Current state (never modified)
        event: What happened

    Returns:
        The new state. Events that reference an unknown candidate id return
        ``state`` unchanged.

    Raises:
        InvalidTransitionError: If the current step does not accept the event
    """
    allowed = _ALLOWED_STEPS.get(type(event))
    if allowed is None or state.step not in allowed:
        raise InvalidTransitionError(state.step, type(event).__name__)

    if isinstance(event, GenerationRequested):
        problem = source_text_problem(event.source_text)
        if problem:
            return replace(state, validation_message=problem)
        return replace(state, step=STEP_LOADING, error=None, validation_message=None)

    if isinstance(event, GenerationSucceeded):
        return replace(
            state,
            step=STEP_REVIEW,
            generation_id=event.generation_id,
            candidates=tuple(event.candidates),
            candidate_to_edit=None,
        )

    if isinstance(event, GenerationFailed | SubmissionFailed):
        return replace(state, step=STEP_ERROR, error=event.message, candidate_to_edit=None)

    if isinstance(event, CandidateAccepted):
        return _update_candidate(state, event.candidate_id, status="accepted")

    if isinstance(event, CandidateRejected):
        return _update_candidate(state, event.candidate_id, status="rejected")

    if isinstance(event, EditOpened):
        candidate = state.find_candidate(event.candidate_id)
        if candidate is None:
            return state
        return replace(state, candidate_to_edit=candidate, validation_message=None)

    if isinstance(event, EditClosed):
        return replace(state, candidate_to_edit=None, validation_message=None)

    if isinstance(event, EditSaved):
        return _save_edit(state, event)

    if isinstance(event, SubmitRequested):
        return _request_submit(state)

    # SubmissionSucceeded and WorkflowReset both discard everything
    return GenerationWorkflowState()


def _update_candidate(
    state: GenerationWorkflowState, candidate_id: str, **changes: object
) -> GenerationWorkflowState:
    if state.find_candidate(candidate_id) is None:
        return state
    candidates = tuple(
        replace(c, **changes) if c.id == candidate_id else c  # type: ignore[arg-type]
        for c in state.candidates
    )
    return replace(state, candidates=candidates, validation_message=None)


def _save_edit(state: GenerationWorkflowState, event: EditSaved) -> GenerationWorkflowState:
    if state.find_candidate(event.candidate_id) is None:
        return state
    try:
        front, back = validate_candidate_text(event.front, event.back)
    except ValidationError as e:
        return replace(state, validation_message=e.message)

    updated = _update_candidate(
        state, event.candidate_id, front=front, back=back, status="accepted", has_edits=True
    )
    return replace(updated, candidate_to_edit=None)


def _request_submit(state: GenerationWorkflowState) -> GenerationWorkflowState:
    if not state.generation_id:
        return replace(state, step=STEP_ERROR, error=MISSING_GENERATION_MESSAGE)
    if state.accepted_count == 0:
        return replace(state, validation_message=NOTHING_ACCEPTED_MESSAGE)
    return replace(
        state, step=STEP_SUBMITTING, error=None, validation_message=None, candidate_to_edit=None
    )


def materialize_candidates(
    drafts: Iterable[CandidateDraft],
    id_factory: Callable[[], object] = uuid4,
) -> tuple[FlashcardCandidate, ...]:
    """
    Turn generated front/back pairs into reviewable candidates.

    Every candidate starts pending and unedited with a fresh local id.
    """
    return tuple(
        FlashcardCandidate(id=str(id_factory()), front=draft.front, back=draft.back)
        for draft in drafts
    )


def build_batch_payload(state: GenerationWorkflowState) -> list[dict[str, str]]:
    """
    Build the flashcards list for the batch endpoint.

    Only accepted candidates are included. ``source`` is ``ai-edited`` when the
    user changed the text and ``ai-full`` otherwise.
    """
    return [
        {
            "front": candidate.front,
            "back": candidate.back,
            "source": SOURCE_AI_EDITED if candidate.is_edited else SOURCE_AI_FULL,
        }
        for candidate in state.accepted_candidates
    ]


def is_in_flight(state: GenerationWorkflowState) -> bool:
    return state.step in IN_FLIGHT_STEPS
