"""
Controller that runs the generation review workflow against the API.

Holds one ``GenerationWorkflowState`` and replaces it through ``transition``.
Each user action maps to one event; ``generate`` and ``submit`` also perform
the matching HTTP call and feed its outcome back as an event.
"""

import logging
from collections.abc import Callable
from uuid import UUID, uuid4

from flashdeck.domain.learning.workflow import (
    CandidateAccepted,
    CandidateRejected,
    EditClosed,
    EditOpened,
    EditSaved,
    GenerationFailed,
    GenerationRequested,
    GenerationSucceeded,
    GenerationWorkflowState,
    SubmissionFailed,
    SubmissionSucceeded,
    SubmitRequested,
    WorkflowEvent,
    WorkflowReset,
    build_batch_payload,
    is_in_flight,
    materialize_candidates,
    transition,
)

from .api_client import FlashdeckApiClient, FlashdeckApiError

logger = logging.getLogger(__name__)

GENERATION_FAILED_MESSAGE = "An error occurred while generating flashcards"
SUBMISSION_FAILED_MESSAGE = "An error occurred while saving flashcards"


class GenerationWorkflow:
    """Review workflow for one deck and one user session."""

    def __init__(
        self,
        api_client: FlashdeckApiClient,
        deck_id: UUID | str,
        id_factory: Callable[[], object] = uuid4,
    ) -> None:
        self.api_client = api_client
        self.deck_id = deck_id
        self._id_factory = id_factory
        self._state = GenerationWorkflowState()

    @property
    def state(self) -> GenerationWorkflowState:
        return self._state

    @property
    def busy(self) -> bool:
        """A generation or submission request is waiting for its answer."""
        return is_in_flight(self._state)

    def _dispatch(self, event: WorkflowEvent) -> GenerationWorkflowState:
        self._state = transition(self._state, event)
        return self._state

    async def generate(self, source_text: str) -> GenerationWorkflowState:
        """
        Request candidates for ``source_text``.

        Text outside the allowed length only sets a validation message and
        makes no request.
        """
        if self._dispatch(GenerationRequested(source_text)).step != "loading":
            return self._state

        try:
            generation_id, drafts = await self.api_client.generate_flashcards(
                source_text, self.deck_id
            )
            candidates = materialize_candidates(drafts, id_factory=self._id_factory)
        except FlashdeckApiError as e:
            logger.warning("Flashcard generation failed: %s", e.message)
            return self._dispatch(GenerationFailed(e.message or GENERATION_FAILED_MESSAGE))
        except Exception as e:
            logger.error("Unexpected error while generating flashcards: %s", e, exc_info=True)
            return self._dispatch(GenerationFailed(GENERATION_FAILED_MESSAGE))

        return self._dispatch(GenerationSucceeded(generation_id, candidates))

    def accept(self, candidate_id: str) -> GenerationWorkflowState:
        return self._dispatch(CandidateAccepted(candidate_id))

    def reject(self, candidate_id: str) -> GenerationWorkflowState:
        return self._dispatch(CandidateRejected(candidate_id))

    def open_edit(self, candidate_id: str) -> GenerationWorkflowState:
        return self._dispatch(EditOpened(candidate_id))

    def close_edit(self) -> GenerationWorkflowState:
        return self._dispatch(EditClosed())

    def save_edit(self, candidate_id: str, front: str, back: str) -> GenerationWorkflowState:
        return self._dispatch(EditSaved(candidate_id, front, back))

    async def submit(self) -> GenerationWorkflowState:
        """
        Commit accepted candidates to the deck.

        Without accepted candidates the workflow stays in review with a
        validation message. A failed request moves to the error step.
        """
        if self._dispatch(SubmitRequested()).step != "submitting":
            return self._state

        generation_id = self._state.generation_id
        assert generation_id is not None  # guaranteed by the submitting step
        try:
            created = await self.api_client.create_flashcards_batch(
                self.deck_id, generation_id, build_batch_payload(self._state)
            )
        except FlashdeckApiError as e:
            logger.warning("Saving flashcards failed: %s", e.message)
            return self._dispatch(SubmissionFailed(e.message or SUBMISSION_FAILED_MESSAGE))
        except Exception as e:
            logger.error("Unexpected error while saving flashcards: %s", e, exc_info=True)
            return self._dispatch(SubmissionFailed(SUBMISSION_FAILED_MESSAGE))

        return self._dispatch(SubmissionSucceeded(created_count=created))

    def reset(self) -> GenerationWorkflowState:
        return self._dispatch(WorkflowReset())
