import json
from collections.abc import Callable
from itertools import count
from uuid import uuid4

import httpx
import pytest

from flashdeck.client import FlashdeckApiClient, FlashdeckApiError, GenerationWorkflow
from flashdeck.client.workflow import GENERATION_FAILED_MESSAGE, SUBMISSION_FAILED_MESSAGE

DECK_ID = uuid4()
GENERATION_ID = str(uuid4())
SOURCE_TEXT = "Plate tectonics explains the movement of the lithosphere. " * 20


class FakeServer:
    """Answers the two generation endpoints and records what it received."""

    def __init__(self) -> None:
        self.generate_response = httpx.Response(
            200,
            json={
                "generationId": GENERATION_ID,
                "candidates": [
                    {"front": f"Front {i}", "back": f"Back {i}"} for i in range(1, 6)
                ],
            },
        )
        self.batch_response = httpx.Response(
            201, json={"createdCount": 3, "generationId": GENERATION_ID}
        )
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if request.url.path == "/api/ai/generate-flashcards":
            return self.generate_response
        if request.url.path == f"/api/decks/{DECK_ID}/flashcards/batch":
            return self.batch_response
        return httpx.Response(404, json={"error": "Not found", "message": "No such route"})


def sequential_ids() -> Callable[[], str]:
    counter = count(1)
    return lambda: f"c{next(counter)}"


@pytest.fixture
def server() -> FakeServer:
    return FakeServer()


@pytest.fixture
def workflow(server: FakeServer) -> GenerationWorkflow:
    api_client = FlashdeckApiClient("http://flashdeck.test", transport=httpx.MockTransport(server))
    return GenerationWorkflow(api_client, DECK_ID, id_factory=sequential_ids())


async def test_generate_moves_to_review(workflow: GenerationWorkflow, server: FakeServer) -> None:
    state = await workflow.generate(SOURCE_TEXT)

    assert state.step == "review"
    assert state.generation_id == GENERATION_ID
    assert not workflow.busy
    assert [c.id for c in state.candidates] == ["c1", "c2", "c3", "c4", "c5"]
    assert json.loads(server.requests[0].content) == {
        "sourceText": SOURCE_TEXT,
        "deckId": str(DECK_ID),
    }


async def test_short_text_makes_no_request(
    workflow: GenerationWorkflow, server: FakeServer
) -> None:
    state = await workflow.generate("too short")

    assert state.step == "input"
    assert state.validation_message is not None
    assert server.requests == []


async def test_generation_error_uses_server_message(
    workflow: GenerationWorkflow, server: FakeServer
) -> None:
    server.generate_response = httpx.Response(
        503,
        json={"error": "Network error", "message": "Unable to reach AI service."},
    )

    state = await workflow.generate(SOURCE_TEXT)

    assert state.step == "error"
    assert state.error == "Unable to reach AI service."


async def test_generation_error_without_message(
    workflow: GenerationWorkflow, server: FakeServer
) -> None:
    server.generate_response = httpx.Response(502, text="Bad gateway")

    state = await workflow.generate(SOURCE_TEXT)

    assert state.error == "HTTP error! status: 502"


async def test_review_and_submit(workflow: GenerationWorkflow, server: FakeServer) -> None:
    await workflow.generate(SOURCE_TEXT)
    workflow.accept("c1")
    workflow.accept("c2")
    workflow.open_edit("c3")
    workflow.save_edit("c3", "Edited front", "Edited back")
    workflow.reject("c4")
    workflow.reject("c5")

    state = await workflow.submit()

    assert state.step == "input"
    assert state.candidates == ()
    body = json.loads(server.requests[-1].content)
    assert body["generationId"] == GENERATION_ID
    assert body["flashcards"] == [
        {"front": "Front 1", "back": "Back 1", "source": "ai-full"},
        {"front": "Front 2", "back": "Back 2", "source": "ai-full"},
        {"front": "Edited front", "back": "Edited back", "source": "ai-edited"},
    ]


async def test_submit_nothing_accepted(workflow: GenerationWorkflow, server: FakeServer) -> None:
    await workflow.generate(SOURCE_TEXT)

    state = await workflow.submit()

    assert state.step == "review"
    assert state.validation_message is not None
    assert len(server.requests) == 1


async def test_submit_failure_then_reset(
    workflow: GenerationWorkflow, server: FakeServer
) -> None:
    server.batch_response = httpx.Response(
        404, json={"error": "Not found", "message": "Deck not found"}
    )
    await workflow.generate(SOURCE_TEXT)
    workflow.accept("c1")

    state = await workflow.submit()

    assert state.step == "error"
    assert state.error == "Deck not found"

    state = workflow.reset()
    assert state.step == "input"
    assert state.generation_id is None
    assert state.error is None


async def test_api_client_reports_status() -> None:
    api_client = FlashdeckApiClient(
        "http://flashdeck.test",
        transport=httpx.MockTransport(
            lambda request: httpx.Response(
                429, json={"error": "Too many requests", "message": "Slow down", "remaining": 0}
            )
        ),
    )

    with pytest.raises(FlashdeckApiError) as exc_info:
        await api_client.generate_flashcards(SOURCE_TEXT, DECK_ID)
    await api_client.close()

    assert exc_info.value.status_code == 429
    assert exc_info.value.message == "Slow down"


async def test_api_client_network_failure() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("refused", request=request)

    api_client = FlashdeckApiClient("http://flashdeck.test", transport=httpx.MockTransport(handler))

    with pytest.raises(FlashdeckApiError) as exc_info:
        await api_client.create_flashcards_batch(DECK_ID, GENERATION_ID, [])

    assert exc_info.value.status_code is None


@pytest.mark.parametrize(
    "response",
    [
        httpx.Response(200, text="<html>proxy page</html>"),
        httpx.Response(200, json={"candidates": []}),
        httpx.Response(200, json={"generationId": GENERATION_ID, "candidates": [{"front": "Q"}]}),
        httpx.Response(200, json=["not", "an", "object"]),
    ],
    ids=["not-json", "missing-generation-id", "candidate-without-back", "wrong-shape"],
)
async def test_malformed_generation_response_moves_to_error(
    workflow: GenerationWorkflow, server: FakeServer, response: httpx.Response
) -> None:
    server.generate_response = response

    state = await workflow.generate(SOURCE_TEXT)

    assert state.step == "error"
    assert state.error is not None
    assert not workflow.busy
    assert workflow.reset().step == "input"


@pytest.mark.parametrize(
    "response",
    [
        httpx.Response(201, text="created"),
        httpx.Response(201, json={"generationId": GENERATION_ID}),
    ],
    ids=["not-json", "missing-created-count"],
)
async def test_malformed_batch_response_moves_to_error(
    workflow: GenerationWorkflow, server: FakeServer, response: httpx.Response
) -> None:
    server.batch_response = response
    await workflow.generate(SOURCE_TEXT)
    workflow.accept("c1")

    state = await workflow.submit()

    assert state.step == "error"
    assert not workflow.busy
    assert workflow.reset().step == "input"


def failing_route(server: FakeServer, path: str) -> httpx.MockTransport:
    """Serve ``server`` but raise a non-HTTP error on ``path``."""

    def handler(request: httpx.Request) -> httpx.Response:
        if request.url.path == path:
            raise RuntimeError("connection pool exhausted")
        return server(request)

    return httpx.MockTransport(handler)


async def test_unexpected_generation_exception_moves_to_error(server: FakeServer) -> None:
    transport = failing_route(server, "/api/ai/generate-flashcards")
    api_client = FlashdeckApiClient("http://flashdeck.test", transport=transport)
    workflow = GenerationWorkflow(api_client, DECK_ID)

    state = await workflow.generate(SOURCE_TEXT)

    assert state.step == "error"
    assert state.error == GENERATION_FAILED_MESSAGE
    assert not workflow.busy


async def test_unexpected_submission_exception_moves_to_error(server: FakeServer) -> None:
    transport = failing_route(server, f"/api/decks/{DECK_ID}/flashcards/batch")
    workflow = GenerationWorkflow(
        FlashdeckApiClient("http://flashdeck.test", transport=transport),
        DECK_ID,
        id_factory=sequential_ids(),
    )
    await workflow.generate(SOURCE_TEXT)
    workflow.accept("c1")

    state = await workflow.submit()

    assert state.step == "error"
    assert state.error == SUBMISSION_FAILED_MESSAGE
    assert workflow.reset().step == "input"


async def test_api_client_context_manager_closes_connection() -> None:
    transport = httpx.MockTransport(lambda request: httpx.Response(200, json={"createdCount": 2}))

    async with FlashdeckApiClient("http://flashdeck.test", transport=transport) as api_client:
        created = await api_client.create_flashcards_batch(DECK_ID, GENERATION_ID, [])

    assert created == 2
    assert api_client._client.is_closed
