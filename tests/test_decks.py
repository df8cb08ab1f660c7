"""Tests for deck API endpoints."""

from uuid import UUID, uuid4

from fastapi import status
from fastapi.testclient import TestClient
from sqlalchemy.orm import Session

from flashdeck import models


class TestCreateDeck:
    """Test suite for POST /decks endpoint."""

    def test_create_deck_success(self, client: TestClient, db_session: Session) -> None:
        response = client.post("/api/decks", json={"name": "  Organic chemistry  "})

        assert response.status_code == status.HTTP_201_CREATED
        data = response.json()
        assert data["name"] == "Organic chemistry"
        assert "createdAt" in data

        db_deck = db_session.query(models.Deck).filter_by(name="Organic chemistry").first()
        assert db_deck is not None
        assert str(db_deck.id) == data["id"]

    def test_create_deck_empty_name(self, client: TestClient) -> None:
        response = client.post("/api/decks", json={"name": ""})

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        data = response.json()
        assert data["error"] == "Invalid request body"
        assert "name" in data["details"]

    def test_create_deck_whitespace_name(self, client: TestClient) -> None:
        """Whitespace passes the schema but not the domain rule."""
        response = client.post("/api/decks", json={"name": "   "})

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json()["message"] == "Deck name cannot be empty"

    def test_create_deck_name_too_long(self, client: TestClient) -> None:
        response = client.post("/api/decks", json={"name": "x" * 101})

        assert response.status_code == status.HTTP_400_BAD_REQUEST


class TestGetDeck:
    """Test suite for GET /decks/:id endpoint."""

    def test_get_deck_success(self, client: TestClient, test_deck: models.Deck) -> None:
        response = client.get(f"/api/decks/{test_deck.id}")

        assert response.status_code == status.HTTP_200_OK
        assert response.json()["name"] == "Biology"

    def test_get_deck_not_found(self, client: TestClient) -> None:
        response = client.get(f"/api/decks/{uuid4()}")

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.json()["error"] == "Not found"

    def test_get_deck_owned_by_other_user(
        self, client: TestClient, other_user_deck: models.Deck
    ) -> None:
        response = client.get(f"/api/decks/{other_user_deck.id}")

        assert response.status_code == status.HTTP_404_NOT_FOUND

    def test_get_deck_invalid_id(self, client: TestClient) -> None:
        response = client.get("/api/decks/not-a-uuid")

        assert response.status_code == status.HTTP_400_BAD_REQUEST


class TestListDecks:
    """Test suite for GET /decks endpoint."""

    def test_list_decks_with_counts(
        self,
        client: TestClient,
        db_session: Session,
        test_deck: models.Deck,
        other_user_deck: models.Deck,
    ) -> None:
        db_session.add_all(
            [
                models.Flashcard(deck_id=test_deck.id, front="Q1", back="A1", source="manual"),
                models.Flashcard(deck_id=test_deck.id, front="Q2", back="A2", source="manual"),
            ]
        )
        db_session.commit()

        response = client.get("/api/decks")

        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert len(data["data"]) == 1
        assert data["data"][0]["id"] == str(test_deck.id)
        assert data["data"][0]["flashcardCount"] == 2
        assert data["pagination"] == {"currentPage": 1, "totalPages": 1, "totalItems": 1}

    def test_list_decks_pagination(
        self, client: TestClient, db_session: Session, user_id: UUID
    ) -> None:
        for i in range(5):
            db_session.add(models.Deck(user_id=user_id, name=f"Deck {i}"))
        db_session.commit()

        response = client.get("/api/decks", params={"page": 2, "limit": 2})

        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert len(data["data"]) == 2
        assert data["pagination"] == {"currentPage": 2, "totalPages": 3, "totalItems": 5}

    def test_list_decks_empty(self, client: TestClient) -> None:
        response = client.get("/api/decks")

        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert data["data"] == []
        assert data["pagination"]["totalPages"] == 0

    def test_list_decks_limit_too_large(self, client: TestClient) -> None:
        response = client.get("/api/decks", params={"limit": 101})

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert "limit" in response.json()["details"]


class TestRenameDeck:
    """Test suite for PATCH /decks/:id endpoint."""

    def test_rename_deck_success(
        self, client: TestClient, db_session: Session, test_deck: models.Deck
    ) -> None:
        response = client.patch(f"/api/decks/{test_deck.id}", json={"name": " Cell biology "})

        assert response.status_code == status.HTTP_200_OK
        assert response.json()["name"] == "Cell biology"

        db_session.expire_all()
        assert db_session.get(models.Deck, test_deck.id).name == "Cell biology"

    def test_rename_deck_empty_name(self, client: TestClient, test_deck: models.Deck) -> None:
        response = client.patch(f"/api/decks/{test_deck.id}", json={"name": ""})

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert "name" in response.json()["details"]

    def test_rename_deck_whitespace_name(
        self, client: TestClient, test_deck: models.Deck
    ) -> None:
        response = client.patch(f"/api/decks/{test_deck.id}", json={"name": "   "})

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json()["message"] == "Deck name cannot be empty"

    def test_rename_deck_not_found(self, client: TestClient) -> None:
        response = client.patch(f"/api/decks/{uuid4()}", json={"name": "Anything"})

        assert response.status_code == status.HTTP_404_NOT_FOUND

    def test_rename_deck_owned_by_other_user(
        self, client: TestClient, other_user_deck: models.Deck
    ) -> None:
        response = client.patch(f"/api/decks/{other_user_deck.id}", json={"name": "Taken"})

        assert response.status_code == status.HTTP_404_NOT_FOUND


class TestDeleteDeck:
    """Test suite for DELETE /decks/:id endpoint."""

    def test_delete_deck_removes_flashcards_and_generations(
        self,
        client: TestClient,
        db_session: Session,
        test_deck: models.Deck,
        test_generation: models.Generation,
    ) -> None:
        deck_id = test_deck.id
        db_session.add_all(
            [
                models.Flashcard(deck_id=deck_id, front="Q1", back="A1", source="manual"),
                models.Flashcard(
                    deck_id=deck_id,
                    generation_id=test_generation.id,
                    front="Q2",
                    back="A2",
                    source="ai-full",
                ),
            ]
        )
        db_session.commit()

        response = client.delete(f"/api/decks/{deck_id}")

        assert response.status_code == status.HTTP_204_NO_CONTENT
        db_session.expire_all()
        assert db_session.get(models.Deck, deck_id) is None
        assert db_session.query(models.Flashcard).filter_by(deck_id=deck_id).count() == 0
        assert db_session.query(models.Generation).filter_by(deck_id=deck_id).count() == 0

        response = client.get(f"/api/decks/{deck_id}")
        assert response.status_code == status.HTTP_404_NOT_FOUND

    def test_delete_deck_not_found(self, client: TestClient) -> None:
        response = client.delete(f"/api/decks/{uuid4()}")

        assert response.status_code == status.HTTP_404_NOT_FOUND

    def test_delete_deck_owned_by_other_user(
        self, client: TestClient, db_session: Session, other_user_deck: models.Deck
    ) -> None:
        deck_id = other_user_deck.id

        response = client.delete(f"/api/decks/{deck_id}")

        assert response.status_code == status.HTTP_404_NOT_FOUND
        db_session.expire_all()
        assert db_session.get(models.Deck, deck_id) is not None
