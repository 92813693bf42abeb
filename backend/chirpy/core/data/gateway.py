from abc import ABC, abstractmethod
from datetime import datetime
from typing import List, Optional
from uuid import UUID

from pydantic import BaseModel


class User(BaseModel):
    """Persisted user record."""
    id: UUID
    created_at: datetime
    updated_at: datetime
    email: str


class Chirp(BaseModel):
    """Persisted chirp record."""
    id: UUID
    created_at: datetime
    updated_at: datetime
    body: str
    user_id: UUID


class ChirpGateway(ABC):
    """Persistence gateway interface used by the HTTP layer.

    Implementations raise PersistenceError for any backend failure.
    """

    @abstractmethod
    def create_user(self, email: str) -> User:
        """Create a user.

        Args:
            email: Email address, unique across users

        Returns:
            User: The stored user record
        """
        pass

    @abstractmethod
    def create_chirp(self, body: str, user_id: UUID) -> Chirp:
        """Create a chirp owned by an existing user.

        Args:
            body: Already-filtered chirp body
            user_id: Identifier of the owning user

        Returns:
            Chirp: The stored chirp record
        """
        pass

    @abstractmethod
    def list_chirps(self) -> List[Chirp]:
        """Return every chirp, oldest first."""
        pass

    @abstractmethod
    def get_chirp(self, chirp_id: UUID) -> Optional[Chirp]:
        """Return the chirp with the given identifier, or None if absent."""
        pass

    @abstractmethod
    def delete_all_users(self) -> int:
        """Delete every user together with their chirps.

        Returns:
            int: Number of users removed
        """
        pass
