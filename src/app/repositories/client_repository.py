"""Client Repository Interface

Defines the contract for client persistence operations.
"""

from abc import ABC, abstractmethod
from typing import Optional, List
from src.domain.client import Client


class ClientRepository(ABC):
    """Repository interface for Client persistence"""

    @abstractmethod
    async def create(self, client: Client) -> Client:
        """
        Create a new client

        Args:
            client: Client entity to persist

        Returns:
            Created Client
        """
        pass

    @abstractmethod
    async def get_by_id(self, client_id: str, user_id: str) -> Optional[Client]:
        """
        Retrieve a user's client by ID

        Args:
            client_id: Client ID
            user_id: Owning user ID

        Returns:
            Client if found, None otherwise
        """
        pass

    @abstractmethod
    async def list_by_user(self, user_id: str) -> List[Client]:
        """
        Retrieve all clients of a user, ordered by name

        Args:
            user_id: Owning user ID

        Returns:
            List of clients
        """
        pass
