"""Gig Repository Interface

Defines the contract for gig persistence operations.
"""

from abc import ABC, abstractmethod
from typing import Optional, List
from src.domain.gig import Gig


class GigRepository(ABC):
    """
    Repository interface for Gig persistence

    All reads are scoped to the owning user.
    """

    @abstractmethod
    async def create(self, gig: Gig) -> Gig:
        """
        Create a new gig

        Args:
            gig: Gig entity to persist

        Returns:
            Created Gig
        """
        pass

    @abstractmethod
    async def get_by_id(self, gig_id: str, user_id: str) -> Optional[Gig]:
        """
        Retrieve a user's gig by ID

        Args:
            gig_id: Gig ID
            user_id: Owning user ID

        Returns:
            Gig if found, None otherwise
        """
        pass

    @abstractmethod
    async def list_by_user(self, user_id: str) -> List[Gig]:
        """
        Retrieve all gigs of a user, ordered by date

        Args:
            user_id: Owning user ID

        Returns:
            List of gigs
        """
        pass

    @abstractmethod
    async def count_by_user(self, user_id: str) -> int:
        """
        Count gigs of a user

        Used by the gig limit check.

        Args:
            user_id: Owning user ID

        Returns:
            Number of gigs
        """
        pass

    @abstractmethod
    async def update(self, gig: Gig) -> Gig:
        """
        Update an existing gig

        Args:
            gig: Gig entity with updated values

        Returns:
            Updated Gig
        """
        pass

    @abstractmethod
    async def delete(self, gig: Gig) -> None:
        """
        Hard delete a gig

        Args:
            gig: Gig entity to delete
        """
        pass
