"""CreateClient Use Case"""

import logging
from libs.result import Result, Return, Error
from src.app.services.unit_of_work import UnitOfWork
from src.app.repositories.client_repository import ClientRepository
from src.domain.base import as_utc
from src.domain.client import Client
from .dtos import CreateClientCommandDTO, ClientResponseDTO

logger = logging.getLogger(__name__)


class CreateClient:
    """Use Case: Add a client to the user's directory"""

    def __init__(self, uow: UnitOfWork, client_repo: ClientRepository):
        self.uow = uow
        self.client_repo = client_repo

    async def execute(self, command: CreateClientCommandDTO) -> Result[ClientResponseDTO]:
        try:
            client = await self.client_repo.create(
                Client(
                    user_id=command.user_id,
                    name=command.name.strip(),
                    email=command.email,
                    phone=command.phone,
                )
            )
            await self.uow.commit()

            logger.info(f"Created client {client.id} for user {command.user_id}")

            return Return.ok(
                ClientResponseDTO(
                    client_id=client.id,
                    user_id=client.user_id,
                    name=client.name,
                    email=client.email,
                    phone=client.phone,
                    created_at=as_utc(client.created_at),
                )
            )

        except Exception as e:
            await self.uow.rollback()
            logger.error(f"Failed to create client for user {command.user_id}: {e}")
            return Return.err(
                Error(
                    code="CREATE_CLIENT_FAILED",
                    message="Failed to create client",
                    reason=str(e),
                )
            )
