"""ApplySubscriptionEvent Use Case

Flips a user's plan in response to payment provider events.
"""

import logging
from typing import Optional
from libs.result import Result, Return, Error
from src.app.services.unit_of_work import UnitOfWork
from src.app.repositories.subscription_repository import SubscriptionRepository
from src.domain.subscription import SubscriptionPlan
from .dtos import SubscriptionEventDTO, SubscriptionEventResultDTO

logger = logging.getLogger(__name__)

CHECKOUT_COMPLETED = "checkout.session.completed"
SUBSCRIPTION_UPDATED = "customer.subscription.updated"
SUBSCRIPTION_DELETED = "customer.subscription.deleted"
PAYMENT_FAILED = "invoice.payment_failed"


def _metadata_user_id(data_object: dict) -> Optional[str]:
    metadata = data_object.get("metadata") or {}
    return metadata.get("user_id") or metadata.get("supabase_user_id")


class ApplySubscriptionEvent:
    """
    Use Case: Apply a payment provider event to a user's plan

    Business Rules:
    1. checkout.session.completed upgrades the user in client_reference_id
       to premium
    2. customer.subscription.updated sets premium when the subscription is
       active, free otherwise
    3. customer.subscription.deleted downgrades to free
    4. Subscription events identify the user through metadata.user_id
       (or metadata.supabase_user_id)
    5. Other events, including invoice.payment_failed, are acknowledged
       without changes
    """

    def __init__(self, uow: UnitOfWork, subscription_repo: SubscriptionRepository):
        self.uow = uow
        self.subscription_repo = subscription_repo

    async def execute(self, command: SubscriptionEventDTO) -> Result[SubscriptionEventResultDTO]:
        """
        Execute event handling

        Args:
            command: SubscriptionEventDTO with event type and data object

        Returns:
            Result[SubscriptionEventResultDTO]: Outcome of the event
        """
        event_type = command.event_type
        data_object = command.data_object

        if event_type == CHECKOUT_COMPLETED:
            user_id = data_object.get("client_reference_id")
            plan = SubscriptionPlan.PREMIUM.value
        elif event_type == SUBSCRIPTION_UPDATED:
            user_id = _metadata_user_id(data_object)
            if data_object.get("status") == "active":
                plan = SubscriptionPlan.PREMIUM.value
            else:
                plan = SubscriptionPlan.FREE.value
        elif event_type == SUBSCRIPTION_DELETED:
            user_id = _metadata_user_id(data_object)
            plan = SubscriptionPlan.FREE.value
        else:
            if event_type == PAYMENT_FAILED:
                logger.warning(
                    f"Payment failed for user {_metadata_user_id(data_object) or 'unknown'} "
                    f"(invoice {data_object.get('id')})"
                )
            else:
                logger.info(f"Unhandled subscription event type: {event_type}")
            return Return.ok(
                SubscriptionEventResultDTO(event_type=event_type, handled=False)
            )

        if not user_id:
            logger.error(f"{event_type}: no user reference on event object")
            return Return.err(
                Error(
                    code="MISSING_USER_REFERENCE",
                    message=f"No user reference found on {event_type} event",
                    reason="client_reference_id or metadata.user_id is required",
                )
            )

        try:
            await self.subscription_repo.set_plan(user_id, plan)
            await self.uow.commit()
        except Exception as e:
            await self.uow.rollback()
            logger.error(f"{event_type}: failed to set plan '{plan}' for user {user_id}: {e}")
            return Return.err(
                Error(
                    code="PLAN_UPDATE_FAILED",
                    message=f"Failed to update plan for user {user_id}",
                    reason=str(e),
                )
            )

        logger.info(f"{event_type}: user {user_id} is now on plan '{plan}'")
        return Return.ok(
            SubscriptionEventResultDTO(
                event_type=event_type, handled=True, user_id=user_id, plan=plan
            )
        )
