"""Stripe webhook route

Verifies the Stripe signature and applies subscription events to the
user's plan.
"""

import json
import logging
import stripe
from fastapi import APIRouter, Depends, Header, Request, status
from sqlmodel.ext.asyncio.session import AsyncSession

from config import ApplicationConfig
from libs.result import Error
from src.app.use_cases.subscriptions import (
    ApplySubscriptionEvent,
    SubscriptionEventDTO,
    SubscriptionEventResultDTO,
)
from src.adapter.repositories import SqlAlchemySubscriptionRepository
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.depends import get_session
from src.api.error import ClientError, raise_for

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/webhooks", tags=["Webhooks"])


def parse_event(payload: bytes, signature: str, secret: str) -> dict:
    """
    Verify and decode a Stripe webhook payload

    Raises:
        ClientError: Webhook secret not configured (500), invalid payload or signature (400)
    """
    if not secret:
        logger.error("STRIPE_WEBHOOK_SECRET not set, rejecting webhook")
        raise ClientError(
            Error(
                code="WEBHOOK_NOT_CONFIGURED",
                message="Webhook secret is not configured",
                reason="STRIPE_WEBHOOK_SECRET is empty",
            ),
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )

    try:
        stripe.Webhook.construct_event(payload, signature or "", secret)
    except stripe.SignatureVerificationError as e:
        raise ClientError(
            Error(code="INVALID_SIGNATURE", message="Invalid Stripe signature", reason=str(e))
        )
    except ValueError as e:
        raise ClientError(
            Error(code="INVALID_PAYLOAD", message="Invalid webhook payload", reason=str(e))
        )

    try:
        event = json.loads(payload)
    except ValueError as e:
        raise ClientError(
            Error(code="INVALID_PAYLOAD", message="Invalid webhook payload", reason=str(e))
        )
    if not isinstance(event, dict) or "type" not in event:
        raise ClientError(
            Error(code="INVALID_PAYLOAD", message="Invalid webhook payload", reason="Missing event type")
        )
    return event


@router.post(
    "/stripe",
    response_model=SubscriptionEventResultDTO,
    status_code=status.HTTP_200_OK,
)
async def stripe_webhook(
    request: Request,
    stripe_signature: str = Header(default="", alias="Stripe-Signature"),
    session: AsyncSession = Depends(get_session)
):
    """
    Receive Stripe subscription events.

    - `checkout.session.completed`: upgrade to premium
    - `customer.subscription.updated`: premium while active, free otherwise
    - `customer.subscription.deleted`: downgrade to free
    - anything else is acknowledged
    """
    payload = await request.body()
    event = parse_event(payload, stripe_signature, ApplicationConfig.STRIPE_WEBHOOK_SECRET)

    use_case = ApplySubscriptionEvent(
        SqlAlchemyUnitOfWork(session),
        SqlAlchemySubscriptionRepository(session),
    )
    result = await use_case.execute(
        SubscriptionEventDTO(
            event_type=event["type"],
            data_object=(event.get("data") or {}).get("object") or {},
        )
    )

    if result.is_err():
        raise_for(result.error)

    return result.value
