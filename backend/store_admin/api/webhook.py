"""Payment-provider webhook endpoint."""

import json
import logging

from fastapi import APIRouter, Depends, Request, Response
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from store_admin.core.config import settings
from store_admin.core.exceptions import InternalError, SignatureInvalid
from store_admin.db.base import get_db
from store_admin.services.payments import SIGNATURE_HEADER, handle_event, verify_signature

logger = logging.getLogger(__name__)

router = APIRouter(tags=["webhook"])


@router.post("/webhook")
async def payment_webhook(request: Request, db: AsyncSession = Depends(get_db)):
    """Receive a payment event.

    Anything that verifies is acknowledged with an empty 200, including event
    types we ignore, so the provider does not keep redelivering them.
    """
    body = await request.body()
    signature = request.headers.get(SIGNATURE_HEADER)

    if not verify_signature(
        body,
        signature,
        settings.PAYMENT_WEBHOOK_SECRET,
        tolerance=settings.WEBHOOK_TOLERANCE_SECONDS,
    ):
        logger.warning("Payment webhook: invalid signature")
        raise SignatureInvalid()

    try:
        event = json.loads(body)
    except ValueError:
        logger.warning("Payment webhook: body is not JSON")
        raise SignatureInvalid()
    if not isinstance(event, dict):
        raise SignatureInvalid()

    try:
        await handle_event(db, event)
    except SQLAlchemyError:
        await db.rollback()
        logger.exception("[WEBHOOK] failed to store order for event %s", event.get("id"))
        raise InternalError()

    return Response(status_code=200)
