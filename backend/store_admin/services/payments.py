"""Payment-provider webhook: signature verification and paid-order creation.

The provider signs ``"<timestamp>.<raw body>"`` with HMAC-SHA256 and sends
``t=<timestamp>,v1=<hex digest>`` in the ``Stripe-Signature`` header.
"""

import hashlib
import hmac
import json
import logging
import time
import uuid
from typing import Any

from sqlalchemy.ext.asyncio import AsyncSession

from store_admin.models import Order, OrderItem

logger = logging.getLogger(__name__)

SIGNATURE_HEADER = "Stripe-Signature"
CHECKOUT_COMPLETED = "checkout.session.completed"
ADDRESS_PARTS = ("line1", "line2", "city", "state", "postal_code", "country")


def compute_signature(payload: bytes, timestamp: int, secret: str) -> str:
    signed = f"{timestamp}.".encode("utf-8") + payload
    return hmac.new(secret.encode("utf-8"), signed, hashlib.sha256).hexdigest()


def _parse_signature_header(header: str) -> tuple[int | None, list[str]]:
    timestamp: int | None = None
    signatures: list[str] = []
    for part in header.split(","):
        key, _, value = part.strip().partition("=")
        if key == "t":
            try:
                timestamp = int(value)
            except ValueError:
                return None, []
        elif key == "v1" and value:
            signatures.append(value)
    return timestamp, signatures


def verify_signature(
    payload: bytes,
    header: str | None,
    secret: str,
    tolerance: int = 300,
    now: float | None = None,
) -> bool:
    """Check the header signature against the raw body.

    A tolerance of 0 disables the replay-window check.
    """
    if not header or not secret:
        return False

    timestamp, signatures = _parse_signature_header(header)
    if timestamp is None or not signatures:
        return False

    expected = compute_signature(payload, timestamp, secret)
    if not any(hmac.compare_digest(expected, sig) for sig in signatures):
        return False

    if tolerance and abs((now if now is not None else time.time()) - timestamp) > tolerance:
        return False
    return True


def format_address(address: dict[str, Any] | None) -> str:
    """Join the present address parts with ", "."""
    address = address or {}
    return ", ".join(str(address[part]) for part in ADDRESS_PARTS if address.get(part) is not None)


def _parse_uuid(raw: Any) -> uuid.UUID | None:
    try:
        return uuid.UUID(str(raw))
    except ValueError:
        return None


async def create_paid_order(
    db: AsyncSession,
    store_id: uuid.UUID,
    product_ids: list[uuid.UUID],
    address: str,
    phone: str,
) -> Order:
    """Persist one paid order and its items in a single commit."""
    order = Order(
        store_id=store_id,
        is_paid=True,
        address=address,
        phone=phone,
        order_items=[OrderItem(product_id=product_id) for product_id in product_ids],
    )
    db.add(order)
    await db.commit()
    return order


async def handle_event(db: AsyncSession, event: dict[str, Any]) -> Order | None:
    """Act on a verified event. Returns the created order, if any.

    Redelivery of the same completed session creates another order: events are
    not deduplicated by session id.
    """
    event_type = event.get("type")
    if event_type != CHECKOUT_COMPLETED:
        logger.debug("Ignoring payment event type=%s", event_type)
        return None

    session = (event.get("data") or {}).get("object") or {}
    metadata = session.get("metadata") or {}
    customer = session.get("customer_details") or {}

    raw_store_id = metadata.get("storeId")
    if not raw_store_id:
        logger.info("Checkout session %s has no storeId, skipping", session.get("id"))
        return None

    store_id = _parse_uuid(raw_store_id)
    try:
        raw_product_ids = json.loads(metadata.get("productIds") or "[]")
    except json.JSONDecodeError:
        raw_product_ids = None
    product_ids = [_parse_uuid(pid) for pid in raw_product_ids or []]

    if store_id is None or not isinstance(raw_product_ids, list) or None in product_ids:
        logger.warning(
            "Checkout session %s has malformed metadata storeId=%s productIds=%s",
            session.get("id"), raw_store_id, metadata.get("productIds"),
        )
        return None

    order = await create_paid_order(
        db,
        store_id=store_id,
        product_ids=product_ids,
        address=format_address(customer.get("address")),
        phone=customer.get("phone") or "",
    )
    logger.info(
        "Created paid order %s for store %s with %d items (session=%s)",
        order.id, store_id, len(product_ids), session.get("id"),
    )
    return order
