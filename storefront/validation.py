"""
Order payload validation

Checks incoming order payloads against the static OrderRequest schema
before they reach the route handler. Product ids are not checked against
the catalog.
"""

import json
import logging
from dataclasses import dataclass, field
from typing import Any, Optional

from fastapi import HTTPException, Request
from pydantic import ValidationError

from .models.order import OrderRequest

logger = logging.getLogger(__name__)


@dataclass
class OrderValidation:
    """Outcome of validating an order payload"""
    ok: bool
    order: Optional[OrderRequest] = None
    errors: list[dict[str, Any]] = field(default_factory=list)


def validate_order(payload: Any) -> OrderValidation:
    """
    Validate a decoded JSON payload as an order.

    Returns:
        OrderValidation with the parsed order on success, or a list of
        {loc, msg, type} errors describing each violated constraint
    """
    try:
        order = OrderRequest.model_validate(payload)
    except ValidationError as e:
        errors = [
            {"loc": list(err["loc"]), "msg": err["msg"], "type": err["type"]}
            for err in e.errors()
        ]
        return OrderValidation(ok=False, errors=errors)

    return OrderValidation(ok=True, order=order)


async def validated_order(request: Request) -> OrderRequest:
    """
    FastAPI dependency returning the validated order.

    Rejects the request with 400 when the body is not JSON or does not
    match the order schema, so the handler is never called.
    """
    body = await request.body()
    try:
        payload = json.loads(body) if body else None
    except ValueError:
        raise HTTPException(
            status_code=400,
            detail=[{"loc": ["body"], "msg": "Malformed JSON body", "type": "json_invalid"}],
        )

    result = validate_order(payload)
    if not result.ok:
        logger.info(f"Order rejected: {result.errors}")
        raise HTTPException(status_code=400, detail=result.errors)

    return result.order
