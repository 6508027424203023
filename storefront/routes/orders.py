"""Order API routes"""

import logging
from fastapi import APIRouter, Depends

from ..models.order import OrderRequest, OrderResponse
from ..validation import validated_order

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1/orders", tags=["Orders"])


@router.post("", response_model=OrderResponse)
async def submit_order(order: OrderRequest = Depends(validated_order)):
    """
    Accept an order and echo it back.

    Orders are not stored and product ids are not checked against the
    catalog.
    """
    data = [line.model_dump(by_alias=True, exclude_unset=True) for line in order.data]
    logger.debug(f"Order received: {data}")
    return OrderResponse(data=data)
