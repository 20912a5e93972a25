"""Newsletter API routes."""

from fastapi import APIRouter, Depends

from src.core.interfaces.http.response import ApiResponse
from src.modules.newsletter.application.commands import SubscribeCommand
from src.modules.newsletter.application.dependencies import get_subscribe_handler
from src.modules.newsletter.application.handlers import SubscribeHandler
from src.modules.newsletter.interfaces.schemas import (
    SubscribeRequest,
    SubscribeResponse,
)

router = APIRouter(prefix="/newsletter", tags=["newsletter"])


@router.post(
    "",
    response_model=ApiResponse[SubscribeResponse],
    summary="订阅邮件通讯",
    description="已订阅的邮箱返回 400 ALREADY_SUBSCRIBED；已退订的邮箱重新激活",
)
async def subscribe(
    request: SubscribeRequest,
    handler: SubscribeHandler = Depends(get_subscribe_handler),
) -> ApiResponse[SubscribeResponse]:
    subscriber = await handler.handle(
        SubscribeCommand(email=str(request.email), name=request.name)
    )
    return ApiResponse.ok(
        data=SubscribeResponse(
            email=subscriber.email, status=subscriber.status.value
        ),
        message="Thank you for subscribing to our newsletter.",
    )
