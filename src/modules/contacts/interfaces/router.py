"""Contact form API routes."""

from fastapi import APIRouter, Depends, Request, status

from src.core.interfaces.http.params import get_client_ip, get_user_agent
from src.core.interfaces.http.response import ApiResponse
from src.modules.contacts.application.commands import SubmitContactCommand
from src.modules.contacts.application.dependencies import get_submit_contact_handler
from src.modules.contacts.application.handlers import SubmitContactHandler
from src.modules.contacts.interfaces.schemas import (
    ContactCreateRequest,
    ContactSubmittedResponse,
)

router = APIRouter(prefix="/contact", tags=["contact"])


@router.post(
    "",
    response_model=ApiResponse[ContactSubmittedResponse],
    status_code=status.HTTP_201_CREATED,
    summary="提交联系表单",
    description="校验失败返回 400 及逐字段错误信息",
)
async def submit_contact(
    body: ContactCreateRequest,
    request: Request,
    handler: SubmitContactHandler = Depends(get_submit_contact_handler),
) -> ApiResponse[ContactSubmittedResponse]:
    command = SubmitContactCommand(
        **body.model_dump(),
        ip_address=get_client_ip(request),
        user_agent=get_user_agent(request),
    )
    contact = await handler.handle(command)
    return ApiResponse.ok(
        data=ContactSubmittedResponse(id=contact.id),
        message="Your message has been sent. We will get back to you soon.",
    )
