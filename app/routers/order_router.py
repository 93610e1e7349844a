"""订单提交路由"""

import json
import logging

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse
from starlette.concurrency import run_in_threadpool

from app.core.dependencies import OrderServiceDep
from app.core.exceptions import DispatchError, OrderServiceError, ValidationError
from app.schemas.order import NotificationStatus, OrderSubmissionResponse
from app.services.order_service import OrderService

logger = logging.getLogger(__name__)
router = APIRouter(tags=["订单"])

FAILURE_MESSAGE = "Failed to process order"


def _notification_status(report) -> NotificationStatus:
    return NotificationStatus(admin_sent=report.admin_sent, customer_sent=report.customer_sent)


def _respond(status_code: int, body: OrderSubmissionResponse) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=body.model_dump(by_alias=True, mode="json", exclude_none=True),
    )


@router.post(
    "/send-email",
    response_model=OrderSubmissionResponse,
    summary="提交订单并发送通知邮件",
    description="""保存订单（如启用存储），然后依次给店主和客户发送邮件。

    **失败语义：**
    - 任一步骤失败统一返回 500，具体原因只记录在服务端日志
    - 管理员邮件失败时不会发送客户邮件
    - 订单保存后发送失败不会回滚
    """,
    responses={500: {"description": "订单处理失败", "model": OrderSubmissionResponse}},
)
async def send_email(request: Request, service: OrderService = OrderServiceDep):
    try:
        try:
            payload = await request.json()
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise ValidationError("Request body is not valid JSON") from e

        result = await run_in_threadpool(service.submit, payload)
    except DispatchError as e:
        logger.error(f"❌ Error: {e}", exc_info=True)
        notifications = _notification_status(e.report) if e.report else None
        return _respond(500, OrderSubmissionResponse(
            success=False, message=FAILURE_MESSAGE, notifications=notifications,
        ))
    except OrderServiceError as e:
        logger.error(f"❌ Error: {e}", exc_info=True)
        return _respond(500, OrderSubmissionResponse(success=False, message=FAILURE_MESSAGE))

    message = "Order saved & emails sent!" if result.persisted else "Emails sent successfully!"
    return _respond(200, OrderSubmissionResponse(
        success=True,
        message=message,
        order_id=result.order_id,
        notifications=_notification_status(result.report),
    ))
