"""订单提交服务实现"""

import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional

import pydantic

from app.core.exceptions import DispatchError, ValidationError
from app.schemas.order import OrderCreate
from app.services.notification_dispatcher import DispatchReport, NotificationDispatcher
from app.services.notification_formatter import render_order_emails
from app.services.order_store import OrderStore

logger = logging.getLogger(__name__)


@dataclass
class OrderSubmissionResult:
    order_id: Optional[int]
    report: DispatchReport

    @property
    def persisted(self) -> bool:
        return self.order_id is not None


class OrderService:
    """订单提交核心服务类

    流程：校验载荷 → 保存订单（如启用存储）→ 渲染邮件 → 依次发送两封通知。
    保存成功后发送失败不会回滚订单。
    """

    def __init__(
        self,
        dispatcher: NotificationDispatcher,
        store: Optional[OrderStore] = None,
        store_name: str = "",
        currency: str = "",
    ):
        self.dispatcher = dispatcher
        self.store = store
        self.store_name = store_name
        self.currency = currency

    def parse_order(self, payload: Dict[str, Any]) -> OrderCreate:
        try:
            order = OrderCreate.model_validate(payload)
        except pydantic.ValidationError as e:
            raise ValidationError(f"Invalid order payload: {e.error_count()} error(s)") from e

        # 总额与小计+运费不一致时只告警
        if order.total != order.subtotal + order.shipping:
            logger.warning(
                f"Order total {order.total} != subtotal {order.subtotal} + shipping {order.shipping}"
            )
        return order

    def submit(self, payload: Dict[str, Any]) -> OrderSubmissionResult:
        """提交订单，任一步骤失败都抛出 OrderServiceError 子类"""
        order = self.parse_order(payload)

        order_id = None
        if self.store is not None:
            record = self.store.save(order)
            order_id = record.id

        emails = render_order_emails(order, self.store_name, self.currency)
        report = self.dispatcher.dispatch(order, emails)
        if report.failed:
            raise DispatchError(str(report.error), report=report) from report.error

        logger.info(f"订单处理完成: order_id={order_id}, email={order.email}")
        return OrderSubmissionResult(order_id=order_id, report=report)
