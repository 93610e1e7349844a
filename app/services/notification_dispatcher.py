"""订单通知发送

先发管理员通知，确认投递后再发客户确认邮件。
任一封失败立即停止，不重试。
"""

import logging
from dataclasses import dataclass
from typing import Optional

from app.core.exceptions import DispatchError
from app.schemas.order import OrderCreate
from app.services.mail_sender import SMTPMailSender
from app.services.notification_formatter import RenderedEmails

logger = logging.getLogger(__name__)


@dataclass
class DispatchReport:
    admin_sent: bool = False
    customer_sent: bool = False
    error: Optional[DispatchError] = None

    @property
    def failed(self) -> bool:
        return self.error is not None


class NotificationDispatcher:
    """订单通知调度器"""

    def __init__(self, mail_sender: SMTPMailSender, admin_email: str, store_name: str):
        self.mail_sender = mail_sender
        self.admin_email = admin_email
        self.store_name = store_name

    @property
    def admin_subject(self) -> str:
        return "📦 New Order Received"

    @property
    def customer_subject(self) -> str:
        return f"✅ Your Order Confirmation - {self.store_name}"

    def dispatch(self, order: OrderCreate, emails: RenderedEmails) -> DispatchReport:
        """依次发送两封邮件，返回各自的发送结果"""
        report = DispatchReport()

        try:
            self.mail_sender.send(
                to=self.admin_email,
                subject=self.admin_subject,
                html=emails.admin_html,
                sender_name=f"{self.store_name} Orders",
            )
        except DispatchError as e:
            logger.error(f"管理员通知发送失败，跳过客户确认邮件: {e}")
            report.error = e
            return report
        report.admin_sent = True

        try:
            self.mail_sender.send(
                to=order.email,
                subject=self.customer_subject,
                html=emails.customer_html,
                sender_name=self.store_name,
            )
        except DispatchError as e:
            # 管理员已收到通知，但客户没有
            logger.error(f"客户确认邮件发送失败 ({order.email}): {e}")
            report.error = e
            return report
        report.customer_sent = True

        return report
