# app/schemas/order.py
from decimal import Decimal
from typing import List, Optional

from pydantic import Field

from app.schemas.base import BaseSchema, Money

# 与 Numeric(12, 2) 列一致
MAX_AMOUNT = Decimal("9999999999.99")


class OrderItemSchema(BaseSchema):
    name: str = Field(..., description="商品名称")
    quantity: int = Field(..., ge=1, description="数量")
    price: Money = Field(..., ge=0, le=MAX_AMOUNT, description="单价")


# 下单请求
class OrderCreate(BaseSchema):
    name: str
    email: str
    phone: Optional[str] = None
    address: str
    order_items: List[OrderItemSchema] = Field(..., min_length=1)
    subtotal: Money = Field(..., ge=0, le=MAX_AMOUNT)
    shipping: Money = Field(..., ge=0, le=MAX_AMOUNT)
    total: Money = Field(..., ge=0, le=MAX_AMOUNT)


class NotificationStatus(BaseSchema):
    """两封通知邮件各自的发送结果"""
    admin_sent: bool = False
    customer_sent: bool = False


# 下单响应（成功与失败共用）
class OrderSubmissionResponse(BaseSchema):
    success: bool
    message: str
    order_id: Optional[int] = None
    notifications: Optional[NotificationStatus] = None
