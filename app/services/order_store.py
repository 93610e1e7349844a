"""订单持久化"""

import logging

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.core.exceptions import PersistenceError
from app.models.order import Order, OrderItem
from app.schemas.order import OrderCreate

logger = logging.getLogger(__name__)


class OrderStore:
    """订单存储：只支持保存，不提供查询/修改/删除"""

    def __init__(self, db: Session):
        self.db = db

    def save(self, payload: OrderCreate) -> Order:
        """保存订单，返回带生成ID和创建时间的记录"""
        order = Order(
            name=payload.name,
            email=payload.email,
            phone=payload.phone,
            address=payload.address,
            subtotal=payload.subtotal,
            shipping=payload.shipping,
            total=payload.total,
            order_items=[
                OrderItem(
                    position=position,
                    name=item.name,
                    quantity=item.quantity,
                    price=item.price,
                )
                for position, item in enumerate(payload.order_items)
            ],
        )
        try:
            self.db.add(order)
            self.db.commit()
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"订单保存失败: {e}")
            raise PersistenceError("Failed to save order") from e

        logger.info(f"Order {order.id} saved for {order.email} ({len(order.order_items)} items)")
        return order
