from datetime import datetime, timezone

from sqlalchemy import (
    Column,
    BigInteger,
    Integer,
    Numeric,
    String,
    Text,
    TIMESTAMP,
    ForeignKey,
    CheckConstraint,
    Index,
)
from sqlalchemy.orm import relationship
from app.db.base import Base


def _utcnow():
    return datetime.now(timezone.utc)


# 订单只写一次，没有更新/删除
class Order(Base):
    __tablename__ = "orders"

    id = Column(
        BigInteger().with_variant(Integer, "sqlite"),
        primary_key=True,
        autoincrement=True,
    )

    name = Column(
        String(255),
        nullable=False,
        comment="客户姓名",
    )

    email = Column(
        String(255),
        nullable=False,
        comment="客户邮箱",
    )

    phone = Column(
        String(64),
        nullable=True,
        comment="联系电话（可选）",
    )

    address = Column(
        Text,
        nullable=False,
        comment="收货地址",
    )

    subtotal = Column(
        Numeric(12, 2),
        nullable=False,
        comment="商品小计",
    )

    shipping = Column(
        Numeric(12, 2),
        nullable=False,
        comment="运费",
    )

    total = Column(
        Numeric(12, 2),
        nullable=False,
        comment="订单总额（未校验 = 小计 + 运费）",
    )

    created_at = Column(
        TIMESTAMP(timezone=True),
        default=_utcnow,
        nullable=False,
    )

    order_items = relationship(
        "OrderItem",
        back_populates="order",
        order_by="OrderItem.position",
        cascade="all, delete-orphan",
    )

    __table_args__ = (
        CheckConstraint("subtotal >= 0", name="ck_orders_subtotal_non_negative"),
        CheckConstraint("shipping >= 0", name="ck_orders_shipping_non_negative"),
        CheckConstraint("total >= 0", name="ck_orders_total_non_negative"),
    )


class OrderItem(Base):
    __tablename__ = "order_items"

    id = Column(
        BigInteger().with_variant(Integer, "sqlite"),
        primary_key=True,
        autoincrement=True,
    )

    order_id = Column(
        BigInteger().with_variant(Integer, "sqlite"),
        ForeignKey("orders.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
        comment="订单ID",
    )

    # 购物车中的原始顺序
    position = Column(
        Integer,
        nullable=False,
        comment="行号",
    )

    name = Column(
        String(255),
        nullable=False,
        comment="商品名称快照",
    )

    quantity = Column(
        Integer,
        nullable=False,
        comment="数量",
    )

    price = Column(
        Numeric(12, 2),
        nullable=False,
        comment="单价",
    )

    order = relationship("Order", back_populates="order_items")

    __table_args__ = (
        CheckConstraint("quantity >= 1", name="ck_order_items_quantity_positive"),
        CheckConstraint("price >= 0", name="ck_order_items_price_non_negative"),
    )


Index(
    "idx_orders_created_at_desc",
    Order.created_at.desc(),
)
