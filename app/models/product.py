from datetime import datetime, timezone

from sqlalchemy import (
    Column,
    BigInteger,
    Integer,
    JSON,
    Numeric,
    String,
    Text,
    TIMESTAMP,
    Index,
)
from app.db.base import Base


def _utcnow():
    return datetime.now(timezone.utc)


class Product(Base):
    __tablename__ = "products"

    id = Column(
        BigInteger().with_variant(Integer, "sqlite"),
        primary_key=True,
        autoincrement=True,
    )

    name = Column(
        String(255),
        nullable=True,
        comment="商品名称",
    )

    description = Column(
        Text,
        nullable=True,
        comment="商品描述",
    )

    price = Column(
        Numeric(12, 2),
        nullable=True,
        comment="售价",
    )

    image_url = Column(
        String(1024),
        nullable=True,
        comment="商品图片",
    )

    category = Column(
        String(128),
        nullable=True,
        comment="商品分类",
    )

    stock = Column(
        Integer,
        nullable=True,
        comment="库存数量",
    )

    # 请求中未建模的其他字段，原样保存
    extra_fields = Column(
        JSON,
        nullable=True,
        comment="其他字段",
    )

    created_at = Column(
        TIMESTAMP(timezone=True),
        default=_utcnow,
        nullable=False,
    )

    updated_at = Column(
        TIMESTAMP(timezone=True),
        default=_utcnow,
        onupdate=_utcnow,
        nullable=False,
    )


Index(
    "idx_products_name",
    Product.name,
)
