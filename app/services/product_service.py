"""商品目录服务实现"""

import logging
from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.core.exceptions import NotFoundError, PersistenceError
from app.models.product import Product
from app.schemas.product import ProductCreate, ProductUpdate

logger = logging.getLogger(__name__)


class ProductService:
    """商品增删改查，无校验、无分页、无过滤"""

    def __init__(self, db: Session):
        self.db = db

    def _commit(self, action: str) -> None:
        try:
            self.db.commit()
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"商品{action}失败: {e}")
            raise PersistenceError(f"Failed to {action} product") from e

    def create_product(self, data: ProductCreate) -> Product:
        product = Product(**data.column_fields(), extra_fields=data.unmodeled_fields() or None)
        self.db.add(product)
        self._commit("create")
        logger.info(f"Product {product.id} created")
        return product

    def list_products(self) -> List[Product]:
        try:
            return list(self.db.execute(select(Product).order_by(Product.id)).scalars())
        except SQLAlchemyError as e:
            raise PersistenceError("Failed to list products") from e

    def get_product(self, product_id: int) -> Product:
        product = self.db.get(Product, product_id)
        if product is None:
            raise NotFoundError(f"Product {product_id} not found")
        return product

    def update_product(self, product_id: int, data: ProductUpdate) -> Optional[Product]:
        """部分更新，商品不存在时返回 None"""
        try:
            product = self.get_product(product_id)
        except NotFoundError as e:
            logger.info(str(e))
            return None

        for field, value in data.column_fields(exclude_unset=True).items():
            setattr(product, field, value)
        extra = data.unmodeled_fields()
        if extra:
            # 重新赋值，JSON 列才会被标记为已修改
            product.extra_fields = {**(product.extra_fields or {}), **extra}
        self._commit("update")
        return product

    def delete_product(self, product_id: int) -> bool:
        """删除商品，返回是否真的删除了记录"""
        product = self.db.get(Product, product_id)
        if product is None:
            logger.info(f"Product {product_id} not found, nothing to delete")
            return False
        self.db.delete(product)
        self._commit("delete")
        return True
