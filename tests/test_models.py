"""模型单元测试"""
from decimal import Decimal

import pytest
from sqlalchemy.exc import IntegrityError

from app.models.order import Order, OrderItem
from app.models.product import Product


class TestModels:
    """数据模型测试类"""

    def _order(self, **overrides):
        fields = dict(
            name="Ahmed",
            email="ahmed@example.com",
            address="Muscat",
            subtotal=Decimal("10.00"),
            shipping=Decimal("2.00"),
            total=Decimal("12.00"),
        )
        fields.update(overrides)
        return Order(**fields)

    def test_order_model(self, mock_db_session):
        """测试订单模型"""
        order = self._order(order_items=[
            OrderItem(position=1, name="Oil Filter", quantity=1, price=Decimal("3.00")),
            OrderItem(position=0, name="Brake Pad Set", quantity=2, price=Decimal("3.50")),
        ])
        mock_db_session.add(order)
        mock_db_session.commit()
        mock_db_session.expire_all()

        saved = mock_db_session.query(Order).first()
        assert saved.id is not None
        assert saved.created_at is not None
        assert saved.phone is None
        # 按行号排序
        assert [item.name for item in saved.order_items] == ["Brake Pad Set", "Oil Filter"]
        assert saved.order_items[0].order is saved

    def test_order_item_quantity_must_be_positive(self, mock_db_session):
        """测试数量必须 >= 1"""
        order = self._order(order_items=[
            OrderItem(position=0, name="Bolt", quantity=0, price=Decimal("1.00")),
        ])
        mock_db_session.add(order)

        with pytest.raises(IntegrityError):
            mock_db_session.commit()
        mock_db_session.rollback()

    def test_order_total_non_negative(self, mock_db_session):
        """测试金额不能为负"""
        mock_db_session.add(self._order(total=Decimal("-1")))

        with pytest.raises(IntegrityError):
            mock_db_session.commit()
        mock_db_session.rollback()

    def test_product_model(self, mock_db_session):
        """测试商品模型"""
        product = Product(name="Spark Plug", price=Decimal("4.50"), stock=40)
        mock_db_session.add(product)
        mock_db_session.commit()

        saved = mock_db_session.query(Product).first()
        assert saved.id is not None
        assert saved.name == "Spark Plug"
        assert saved.created_at is not None
        assert saved.updated_at is not None

    def test_product_all_fields_optional(self, mock_db_session):
        """测试商品字段均可为空"""
        mock_db_session.add(Product())
        mock_db_session.commit()

        assert mock_db_session.query(Product).count() == 1
