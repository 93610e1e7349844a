"""商品目录服务单元测试"""
from decimal import Decimal
from unittest.mock import Mock

import pytest
from sqlalchemy.exc import OperationalError
from sqlalchemy.orm import Session

from app.core.exceptions import NotFoundError, PersistenceError
from app.schemas.product import ProductCreate, ProductUpdate
from app.services.product_service import ProductService


class TestProductService:
    """商品服务测试类"""

    def test_create_and_list(self, mock_db_session):
        """测试创建与列表"""
        service = ProductService(mock_db_session)

        first = service.create_product(ProductCreate(name="Spark Plug", price=Decimal("4.50")))
        second = service.create_product(ProductCreate(name="Air Filter"))

        assert first.id != second.id
        assert [p.id for p in service.list_products()] == [first.id, second.id]

    def test_update_only_given_fields(self, mock_db_session):
        """测试只更新请求中出现的字段"""
        service = ProductService(mock_db_session)
        product = service.create_product(ProductCreate(name="Spark Plug", stock=10))

        updated = service.update_product(product.id, ProductUpdate(stock=3))

        assert updated.stock == 3
        assert updated.name == "Spark Plug"

    def test_update_can_clear_field(self, mock_db_session):
        """测试显式传入 null 会清空字段"""
        service = ProductService(mock_db_session)
        product = service.create_product(ProductCreate(name="Spark Plug", category="Ignition"))

        updated = service.update_product(product.id, ProductUpdate(category=None))

        assert updated.category is None

    def test_extra_fields_merge(self, mock_db_session):
        """测试未声明字段保存到 extra_fields，更新时合并"""
        service = ProductService(mock_db_session)
        product = service.create_product(ProductCreate.model_validate({"name": "Spark Plug", "brand": "NGK"}))

        assert product.extra_fields == {"brand": "NGK"}

        updated = service.update_product(product.id, ProductUpdate.model_validate({"gap": "0.8mm"}))

        assert updated.extra_fields == {"brand": "NGK", "gap": "0.8mm"}
        assert updated.name == "Spark Plug"

    def test_update_missing(self, mock_db_session):
        """测试更新不存在的商品"""
        assert ProductService(mock_db_session).update_product(404, ProductUpdate(name="x")) is None

    def test_get_missing_raises(self, mock_db_session):
        """测试查询不存在的商品"""
        with pytest.raises(NotFoundError):
            ProductService(mock_db_session).get_product(404)

    def test_delete(self, mock_db_session):
        """测试删除返回是否真的删除"""
        service = ProductService(mock_db_session)
        product = service.create_product(ProductCreate(name="Spark Plug"))

        assert service.delete_product(product.id) is True
        assert service.delete_product(product.id) is False
        assert service.list_products() == []

    def test_commit_failure(self):
        """测试写入失败回滚"""
        db_mock = Mock(spec=Session)
        db_mock.commit.side_effect = OperationalError("INSERT", {}, Exception("connection refused"))

        with pytest.raises(PersistenceError):
            ProductService(db_mock).create_product(ProductCreate(name="Spark Plug"))

        db_mock.rollback.assert_called_once()
