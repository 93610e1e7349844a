"""测试配置和 fixtures"""
import os

# 导入应用前切换到内存数据库，避免连接真实 PostgreSQL
os.environ.setdefault("DATABASE_URL", "sqlite://")

import pytest
from unittest.mock import Mock
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.core.config import Settings
from app.core.dependencies import get_mail_sender, get_settings
from app.db.base import Base
from app.db.session import get_db
from app.main import app
from app.services.mail_sender import SMTPMailSender


@pytest.fixture
def db_engine():
    """内存 SQLite 引擎（多线程共享同一连接）"""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(engine)
    try:
        yield engine
    finally:
        Base.metadata.drop_all(engine)
        engine.dispose()


@pytest.fixture
def mock_db_session(db_engine):
    """创建测试数据库会话"""
    SessionLocal = sessionmaker(bind=db_engine, autoflush=False, expire_on_commit=False)
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture
def mock_mail_sender():
    """创建模拟邮件发送器"""
    sender = Mock(spec=SMTPMailSender)
    sender.send.return_value = None
    return sender


@pytest.fixture
def test_settings():
    """测试用配置"""
    return Settings(
        EMAIL_USER="shop@example.com",
        EMAIL_PASS="secret",
        ADMIN_EMAIL="owner@example.com",
        STORE_NAME="Farid Express",
        CURRENCY="OMR",
        ORDER_STORE_ENABLED=True,
    )


@pytest.fixture
def client(mock_db_session, mock_mail_sender, test_settings):
    """创建测试客户端（替换数据库、邮件和配置依赖）"""
    app.dependency_overrides[get_db] = lambda: mock_db_session
    app.dependency_overrides[get_mail_sender] = lambda: mock_mail_sender
    app.dependency_overrides[get_settings] = lambda: test_settings
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()


@pytest.fixture
def sample_order_payload():
    """示例下单载荷"""
    return {
        "name": "Ahmed Al-Balushi",
        "email": "ahmed@example.com",
        "phone": "+968 9123 4567",
        "address": "Way 3021, Muscat",
        "orderItems": [
            {"name": "Brake Pad Set", "quantity": 2, "price": 12.5},
            {"name": "Oil Filter", "quantity": 1, "price": 3.25},
        ],
        "subtotal": 28.25,
        "shipping": 2,
        "total": 30.25,
    }
