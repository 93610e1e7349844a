"""依赖注入配置模块"""

from fastapi import Depends

from sqlalchemy.orm import Session

from app.core.config import Settings, settings
from app.db.session import get_db
from app.services.mail_sender import SMTPMailSender
from app.services.notification_dispatcher import NotificationDispatcher
from app.services.order_service import OrderService
from app.services.order_store import OrderStore
from app.services.product_service import ProductService


def get_settings() -> Settings:
    """获取全局配置"""
    return settings


def get_mail_sender(config: Settings = Depends(get_settings)) -> SMTPMailSender:
    """获取邮件发送器"""
    return SMTPMailSender.from_settings(config)


def get_order_store(
    db: Session = Depends(get_db),
    config: Settings = Depends(get_settings),
):
    """获取订单存储，未启用时返回 None"""
    if not config.ORDER_STORE_ENABLED:
        return None
    return OrderStore(db)


def get_order_service(
    mail_sender: SMTPMailSender = Depends(get_mail_sender),
    store=Depends(get_order_store),
    config: Settings = Depends(get_settings),
) -> OrderService:
    """获取订单服务实例（依赖注入）"""
    dispatcher = NotificationDispatcher(
        mail_sender=mail_sender,
        admin_email=config.admin_email,
        store_name=config.STORE_NAME,
    )
    return OrderService(
        dispatcher=dispatcher,
        store=store,
        store_name=config.STORE_NAME,
        currency=config.CURRENCY,
    )


def get_product_service(db: Session = Depends(get_db)) -> ProductService:
    """获取商品服务实例（依赖注入）"""
    return ProductService(db=db)


# 常用的依赖注入别名
DatabaseDep = Depends(get_db)
OrderServiceDep = Depends(get_order_service)
ProductServiceDep = Depends(get_product_service)
