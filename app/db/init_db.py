"""建表工具"""

import logging

from sqlalchemy.engine import Engine

from app.db.base import Base
from app.db.session import engine as default_engine
import app.models  # noqa: F401  注册所有模型

logger = logging.getLogger(__name__)


def init_db(engine: Engine = None, drop: bool = False) -> None:
    """创建所有数据表（drop=True 时先删除）"""
    engine = engine or default_engine
    if drop:
        logger.warning("Dropping all tables")
        Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    logger.info(f"Tables ready: {', '.join(sorted(Base.metadata.tables))}")
