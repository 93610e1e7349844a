"""数据库建表本地执行脚本"""

import argparse
import logging
from app.db.init_db import init_db
from app.db.session import engine

# 配置日志
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)

def main(argv=None):
    """主函数"""
    parser = argparse.ArgumentParser(description='订单库建表工具')
    parser.add_argument(
        '--drop',
        action='store_true',
        help='先删除已有数据表（会丢失数据）'
    )
    parser.add_argument(
        '--verbose',
        action='store_true',
        help='详细输出模式'
    )

    args = parser.parse_args(argv)

    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    try:
        init_db(engine, drop=args.drop)
        print(f"✅ 建表完成: {engine.url.render_as_string(hide_password=True)}")
    except Exception as e:
        logger.error(f"建表失败: {str(e)}")
        print(f"❌ 执行失败: {str(e)}")
        return 1

    return 0

if __name__ == "__main__":
    exit(main())
