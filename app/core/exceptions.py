"""订单服务异常定义

所有异常在订单接口处统一折叠为 500 通用响应，
具体错误只记录在服务端日志中。
"""


class OrderServiceError(Exception):
    """订单服务异常基类"""


class ValidationError(OrderServiceError):
    """请求载荷格式错误"""


class PersistenceError(OrderServiceError):
    """存储不可用或拒绝写入"""


class DispatchError(OrderServiceError):
    """邮件中继不可用或拒绝发送"""

    def __init__(self, message: str, report=None):
        super().__init__(message)
        # 发送结果（管理员/客户各自是否已发出）
        self.report = report


class NotFoundError(OrderServiceError):
    """更新/删除的目标不存在"""
