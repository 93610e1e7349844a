"""订单通知邮件渲染

纯函数：同一订单总是渲染出相同的两份 HTML（管理员版、客户版）。
所有用户输入字段都经过 Jinja2 自动转义。
"""

from dataclasses import dataclass
from decimal import Decimal, ROUND_HALF_UP
from pathlib import Path

from jinja2 import Environment, FileSystemLoader, StrictUndefined, select_autoescape

from app.schemas.order import OrderCreate

TEMPLATE_DIR = Path(__file__).resolve().parent.parent / "templates"

_CENT = Decimal("0.01")


def format_money(value) -> str:
    """金额保留两位小数（四舍五入，非银行家舍入）"""
    if not isinstance(value, Decimal):
        value = Decimal(str(value))
    return str(value.quantize(_CENT, rounding=ROUND_HALF_UP))


def _build_environment() -> Environment:
    env = Environment(
        loader=FileSystemLoader(str(TEMPLATE_DIR)),
        autoescape=select_autoescape(["html"]),
        undefined=StrictUndefined,
        trim_blocks=True,
        lstrip_blocks=True,
    )
    env.filters["money"] = format_money
    return env


_env = _build_environment()


@dataclass(frozen=True)
class RenderedEmails:
    admin_html: str
    customer_html: str


def render_order_emails(order: OrderCreate, store_name: str, currency: str) -> RenderedEmails:
    """渲染管理员通知和客户确认两份邮件正文"""
    context = {"order": order, "store_name": store_name, "currency": currency}
    return RenderedEmails(
        admin_html=_env.get_template("emails/admin_order.html").render(**context),
        customer_html=_env.get_template("emails/customer_order.html").render(**context),
    )
