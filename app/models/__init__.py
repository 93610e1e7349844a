# Models
from .product import Product
from .order import Order, OrderItem

__all__ = [
    "Product",
    "Order",
    "OrderItem",
]
