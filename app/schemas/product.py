# app/schemas/product.py
from datetime import datetime
from typing import Optional

from pydantic import ConfigDict

from app.schemas.base import BaseSchema, Money


class ProductCreate(BaseSchema):
    # 商品是开放文档：未声明的字段保留在 model_extra 中
    model_config = ConfigDict(extra="allow")

    name: Optional[str] = None
    description: Optional[str] = None
    price: Optional[Money] = None
    image_url: Optional[str] = None
    category: Optional[str] = None
    stock: Optional[int] = None

    def column_fields(self, exclude_unset: bool = False) -> dict:
        return self.model_dump(exclude_unset=exclude_unset, exclude=set(self.model_extra or {}))

    def unmodeled_fields(self) -> dict:
        return dict(self.model_extra or {})


# 部分更新：只应用请求中出现的字段
class ProductUpdate(ProductCreate):
    pass


class ProductSchema(ProductCreate):
    model_config = ConfigDict(extra="ignore")

    id: int
    created_at: datetime
    updated_at: datetime
