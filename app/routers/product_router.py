"""商品目录路由"""

import logging

from fastapi import APIRouter, Path, Request
from fastapi.responses import JSONResponse
from starlette.concurrency import run_in_threadpool

from app.core.dependencies import ProductServiceDep
from app.schemas.product import ProductCreate, ProductSchema, ProductUpdate
from app.services.product_service import ProductService

logger = logging.getLogger(__name__)
router = APIRouter(
    prefix="/product",
    tags=["商品管理"],
    responses={500: {"description": "服务器内部错误"}},
)


def _serialize(product) -> dict:
    body = ProductSchema.model_validate(product).model_dump(by_alias=True, mode="json")
    return {**(product.extra_fields or {}), **body}


async def _parse_body(request: Request, schema):
    """不做接口层校验：格式错误在路由内按 500 返回"""
    return schema.model_validate(await request.json())


@router.post("", status_code=201, summary="创建商品")
async def create_product(request: Request, service: ProductService = ProductServiceDep):
    try:
        data = await _parse_body(request, ProductCreate)
        product = await run_in_threadpool(service.create_product, data)
        return JSONResponse(status_code=201, content=_serialize(product))
    except Exception as e:
        logger.error(f"创建商品失败: {e}", exc_info=True)
        return JSONResponse(
            status_code=500,
            content={"error": "Failed to create product", "details": str(e)},
        )


@router.get("", summary="商品列表")
async def list_products(service: ProductService = ProductServiceDep):
    try:
        products = await run_in_threadpool(service.list_products)
        return JSONResponse(content=[_serialize(p) for p in products])
    except Exception as e:
        logger.error(f"查询商品失败: {e}", exc_info=True)
        return JSONResponse(status_code=500, content={"error": "Failed to fetch products"})


@router.put("/{product_id}", summary="更新商品（部分字段）")
async def update_product(
    request: Request,
    product_id: int = Path(..., description="商品ID"),
    service: ProductService = ProductServiceDep,
):
    """商品不存在时返回 null"""
    try:
        data = await _parse_body(request, ProductUpdate)
        product = await run_in_threadpool(service.update_product, product_id, data)
        return JSONResponse(content=_serialize(product) if product is not None else None)
    except Exception as e:
        logger.error(f"更新商品失败: {e}", exc_info=True)
        return JSONResponse(status_code=500, content={"error": "Failed to update product"})


@router.delete("/{product_id}", summary="删除商品")
async def delete_product(
    product_id: int = Path(..., description="商品ID"),
    service: ProductService = ProductServiceDep,
):
    """无论商品是否存在都返回同样的确认"""
    try:
        await run_in_threadpool(service.delete_product, product_id)
        return JSONResponse(content={"message": "Product deleted"})
    except Exception as e:
        logger.error(f"删除商品失败: {e}", exc_info=True)
        return JSONResponse(status_code=500, content={"error": "Failed to delete product"})
