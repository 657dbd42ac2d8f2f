from fastapi import APIRouter, Depends, Query, status
from pydantic import Field
from typing import List, Optional

from shared.config.database import get_settings, get_storage
from shared.config.settings import Settings
from shared.models import Product, ProductPublic, Schema, SubscriptionPlan
from shared.storage import MemStorage
from ..dependencies import page_size_for, require_admin
from ..services import CatalogService

router = APIRouter()


class ProductCreate(Schema):
    name: str = Field(..., min_length=1)
    description: str
    short_description: str
    images: List[str] = Field(default_factory=list)
    platforms: List[str] = Field(default_factory=list)
    download_link: Optional[str] = None
    zip_password: Optional[str] = None
    is_active: bool = True


class ProductUpdate(Schema):
    name: Optional[str] = Field(None, min_length=1)
    description: Optional[str] = None
    short_description: Optional[str] = None
    images: Optional[List[str]] = None
    platforms: Optional[List[str]] = None
    download_link: Optional[str] = None
    zip_password: Optional[str] = None
    is_active: Optional[bool] = None


class ProductListResponse(Schema):
    products: List[ProductPublic]
    total: int
    page: int
    page_size: int


class ProductWithPlansResponse(Schema):
    product: ProductPublic
    plans: List[SubscriptionPlan]


@router.get("", response_model=ProductListResponse)
async def list_products(
    page: int = Query(1, ge=1),
    page_size: Optional[int] = Query(None, alias="pageSize", ge=1),
    active: Optional[bool] = None,
    storage: MemStorage = Depends(get_storage),
    app_settings: Settings = Depends(get_settings)
):
    """Paginated catalogue, optionally only active products"""
    page_size = page_size_for(app_settings, page_size)
    products, total = CatalogService(storage).list_products(active, page, page_size)
    return ProductListResponse(
        products=[ProductPublic.from_product(product) for product in products],
        total=total,
        page=page,
        page_size=page_size,
    )


@router.get("/{product_id}", response_model=ProductWithPlansResponse)
async def get_product(product_id: int, storage: MemStorage = Depends(get_storage)):
    product, plans = CatalogService(storage).get_product_with_plans(product_id)
    return ProductWithPlansResponse(product=ProductPublic.from_product(product), plans=plans)


@router.get("/{product_id}/plans", response_model=List[SubscriptionPlan])
async def get_product_plans(product_id: int, storage: MemStorage = Depends(get_storage)):
    return CatalogService(storage).get_product_plans(product_id)


@router.post(
    "",
    response_model=Product,
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(require_admin)]
)
async def create_product(payload: ProductCreate, storage: MemStorage = Depends(get_storage)):
    return CatalogService(storage).create_product(payload.model_dump())


@router.patch("/{product_id}", response_model=Product, dependencies=[Depends(require_admin)])
async def update_product(
    product_id: int,
    payload: ProductUpdate,
    storage: MemStorage = Depends(get_storage)
):
    return CatalogService(storage).update_product(product_id, payload.changes(nullable=("download_link", "zip_password")))


@router.delete("/{product_id}", dependencies=[Depends(require_admin)])
async def delete_product(product_id: int, storage: MemStorage = Depends(get_storage)):
    CatalogService(storage).delete_product(product_id)
    return {"message": "Product deleted successfully"}
