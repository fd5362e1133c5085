"""
FastAPI application - local products backend

Serves the /products resource from memory so the catalog client can be run
and tested end to end without the real backend:

  uvicorn catalog_admin.api.main:app --host 127.0.0.1 --port 5000
"""

from dotenv import load_dotenv

load_dotenv()

import logging
import os
import uuid
from typing import Dict, List

from fastapi import APIRouter, FastAPI, HTTPException, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

# Setup logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


class ProductIn(BaseModel):
    productName: str = Field(min_length=1)
    description: str = Field(min_length=1)
    category: str = Field(min_length=1)
    price: float = Field(ge=0)
    quantity: int = Field(ge=0)


class ProductOut(ProductIn):
    id: str


class ProductRepository:
    """In-memory product storage, keyed by id, in insertion order."""

    def __init__(self) -> None:
        self._products: Dict[str, ProductOut] = {}

    def list(self) -> List[ProductOut]:
        return list(self._products.values())

    def create(self, body: ProductIn) -> ProductOut:
        product = ProductOut(id=uuid.uuid4().hex, **body.model_dump())
        self._products[product.id] = product
        return product

    def update(self, product_id: str, body: ProductIn) -> ProductOut:
        if product_id not in self._products:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Product not found")
        product = ProductOut(id=product_id, **body.model_dump())
        self._products[product_id] = product
        return product

    def delete(self, product_id: str) -> None:
        if self._products.pop(product_id, None) is None:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Product not found")


def build_router(repository: ProductRepository) -> APIRouter:
    router = APIRouter()

    @router.get("/products", response_model=List[ProductOut])
    async def list_products():
        return repository.list()

    @router.post("/products", response_model=ProductOut, status_code=status.HTTP_201_CREATED)
    async def create_product(body: ProductIn):
        product = repository.create(body)
        logger.info("Created product %s", product.id)
        return product

    @router.put("/products/{product_id}", response_model=ProductOut)
    async def update_product(product_id: str, body: ProductIn):
        product = repository.update(product_id, body)
        logger.info("Updated product %s", product_id)
        return product

    @router.delete("/products/{product_id}")
    async def delete_product(product_id: str):
        repository.delete(product_id)
        logger.info("Deleted product %s", product_id)
        return {"success": True, "id": product_id}

    return router


def create_app(repository: ProductRepository = None) -> FastAPI:
    repository = repository or ProductRepository()
    app = FastAPI(
        title="Product Catalog API (local)",
        description="In-memory /products backend for the catalog admin client",
        version="1.0.0",
    )

    # The admin screen runs in a browser on another origin
    app.add_middleware(
        CORSMiddleware,
        allow_origins=os.getenv("CORS_ALLOW_ORIGINS", "*").split(","),
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(HTTPException)
    async def http_error(request: Request, exc: HTTPException):
        return JSONResponse(status_code=exc.status_code, content={"error": str(exc.detail)})

    @app.exception_handler(RequestValidationError)
    async def validation_error(request: Request, exc: RequestValidationError):
        fields = sorted({str(err["loc"][-1]) for err in exc.errors() if err.get("loc")})
        message = f"Invalid product data: {', '.join(fields)}" if fields else "Invalid product data"
        logger.warning("%s %s rejected: %s", request.method, request.url.path, message)
        return JSONResponse(status_code=422, content={"error": message})

    @app.get("/health")
    async def health():
        return {"status": "ok", "products": len(repository.list())}

    app.state.repository = repository
    app.include_router(build_router(repository))
    return app


app = create_app()
