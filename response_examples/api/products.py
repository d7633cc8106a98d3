import logging

from fastapi import APIRouter, Depends, Request, Response, status

from response_examples.schemas.problem import ProblemDetails, ValidationProblemDetails
from response_examples.schemas.product import ProductCreate, ProductResponse, ProductUpdate
from response_examples.services.product_service import ProductService
from response_examples.services.validation import validate_product
from response_examples.store import ProductStore, get_store
from response_examples.utils.problems import problem, validation_problem

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/products", tags=["Products"])

NOT_FOUND_RESPONSE = {
    status.HTTP_404_NOT_FOUND: {"model": ProblemDetails, "description": "Product not found"}
}
VALIDATION_RESPONSE = {
    status.HTTP_400_BAD_REQUEST: {"model": ValidationProblemDetails, "description": "Invalid product fields"}
}


def get_product_service(store: ProductStore = Depends(get_store)) -> ProductService:
    return ProductService(store)


def product_not_found(product_id: int):
    return problem(
        status.HTTP_404_NOT_FOUND,
        title="Product not found",
        detail=f"Product with ID {product_id} was not found",
    )


@router.get(
    "/",
    response_model=list[ProductResponse],
    summary="Get all products",
    description="Retrieves a list of all products in the inventory."
)
def list_products(service: ProductService = Depends(get_product_service)):
    """Get every product, in the order they were created."""
    return service.list_all()


@router.get(
    "/{product_id:int}",
    name="get_product",
    response_model=ProductResponse,
    responses=NOT_FOUND_RESPONSE,
    summary="Get a product by ID",
    description="Retrieves a specific product by its unique identifier."
)
def get_product(
    product_id: int,
    service: ProductService = Depends(get_product_service)
):
    """Get a product by ID."""
    product = service.get_by_id(product_id)

    if not product:
        return product_not_found(product_id)

    return product


@router.post(
    "/",
    response_model=ProductResponse,
    status_code=status.HTTP_201_CREATED,
    responses=VALIDATION_RESPONSE,
    summary="Create a new product",
    description="Creates a new product in the inventory and returns the created product."
)
def create_product(
    product_data: ProductCreate,
    request: Request,
    response: Response,
    service: ProductService = Depends(get_product_service)
):
    """
    Create a new product.

    - **name**: Product name (required)
    - **description**: Optional description
    - **price**: Product price, must be non-negative
    - **stockQuantity**: Initial stock quantity, must be non-negative

    The `Location` header points at the new product.
    """
    errors = validate_product(product_data)
    if errors:
        logger.warning("Rejected product create: %s", errors)
        return validation_problem(errors)

    product = service.create(product_data)
    response.headers["Location"] = str(request.url_for("get_product", product_id=product.id))
    return product


@router.put(
    "/{product_id:int}",
    response_model=ProductResponse,
    responses={**VALIDATION_RESPONSE, **NOT_FOUND_RESPONSE},
    summary="Update an existing product",
    description="Replaces name, description, price and stock of an existing product."
)
def update_product(
    product_id: int,
    product_data: ProductUpdate,
    service: ProductService = Depends(get_product_service)
):
    """
    Update a product.

    All mutable fields are replaced; the id and creation time are kept.
    """
    errors = validate_product(product_data)
    if errors:
        logger.warning("Rejected update of product %s: %s", product_id, errors)
        return validation_problem(errors)

    product = service.update(product_id, product_data)

    if not product:
        return product_not_found(product_id)

    return product


@router.delete(
    "/{product_id:int}",
    status_code=status.HTTP_204_NO_CONTENT,
    responses=NOT_FOUND_RESPONSE,
    summary="Delete a product",
    description="Deletes a product from the inventory."
)
def delete_product(
    product_id: int,
    service: ProductService = Depends(get_product_service)
):
    """Delete a product."""
    deleted = service.delete(product_id)

    if not deleted:
        return product_not_found(product_id)

    return None
