from fastapi import APIRouter, Depends

from response_examples.store import ProductStore, get_store

router = APIRouter(prefix="/health", tags=["Health"])


@router.get(
    "/",
    summary="Health check",
    description="Basic health check endpoint."
)
def health_check():
    """Simple health check."""
    return {"status": "healthy"}


@router.get(
    "/ready",
    summary="Readiness check",
    description="Check that the product store is available."
)
def readiness_check(store: ProductStore = Depends(get_store)):
    """
    Readiness check.

    Returns the number of products currently held in memory.
    """
    return {
        "status": "ready",
        "checks": {
            "product_store": True,
            "product_count": len(store)
        }
    }
