from datetime import datetime
from typing import Optional

from response_examples.schemas.base import CamelModel


class ValidationRequest(CamelModel):
    """Body accepted by the validation-error demo."""
    name: Optional[str] = None
    email: Optional[str] = None
    age: int = 0


class ConflictRequest(CamelModel):
    """Body accepted by the conflict demo."""
    identifier: Optional[str] = None


class UnprocessableRequest(CamelModel):
    """Body accepted by the unprocessable-entity demo."""
    start_date: Optional[datetime] = None
    end_date: Optional[datetime] = None
