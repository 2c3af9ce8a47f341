"""
Blog API - Pydantic Request/Response Schemas
=============================================

What:  The API contract: editor input DTO, category view and the generic
       response envelope used by every endpoint.
How:   FastAPI binds request bodies to EditorCategory and serializes
       ResultEnvelope[...] responses; OpenAPI docs are generated from these.

Envelope shape (every response body except the health check):
    {"data": <payload or null>, "errors": ["...", ...]}
"""

from typing import Generic, List, Optional, TypeVar, Union

from pydantic import BaseModel, Field, model_validator

T = TypeVar("T")


# ══════════════════════════════════════════════════════════════════════════
# Request Models
# ══════════════════════════════════════════════════════════════════════════


class EditorCategory(BaseModel):
    """
    Input DTO for POST/PUT /v1/categories.

    Both fields are optional at the binding stage so that missing values
    reach validate_editor() and are reported with the API's own messages
    instead of the framework's generic "Field required".
    """

    name: Optional[str] = Field(
        default=None,
        description="Category name, 3 to 40 characters",
        json_schema_extra={"example": "Tecnologia"},
    )
    slug: Optional[str] = Field(
        default=None,
        description="URL identifier, stored lowercase",
        json_schema_extra={"example": "tecnologia"},
    )


# ══════════════════════════════════════════════════════════════════════════
# Response Models
# ══════════════════════════════════════════════════════════════════════════


class CategoryView(BaseModel):
    id: int = Field(description="Server-generated identifier")
    name: str = Field(description="Category name")
    slug: str = Field(description="Lowercase URL identifier")

    model_config = {"from_attributes": True}


class ResultEnvelope(BaseModel, Generic[T]):
    """
    Uniform response wrapper: either a payload or a list of errors.

    Invariant:
        A non-empty `errors` list means `data` is None. Build instances
        through success() / failure() rather than the constructor.

    Example:
        ResultEnvelope[CategoryView].success(view)
        ResultEnvelope.failure("Contéudo não encontrado")
    """

    data: Optional[T] = Field(default=None, description="Payload (null on failure)")
    errors: List[str] = Field(default_factory=list, description="Error messages (empty on success)")

    @model_validator(mode="after")
    def check_data_or_errors(self) -> "ResultEnvelope[T]":
        if self.errors and self.data is not None:
            raise ValueError("An envelope carrying errors cannot carry data")
        return self

    @property
    def succeeded(self) -> bool:
        return not self.errors

    @classmethod
    def success(cls, data: T) -> "ResultEnvelope[T]":
        return cls(data=data, errors=[])

    @classmethod
    def failure(cls, errors: Union[str, List[str]]) -> "ResultEnvelope[T]":
        if isinstance(errors, str):
            errors = [errors]
        if not errors:
            raise ValueError("A failure envelope needs at least one error")
        return cls(data=None, errors=list(errors))
