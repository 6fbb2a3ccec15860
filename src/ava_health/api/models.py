"""Pydantic request and response models for the HTTP API."""

from uuid import UUID

from pydantic import BaseModel, Field


class ProductInfoPayload(BaseModel):
    """Optional product metadata sent with a scan."""

    name: str | None = None
    category: str | None = None
    barcode: str | None = None


class AnalyzeRequest(BaseModel):
    """Ingredient text pasted or extracted by the client."""

    text: str
    product: ProductInfoPayload | None = None


class LabelScanRequest(BaseModel):
    """Label photo scan payload."""

    image: str = Field(min_length=1, description="Base64 image or data URL")
    product_name: str | None = None
    product_category: str | None = None
    barcode: str | None = None


class IngredientResponse(BaseModel):
    """Catalog ingredient with a personalized verdict."""

    id: UUID
    name: str
    aliases: list[str]
    category: str
    health_rating: int
    risk_factors: list[str]
    description: str
    is_risky: bool | None = None
    risk_reasons: list[str] = Field(default_factory=list)


class ProductResponse(BaseModel):
    """Saved product summary."""

    id: UUID
    name: str
    category: str
    barcode: str | None = None
    ingredient_ids: list[UUID]


class ScanResponse(BaseModel):
    """Scan outcome returned to the client."""

    ingredients: list[IngredientResponse]
    product: ProductResponse | None = None
    extracted_text: str | None = None


class ProfilePayload(BaseModel):
    """Health profile fields; omitted fields are left unchanged on update."""

    allergies: list[str] | None = None
    dietary_preferences: list[str] | None = None
    skin_conditions: list[str] | None = None


class ProfileResponse(BaseModel):
    """Stored health profile."""

    allergies: list[str]
    dietary_preferences: list[str]
    skin_conditions: list[str]


class ChatRequest(BaseModel):
    """Question for the assistant, optionally about a saved product."""

    message: str = Field(min_length=1)
    product_id: UUID | None = None


class ChatResponse(BaseModel):
    """Assistant reply."""

    message: str
