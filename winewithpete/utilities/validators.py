"""
Input validation schemas using Pydantic for better data integrity.

Stored records (recipes, packages) are validated when the repositories load
them; request bodies are validated by FastAPI through the same models.
"""
import re
from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import List, Optional

from winewithpete.utilities.constants import (
    DEFAULT_GATHERING_INTEREST, DIFFICULTY_LEVELS, EVENT_TYPES, GATHERING_INTEREST_TYPES
)

EMAIL_PATTERN = re.compile(r'^[^\s@]+@[^\s@]+\.[^\s@]+$')


def sanitize_string(value: str) -> str:
    """Trim and drop angle brackets so user text can't smuggle markup."""
    return value.strip().replace('<', '').replace('>', '')


def _validate_email(v: str) -> str:
    v = v.strip().lower()
    if not EMAIL_PATTERN.match(v):
        raise ValueError('Invalid email format')
    return v


class IngredientInput(BaseModel):
    """Schema for a recipe ingredient line."""
    item: str = Field(..., min_length=1, max_length=100)
    amount: float = Field(..., ge=0, allow_inf_nan=False)
    unit: str = Field(default="", max_length=30)
    notes: Optional[str] = Field(default=None, max_length=200)

    @field_validator('item', 'unit')
    @classmethod
    def strip_whitespace(cls, v):
        """Remove leading/trailing whitespace."""
        if isinstance(v, str):
            return v.strip()
        return v


class RecipeInput(BaseModel):
    """Schema for a stored recipe."""
    id: str = Field(..., min_length=1)
    name: str = Field(..., min_length=1, max_length=200)
    description: Optional[str] = None
    serves_base: int = Field(..., gt=0)
    ingredients: List[IngredientInput] = Field(default_factory=list)
    instructions: List[str] = Field(default_factory=list)
    difficulty: Optional[str] = None
    tags: List[str] = Field(default_factory=list)

    @field_validator('instructions')
    @classmethod
    def validate_instructions(cls, v):
        """Filter out empty steps."""
        return [step.strip() for step in v if step and step.strip()]


class PackageRecipeInput(BaseModel):
    recipe_id: str = Field(..., min_length=1)
    serves_factor: float = Field(default=1.0, gt=0, allow_inf_nan=False)


class PackageInput(BaseModel):
    """Schema for a stored recipe package."""
    id: str = Field(..., min_length=1)
    slug: str = Field(..., pattern=r'^[a-z0-9]+(?:-[a-z0-9]+)*$')
    name: str = Field(..., min_length=1, max_length=200)
    description: Optional[str] = None
    package_type: str = "menu"
    difficulty_level: str = "beginner"
    serving_sizes: List[int] = Field(default_factory=list)
    free_serving_sizes: List[int] = Field(default_factory=list)
    recipes: List[PackageRecipeInput] = Field(default_factory=list)
    wine_pairing: Optional[str] = None
    tags: List[str] = Field(default_factory=list)
    published: bool = False

    @field_validator('difficulty_level')
    @classmethod
    def validate_difficulty(cls, v):
        if v not in DIFFICULTY_LEVELS:
            raise ValueError(f"difficulty_level must be one of {', '.join(DIFFICULTY_LEVELS)}")
        return v

    @field_validator('serving_sizes', 'free_serving_sizes')
    @classmethod
    def validate_sizes(cls, v):
        """Serving sizes must be positive."""
        if any(size <= 0 for size in v):
            raise ValueError('Serving sizes must be positive')
        return v


class EventInput(BaseModel):
    id: str = Field(..., min_length=1)
    title: str = Field(..., min_length=1, max_length=200)
    description: Optional[str] = None
    event_type: str = "other"
    event_date: str
    location: Optional[str] = None
    max_attendees: Optional[int] = Field(default=None, ge=1)
    current_attendees: int = Field(default=0, ge=0)
    is_public: bool = True
    is_active: bool = True

    @field_validator('event_type')
    @classmethod
    def validate_event_type(cls, v):
        return v if v in EVENT_TYPES else "other"


class RSVPInput(BaseModel):
    """Body of POST /api/events/rsvp."""
    model_config = ConfigDict(populate_by_name=True)

    event_id: str = Field(..., min_length=1, alias='eventId')
    email: str = Field(..., max_length=255)
    name: str = Field(..., min_length=1, max_length=100)
    notes: Optional[str] = Field(default=None, max_length=500)

    @field_validator('email')
    @classmethod
    def validate_email(cls, v):
        return _validate_email(v)

    @field_validator('name')
    @classmethod
    def validate_name(cls, v):
        v = sanitize_string(v)
        if not v:
            raise ValueError('Name is required')
        return v


class NewsletterInput(BaseModel):
    """Body of POST /api/newsletter/subscribe."""
    email: str = Field(..., max_length=255)
    name: Optional[str] = Field(default=None, max_length=100)

    @field_validator('email')
    @classmethod
    def validate_email(cls, v):
        return _validate_email(v)

    @field_validator('name')
    @classmethod
    def validate_name(cls, v):
        if v is None:
            return v
        return sanitize_string(v) or None


class GatheringInterestInput(BaseModel):
    """Body of POST /api/gatherings/interest."""
    model_config = ConfigDict(populate_by_name=True)

    email: str = Field(..., max_length=255)
    name: str = Field(..., min_length=1, max_length=100)
    location: Optional[str] = Field(default=None, max_length=200)
    interest_type: str = Field(default=DEFAULT_GATHERING_INTEREST, alias='interestType')

    @field_validator('email')
    @classmethod
    def validate_email(cls, v):
        return _validate_email(v)

    @field_validator('name')
    @classmethod
    def validate_name(cls, v):
        v = sanitize_string(v)
        if not v:
            raise ValueError('Name is required')
        return v

    @field_validator('location')
    @classmethod
    def validate_location(cls, v):
        if v is None:
            return v
        return v.strip() or None

    @field_validator('interest_type')
    @classmethod
    def validate_interest_type(cls, v):
        if v not in GATHERING_INTEREST_TYPES:
            raise ValueError(f"interestType must be one of {', '.join(GATHERING_INTEREST_TYPES)}")
        return v


class EssayInput(BaseModel):
    """Schema for a stored featured essay."""
    id: str = Field(..., min_length=1)
    url: str = Field(..., pattern=r'^https?://\S+$', max_length=2048)
    title: Optional[str] = Field(default=None, max_length=300)
    excerpt: Optional[str] = None
    image_url: Optional[str] = None
    published_date: Optional[str] = None
    display_order: int = 0
    is_active: bool = True
    featured_essay: bool = False
    created_at: Optional[str] = None
    updated_at: Optional[str] = None


class OGMetadataRequest(BaseModel):
    url: str = Field(..., min_length=1, max_length=2048)


class SubscriptionEventInput(BaseModel):
    """Subset of a payment-processor webhook event we act on."""
    id: Optional[str] = None
    type: str = Field(..., min_length=1)
    data: dict = Field(default_factory=dict)

    def metadata(self) -> dict:
        obj = self.data.get('object') or {}
        return obj.get('metadata') or {}
