"""Pydantic request/response schemas for the storefront API.

These are separate from the Protean commands: the API is the external
contract, the commands are internal domain concepts.
"""

from __future__ import annotations

from pydantic import BaseModel, Field


# ---------------------------------------------------------------------------
# Request Schemas
# ---------------------------------------------------------------------------
class SubmitVendorReviewRequest(BaseModel):
    title: str | None = None
    review_text: str | None = None
    rating: int | None = Field(default=5)


class HelpfulnessVoteRequest(BaseModel):
    was_helpful: bool


# ---------------------------------------------------------------------------
# Response Schemas
# ---------------------------------------------------------------------------
class DisplayResponse(BaseModel):
    template: str
    model: dict
    edit_url: str | None = None


class VendorReviewOverviewResponse(BaseModel):
    vendor_id: str
    rating_sum: int
    total_reviews: int
    allow_customer_reviews: bool
    average_rating: float


class VendorReviewSubmissionResponse(BaseModel):
    successfully_added: bool
    result: str
    review_id: str | None = None
    approved: bool = False
    overview: VendorReviewOverviewResponse | None = None


class HelpfulnessVoteResponse(BaseModel):
    result: str
    status: str
    total_yes: int
    total_no: int


class AutocompleteItem(BaseModel):
    label: str
    product_id: str | None = None
