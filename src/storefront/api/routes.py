"""FastAPI routes for the public storefront.

Routes build a VisitorContext from the request headers, call the navigator,
moderator or search gate, and translate their outcomes: NOT_FOUND becomes a
404, Redirect a 302, Protean errors are mapped by the registered handlers.
"""

from collections.abc import AsyncIterator
from uuid import uuid4

import structlog
from fastapi import APIRouter, Depends, HTTPException, Query, Request, Response
from fastapi.responses import RedirectResponse

from storefront.api.schemas import (
    AutocompleteItem,
    DisplayResponse,
    HelpfulnessVoteRequest,
    HelpfulnessVoteResponse,
    SubmitVendorReviewRequest,
    VendorReviewOverviewResponse,
    VendorReviewSubmissionResponse,
)
from storefront.catalog.kinds import EntityKind
from storefront.navigation.navigator import CatalogNavigator
from storefront.navigation.results import Display, Redirect
from storefront.search.gate import SearchGate
from storefront.search.port import SearchQuery
from storefront.utils.logging import bind_visitor, unbind_visitor
from storefront.vendor.moderator import ReviewModerator, SubmissionStatus
from storefront.visitor import Capability, PagingFilter, VisitorContext

logger = structlog.get_logger(__name__)

catalog_router = APIRouter(prefix="/catalog", tags=["catalog"])
vendor_review_router = APIRouter(tags=["vendor-reviews"])
search_router = APIRouter(prefix="/search", tags=["search"])

GUEST_COOKIE = "storefront_guest_id"
GUEST_COOKIE_MAX_AGE = 60 * 60 * 24 * 365

# Named storefront routes a Redirect may point at
ROUTE_PATHS = {
    "HomePage": "/",
    "BrandAll": "/catalog/brands",
    "CollectionAll": "/catalog/collections",
    "VendorAll": "/catalog/vendors",
    "ProductTagsAll": "/catalog/tags",
    "Search": "/search",
}


# ---------------------------------------------------------------------------
# Request context
# ---------------------------------------------------------------------------
def _split(raw: str | None) -> list[str]:
    return [part.strip() for part in (raw or "").split(",") if part.strip()]


def _guest_id(request: Request, response: Response) -> str:
    """The anonymous visitor's own id, kept in a cookie across requests."""
    guest_id = request.headers.get("x-guest-id") or request.cookies.get(GUEST_COOKIE)
    if not guest_id:
        guest_id = f"guest-{uuid4().hex}"
    response.set_cookie(GUEST_COOKIE, guest_id, max_age=GUEST_COOKIE_MAX_AGE, httponly=True, samesite="lax")
    return guest_id


async def visitor_context(request: Request, response: Response) -> AsyncIterator[VisitorContext]:
    """Build the visitor from request headers and bind it to the log context.

    Registered customers send ``X-Customer-Id``. Anyone else is a guest with
    an id of their own, so that guests never share votes or reviews.
    """
    headers = request.headers
    customer_id = headers.get("x-customer-id")
    if customer_id:
        is_guest = headers.get("x-guest", "false").lower() == "true"
    else:
        customer_id = _guest_id(request, response)
        is_guest = True

    capabilities = set()
    for name in _split(headers.get("x-capabilities")):
        try:
            capabilities.add(Capability(name))
        except ValueError:
            continue

    language = (headers.get("accept-language") or "en").split(",")[0].split("-")[0].strip() or "en"

    visitor = VisitorContext(
        customer_id=customer_id,
        is_guest=is_guest,
        customer_group_ids=frozenset(_split(headers.get("x-customer-groups"))),
        store_id=headers.get("x-store-id", "default"),
        language=language,
        currency=headers.get("x-currency", "USD"),
        capabilities=frozenset(capabilities),
        remote_address=request.client.host if request.client else None,
        path=request.url.path,
    )

    bind_visitor(visitor.customer_id, visitor.store_id, visitor.language, visitor.path)
    try:
        yield visitor
    finally:
        unbind_visitor()


def paging_filter(
    pagenumber: int = Query(default=1, ge=1),
    pagesize: int = Query(default=12, ge=1, le=200),
    orderby: int | None = None,
    viewmode: str = "grid",
    price_min: float | None = None,
    price_max: float | None = None,
) -> PagingFilter:
    return PagingFilter(
        page_number=pagenumber,
        page_size=pagesize,
        order_by=orderby,
        view_mode=viewmode,
        price_min=price_min,
        price_max=price_max,
    )


def route_path(route: str) -> str:
    try:
        return ROUTE_PATHS[route]
    except KeyError:
        logger.warning("Redirect to unknown route, sending home", route=route)
        return ROUTE_PATHS["HomePage"]


def _render(outcome) -> DisplayResponse | RedirectResponse:
    if isinstance(outcome, Redirect):
        return RedirectResponse(url=route_path(outcome.route), status_code=302)
    if not isinstance(outcome, Display):
        raise HTTPException(status_code=404, detail="Not found")
    return DisplayResponse(template=outcome.template, model=outcome.model, edit_url=outcome.edit_url)


# ---------------------------------------------------------------------------
# Catalog pages
# ---------------------------------------------------------------------------
@catalog_router.get("/brands")
async def brand_all(visitor: VisitorContext = Depends(visitor_context)):
    return _render(CatalogNavigator().brand_all(visitor))


@catalog_router.get("/collections")
async def collection_all(visitor: VisitorContext = Depends(visitor_context)):
    return _render(CatalogNavigator().collection_all(visitor))


@catalog_router.get("/vendors")
async def vendor_all(visitor: VisitorContext = Depends(visitor_context)):
    return _render(CatalogNavigator().vendor_all(visitor))


@catalog_router.get("/tags")
async def product_tags_all(visitor: VisitorContext = Depends(visitor_context)):
    return _render(CatalogNavigator().product_tags_all(visitor))


@catalog_router.get("/tags/by-name/{se_name}")
async def products_by_tag_name(
    se_name: str,
    paging: PagingFilter = Depends(paging_filter),
    visitor: VisitorContext = Depends(visitor_context),
):
    return _render(CatalogNavigator().products_by_tag_name(se_name, paging, visitor))


_KIND_PATHS = {
    "categories": EntityKind.CATEGORY,
    "brands": EntityKind.BRAND,
    "collections": EntityKind.COLLECTION,
    "vendors": EntityKind.VENDOR,
    "tags": EntityKind.PRODUCT_TAG,
}


@catalog_router.get("/{kind_path}/{entity_id}")
async def catalog_entity(
    kind_path: str,
    entity_id: str,
    paging: PagingFilter = Depends(paging_filter),
    visitor: VisitorContext = Depends(visitor_context),
):
    kind = _KIND_PATHS.get(kind_path)
    if kind is None:
        raise HTTPException(status_code=404, detail="Not found")
    return _render(CatalogNavigator().resolve(kind, entity_id, paging, visitor))


# ---------------------------------------------------------------------------
# Vendor reviews
# ---------------------------------------------------------------------------
@vendor_review_router.post("/vendors/{vendor_id}/reviews", response_model=VendorReviewSubmissionResponse)
async def submit_vendor_review(
    vendor_id: str,
    body: SubmitVendorReviewRequest,
    visitor: VisitorContext = Depends(visitor_context),
) -> VendorReviewSubmissionResponse:
    outcome = ReviewModerator().submit_review(
        vendor_id,
        visitor,
        title=body.title,
        review_text=body.review_text,
        rating=body.rating,
    )
    overview = None
    if outcome.overview is not None:
        overview = VendorReviewOverviewResponse(**outcome.overview.as_dict())

    return VendorReviewSubmissionResponse(
        successfully_added=outcome.status is not SubmissionStatus.NOT_ALLOWED,
        result=outcome.message,
        review_id=str(outcome.review.id) if outcome.review is not None else None,
        approved=bool(outcome.review is not None and outcome.review.is_approved),
        overview=overview,
    )


@vendor_review_router.post("/vendor-reviews/{review_id}/helpfulness", response_model=HelpfulnessVoteResponse)
async def set_vendor_review_helpfulness(
    review_id: str,
    body: HelpfulnessVoteRequest,
    visitor: VisitorContext = Depends(visitor_context),
) -> HelpfulnessVoteResponse:
    outcome = ReviewModerator().vote_helpful(review_id, visitor, body.was_helpful)
    return HelpfulnessVoteResponse(
        result=outcome.message,
        status=outcome.status.value,
        total_yes=outcome.helpful_yes_total,
        total_no=outcome.helpful_no_total,
    )


# ---------------------------------------------------------------------------
# Search
# ---------------------------------------------------------------------------
@search_router.get("")
async def search(
    request: Request,
    q: str | None = None,
    cid: str | None = None,
    search_category_id: str | None = None,
    adv: bool = False,
    isc: bool = False,
    paging: PagingFilter = Depends(paging_filter),
    visitor: VisitorContext = Depends(visitor_context),
) -> dict:
    query = SearchQuery(
        q=q,
        category_id=cid,
        search_category_id=search_category_id,
        advanced=adv,
        include_subcategories=isc,
    )
    return SearchGate().search(query, paging, visitor, term_specified="q" in request.query_params)


@search_router.get("/autocomplete", response_model=list[AutocompleteItem])
async def search_term_autocomplete(
    term: str | None = None,
    category_id: str | None = None,
    visitor: VisitorContext = Depends(visitor_context),
) -> list[AutocompleteItem]:
    return [AutocompleteItem(**item) for item in SearchGate().autocomplete(term, visitor, category_id=category_id)]
