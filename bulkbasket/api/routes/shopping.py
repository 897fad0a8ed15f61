import logging

from fastapi import APIRouter, Depends, HTTPException, Request, Response
from fastapi.responses import JSONResponse

from bulkbasket.infra.pdf_utils import generate_pdf_for_shopping_list
from bulkbasket.logic.shopping.list_builder import build_organized_shopping_list
from bulkbasket.logic.shopping.bulk_discount import analyze_ingredients
from bulkbasket.logic.shopping.frequency import count_ingredient_usage
from bulkbasket.logic.shopping.optimizer import create_optimized_shopping_list, score_meal_overlap
from bulkbasket.utilities.validators import MealOverlapRequest, MealPlanRequest, RateLimitError

router = APIRouter()
logger = logging.getLogger("bulkbasket_app")


class RateLimitExceeded(Exception):
    def __init__(self, key: str, remaining: int, reset_time: float):
        self.key = key
        self.remaining = remaining
        self.reset_time = reset_time


def rate_limit_response(request: Request, exc: RateLimitExceeded):
    body = RateLimitError(
        message="Rate limit exceeded. Please try again later.",
        remaining_requests=exc.remaining,
        reset_time=exc.reset_time,
    )
    return JSONResponse(status_code=429, content=body.model_dump())


def _caller_key(request: Request) -> str:
    """Client host, or the X-User-Id header when the app is told to trust it."""
    if request.app.state.trust_user_id_header:
        user_id = request.headers.get("x-user-id")
        if user_id:
            return user_id
    return request.client.host if request.client else "anonymous"


def enforce_rate_limit(request: Request):
    """Count the request against the caller's window; 429 once it is used up."""
    limiter = request.app.state.rate_limiter
    key = _caller_key(request)
    if not limiter.is_allowed(key):
        logger.warning("Rate limit exceeded for %s", key)
        raise RateLimitExceeded(key, limiter.remaining_requests(key), limiter.reset_time(key))


def _organized_for(meal_plan):
    return build_organized_shopping_list(analyze_ingredients(count_ingredient_usage(meal_plan)))


# -------------------- API: Shopping list --------------------
@router.post('/api/shopping-list/optimize', dependencies=[Depends(enforce_rate_limit)])
def optimize_shopping_list(payload: MealPlanRequest):
    """Flat list, department sections, savings and tips for a meal plan."""
    try:
        result = create_optimized_shopping_list(payload.meal_plan)
    except Exception as e:
        logger.exception("Error creating optimized shopping list")
        raise HTTPException(status_code=500, detail=f"Failed to create shopping list: {e}")
    return {
        "shopping_list": result['shopping_list'],
        "organized_sections": result['organized_sections'].to_dict(),
        "total_savings": round(result['total_savings'], 2),
        "high_value_items": result['high_value_items'],
        "ingredient_analysis": [r.to_dict() for r in result['ingredient_analysis']],
        "recommendations": result['recommendations'],
    }


@router.post('/api/shopping-list/organized', dependencies=[Depends(enforce_rate_limit)])
def organized_shopping_list(payload: MealPlanRequest):
    try:
        organized = _organized_for(payload.meal_plan)
    except Exception as e:
        logger.exception("Error organizing shopping list")
        raise HTTPException(status_code=500, detail=f"Failed to create shopping list: {e}")
    return organized.to_dict()


@router.post('/api/shopping-list/pdf', dependencies=[Depends(enforce_rate_limit)])
def shopping_list_pdf(payload: MealPlanRequest):
    try:
        pdf_bytes = generate_pdf_for_shopping_list(_organized_for(payload.meal_plan))
    except Exception as e:
        logger.exception("Error rendering shopping list PDF")
        raise HTTPException(status_code=500, detail=f"Failed to create shopping list: {e}")
    return Response(
        content=pdf_bytes,
        media_type="application/pdf",
        headers={"Content-Disposition": 'attachment; filename="shopping_list.pdf"'},
    )


# -------------------- API: Meals --------------------
@router.post('/api/meals/overlap')
def meal_overlap(payload: MealOverlapRequest):
    """Share of ingredients two meals have in common (Jaccard index)."""
    score = score_meal_overlap(payload.meal_a.model_dump(), payload.meal_b.model_dump())
    return {"score": round(score, 4)}
