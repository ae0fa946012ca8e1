from fastapi import APIRouter, Depends

from eventhub.api.deps import get_services
from eventhub.schemas.category import CategoryResponse
from eventhub.services import Services

router = APIRouter(prefix="/categories", tags=["Categories"])


@router.get("/", response_model=list[CategoryResponse])
def list_categories(services: Services = Depends(get_services)):
    return [CategoryResponse.model_validate(c) for c in services.queries.list_categories()]


@router.get("/{category_id}", response_model=CategoryResponse)
def get_category(category_id: str, services: Services = Depends(get_services)):
    return CategoryResponse.model_validate(services.queries.get_category(category_id))
