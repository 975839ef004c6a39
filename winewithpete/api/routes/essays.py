from fastapi import APIRouter, Depends

from winewithpete.api.dependencies import get_essay_repository
from winewithpete.infra.Essay_Repository import EssayRepository

router = APIRouter(prefix="/api/essays", tags=["essays"])


@router.get("")
@router.get("/")
def list_essays(featured: bool = False, repo: EssayRepository = Depends(get_essay_repository)):
    """Active featured essays by display order; ?featured=true keeps the start-page pick."""
    essays = repo.list_essays(featured_only=featured)
    return {"success": True, "data": [e.to_dict() for e in essays]}
