from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query, Response

from winewithpete.api.dependencies import get_current_member, get_package_repository
from winewithpete.domain.Member import Member
from winewithpete.domain.Package import Package
from winewithpete.infra.Package_Repository import PackageRepository
from winewithpete.infra.pdf_utils import generate_pdf_for_shopping_list
from winewithpete.logic.access.control import (
    can_access_content, can_access_package, get_access_level, get_available_serving_sizes, required_tier_for
)
from winewithpete.logic.shopping.aggregator import aggregate_shopping_list, format_shopping_amount

router = APIRouter(prefix="/api/packages", tags=["packages"])


def _summary(package: Package, member: Optional[Member]) -> dict:
    return {
        **package.to_dict(),
        "required_tier": required_tier_for(package.difficulty_level).value,
        "can_access": can_access_package(package, member),
    }


def _load_visible(slug: str, member: Optional[Member], repo: PackageRepository) -> Package:
    package = repo.get_package(slug)
    if package is None:
        raise HTTPException(status_code=404, detail="Package not found")
    if not (member or package.published):
        raise HTTPException(status_code=403, detail="This package is members only")
    return package


def _resolve_serving_size(package: Package, member: Optional[Member], serving_size: Optional[int]) -> int:
    if not can_access_package(package, member):
        raise HTTPException(status_code=403, detail="Upgrade your membership to access this package")
    available = get_available_serving_sizes(package, member)
    if not available:
        raise HTTPException(status_code=403, detail="No serving sizes available for your membership")
    if serving_size is None:
        return available[0]
    if serving_size not in available:
        raise HTTPException(status_code=400, detail=f"Serving size must be one of {available}")
    return serving_size


@router.get("")
@router.get("/")
def list_packages(member: Optional[Member] = Depends(get_current_member),
                  repo: PackageRepository = Depends(get_package_repository)):
    """Members see every package, everyone else only published ones."""
    packages = repo.list_packages(published_only=member is None)
    return {"data": [_summary(p, member) for p in packages], "member": member is not None}


@router.get("/{slug}")
def get_package(slug: str, member: Optional[Member] = Depends(get_current_member),
                repo: PackageRepository = Depends(get_package_repository)):
    package = _load_visible(slug, member, repo)
    allowed = can_access_package(package, member)
    data = _summary(package, member)
    if allowed:
        data["recipes"] = [pr.to_dict(include_recipe=True) for pr in package.recipes]
    return {
        "data": data,
        "member": member is not None,
        "access": {
            **get_access_level(member).to_dict(),
            "can_access_content": can_access_content(package, member),
        },
        "available_serving_sizes": get_available_serving_sizes(package, member),
    }


@router.get("/{slug}/shopping-list")
def get_shopping_list(slug: str, serving_size: Optional[int] = Query(default=None, ge=1),
                      member: Optional[Member] = Depends(get_current_member),
                      repo: PackageRepository = Depends(get_package_repository)):
    package = _load_visible(slug, member, repo)
    size = _resolve_serving_size(package, member, serving_size)
    items = aggregate_shopping_list(package, size)
    return {
        "package": package.slug,
        "serving_size": size,
        "count": len(items),
        "items": [{**it.to_dict(), "display_amount": format_shopping_amount(it.amount)} for it in items],
    }


@router.get("/{slug}/shopping-list.pdf")
def export_shopping_list_pdf(slug: str, serving_size: Optional[int] = Query(default=None, ge=1),
                             member: Optional[Member] = Depends(get_current_member),
                             repo: PackageRepository = Depends(get_package_repository)):
    package = _load_visible(slug, member, repo)
    size = _resolve_serving_size(package, member, serving_size)
    pdf_bytes = generate_pdf_for_shopping_list(package, size, aggregate_shopping_list(package, size))
    return Response(
        content=pdf_bytes,
        media_type="application/pdf",
        headers={"Content-Disposition": f'attachment; filename="{package.slug}_serves_{size}.pdf"'},
    )
