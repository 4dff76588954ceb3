"""API endpoints for the services and portfolio content of the site.
"""
from typing import List, Optional

from fastapi import APIRouter, Query, status

from app.models.catalog import Project, ProjectCategory, Service, ServiceCategory
from app.utils.constants import PROJECTS, SERVICES

router = APIRouter()

services = [Service(**service) for service in SERVICES]
projects = [Project(**project) for project in PROJECTS]


@router.get(
    "/services",
    response_model=List[Service],
    status_code=status.HTTP_200_OK,
    summary="List services",
    description="Services offered by the consultancy, optionally filtered by category",
)
async def list_services(
        category: Optional[ServiceCategory] = Query(None),
) -> List[Service]:
    if category is None:
        return services
    return [service for service in services if service.category == category]


@router.get(
    "/portfolio",
    response_model=List[Project],
    status_code=status.HTTP_200_OK,
    summary="List portfolio projects",
    description="Portfolio projects, optionally filtered by category or featured flag",
)
async def list_projects(
        category: Optional[ProjectCategory] = Query(None),
        featured: Optional[bool] = Query(None),
) -> List[Project]:
    """List portfolio projects.

    Args:
        category: Only return projects in this category
        featured: Only return projects whose featured flag matches

    Returns:
        Matching projects in portfolio order
    """
    result = projects
    if category is not None:
        result = [project for project in result if project.category == category]
    if featured is not None:
        result = [project for project in result if project.featured == featured]
    return result
