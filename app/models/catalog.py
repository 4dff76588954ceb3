"""Data models for the site catalog.

This module contains Pydantic models for the services and portfolio
projects shown on the marketing site.
"""

from enum import Enum
from typing import List, Optional
from typing_extensions import Annotated
from pydantic import BaseModel, Field, ConfigDict


class ServiceCategory(str, Enum):
    AI_AUTOMATION = "ai-automation"
    DEVELOPMENT = "development"
    INFRASTRUCTURE = "infrastructure"
    CONSULTING = "consulting"


class ProjectCategory(str, Enum):
    AI_AUTOMATION = "ai-automation"
    WEB_APP = "web-app"
    INTERNAL_TOOL = "internal-tool"
    INFRASTRUCTURE = "infrastructure"
    INTEGRATION = "integration"


class Service(BaseModel):
    """A service offered by the consultancy.

    Attributes:
        id: Slug identifying the service
        icon: Icon name used by the services grid
        title: Display title
        description: One-line pitch
        category: Service category
    """
    id: Annotated[str, Field(..., description="Slug identifying the service")]
    icon: Annotated[str, Field(..., description="Icon name used by the services grid")]
    title: Annotated[str, Field(..., description="Display title")]
    description: Annotated[str, Field(..., description="One-line pitch")]
    category: Annotated[ServiceCategory, Field(..., description="Service category")]


class Project(BaseModel):
    """A portfolio project."""
    id: Annotated[str, Field(..., description="Slug identifying the project")]
    name: Annotated[str, Field(..., description="Project name")]
    category: Annotated[ProjectCategory, Field(..., description="Project category")]
    description: Annotated[str, Field(..., description="Short case study")]
    tech_stack: Annotated[
        List[str], Field(..., alias="techStack", description="Technologies used")
    ]
    image_url: Annotated[str, Field(..., alias="imageUrl", description="Cover image path")]
    project_url: Annotated[
        Optional[str], Field(None, alias="projectUrl", description="Link to the project, if public")
    ]
    featured: Annotated[bool, Field(False, description="Shown on the home page")]

    model_config = ConfigDict(populate_by_name=True)
