"""
GitHub API response models
"""

from typing import Optional
from pydantic import BaseModel, ConfigDict


class Repository(BaseModel):
    """Public metadata of a repository, as returned by GET /repos/{owner}/{repo}"""

    model_config = ConfigDict(frozen=True, extra="ignore")

    full_name: str
    description: Optional[str] = None
    html_url: str
