from datetime import datetime
from typing import List, Literal, Optional

from pydantic import Field

from vaqmas.models.base import FirestoreModel

ArticleCategory = Literal["education", "promotion", "announcement"]


class Article(FirestoreModel):
    id: Optional[str] = None
    title: str
    excerpt: str = ""
    body: str = ""
    hero_image_url: str = ""
    published_at: Optional[datetime] = None
    category: ArticleCategory = "education"
    tags: List[str] = []
    author: str = ""
    created_at: Optional[datetime] = None


class ArticleForm(FirestoreModel):
    title: str = Field(..., min_length=1)
    excerpt: str = ""
    body: str = ""
    hero_image_url: str = ""
    published_at: Optional[datetime] = None
    category: ArticleCategory = "education"
    tags: List[str] = []
    author: str = ""
