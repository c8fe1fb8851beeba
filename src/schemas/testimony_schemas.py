from typing import Optional, List, Dict, Tuple
from enum import Enum
from pydantic import BaseModel, Field


class TestimonyCategory(str, Enum):
    """Known testimony categories, used for UI colour and icon mapping"""
    FAMILY = "family"
    ELDERS = "elders"
    FRIENDS = "friends"
    COLLEAGUES = "colleagues"


class SortOption(str, Enum):
    """Presentation orderings for search results"""
    RELEVANCE = "relevance"
    AUTHOR = "author"
    TITLE = "title"
    PAGE = "page"


class PageRange(BaseModel):
    start: int
    end: int


class Testimony(BaseModel):
    """A single memorial entry as stored in the corpus"""
    id: str
    title: str
    author: str = ""
    relationship: str = ""
    content: str
    page: int
    category: str = ""
    tags: List[str] = Field(default_factory=list)
    chapter: str = ""
    images: Optional[List[str]] = None
    page_range: Optional[PageRange] = Field(None, alias="pageRange")
    images_captions: Dict[str, str] = Field(default_factory=dict, alias="imagesCaptions")

    class Config:
        populate_by_name = True
        from_attributes = True


class MatchInfo(BaseModel):
    """Matched character ranges for one field; `indices` end offsets are inclusive"""
    key: str
    indices: List[Tuple[int, int]]
    value: str
    ref_index: Optional[int] = Field(None, alias="refIndex")

    class Config:
        populate_by_name = True


class SearchResult(BaseModel):
    item: Testimony
    score: Optional[float] = None
    matches: Optional[List[MatchInfo]] = None


class SearchHit(SearchResult):
    """Search result decorated for display"""
    highlighted_title: Optional[str] = Field(None, alias="highlightedTitle")
    preview: Optional[str] = None

    class Config:
        populate_by_name = True


class FilterOptions(BaseModel):
    categories: List[str]
    relationships: List[str]
    authors: List[str]
    tags: List[str]


class CorpusStats(BaseModel):
    total: int
    categories: Dict[str, int]


class PaginationInfo(BaseModel):
    current_page: int = Field(..., alias="currentPage")
    total_pages: int = Field(..., alias="totalPages")
    total_count: int = Field(..., alias="totalCount")
    has_next_page: bool = Field(..., alias="hasNextPage")
    has_previous_page: bool = Field(..., alias="hasPreviousPage")
    page_size: int = Field(..., alias="pageSize")
    total_fetched: int = Field(..., alias="totalFetched")

    class Config:
        populate_by_name = True


class PaginatedTestimonies(BaseModel):
    data: List[Testimony]
    pagination: PaginationInfo


class GalleryImage(BaseModel):
    """An image prepared for display next to a testimony"""
    id: str
    testimony_id: str = Field(..., alias="testimonyId")
    src: str
    alt: str
    caption: Optional[str] = None
    is_profile: bool = Field(False, alias="isProfile")
    width: int = 600
    height: int = 400

    class Config:
        populate_by_name = True


class TestimonyImageSources(BaseModel):
    profile_image: str = Field(..., alias="profileImage")
    gallery_images: List[GalleryImage] = Field(default_factory=list, alias="galleryImages")

    class Config:
        populate_by_name = True


class MagazinePages(BaseModel):
    start_page: int = Field(..., alias="startPage")
    end_page: int = Field(..., alias="endPage")

    class Config:
        populate_by_name = True


class Chapter(BaseModel):
    id: str
    slug: str
    title: str
    description: str = ""
    order: int
    magazine_pages: Optional[MagazinePages] = Field(None, alias="magazinePages")

    class Config:
        populate_by_name = True
        from_attributes = True


class ChapterDetail(BaseModel):
    chapter: Chapter
    testimonies: List[Testimony]
    previous_chapter: Optional[Chapter] = Field(None, alias="previousChapter")
    next_chapter: Optional[Chapter] = Field(None, alias="nextChapter")

    class Config:
        populate_by_name = True
