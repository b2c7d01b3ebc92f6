# This project was developed with assistance from AI tools.
"""Shared schema components."""

from pydantic import BaseModel


class Pagination(BaseModel):
    """Page-number pagination metadata for list responses (1-based pages)."""

    current_page: int
    total_pages: int
    total_items: int
    page_size: int
