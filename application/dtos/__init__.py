"""Application DTOs - Data Transfer Objects dos use cases"""

from application.dtos.responses import SearchResult, SearchState

__all__ = [
    'SearchResult',
    'SearchState'
]
