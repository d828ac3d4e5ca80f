"""Application pagination – page window state and the paginated envelope."""
from datatable_kit.application.pagination.envelope import PaginatedResponse, PaginationInfo
from datatable_kit.application.pagination.state import PaginationState

__all__ = ["PaginatedResponse", "PaginationInfo", "PaginationState"]
