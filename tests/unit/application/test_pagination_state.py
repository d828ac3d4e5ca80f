"""Unit tests for pagination – PaginationState and the paginated envelope."""

from __future__ import annotations

import pytest

from datatable_kit.application.pagination import PaginatedResponse, PaginationInfo, PaginationState
from datatable_kit.kernel.errors import InvalidEnvelopeError


def _with_totals(page: int = 1, limit: int = 10, total: int = 45) -> PaginationState:
    state = PaginationState(page, limit)
    state.apply(PaginationInfo(page=page, limit=limit, total=total, total_pages=-(-total // limit)))
    return state


# ---------------------------------------------------------------------------
# PaginationState
# ---------------------------------------------------------------------------


class TestPaginationState:
    def test_initial(self) -> None:
        state = PaginationState()
        assert (state.page, state.limit, state.total, state.total_pages) == (1, 10, 0, 0)
        assert not state.has_next_page
        assert not state.has_previous_page

    def test_go_to_page_in_range(self) -> None:
        state = _with_totals()
        assert state.go_to_page(3) is True
        assert state.page == 3
        assert state.has_previous_page
        assert state.has_next_page

    @pytest.mark.parametrize("page", [0, -1, 6, 100])
    def test_go_to_page_out_of_range_is_noop(self, page: int) -> None:
        state = _with_totals()
        assert state.go_to_page(page) is False
        assert state.page == 1

    def test_go_to_page_before_any_totals(self) -> None:
        state = PaginationState()
        assert state.go_to_page(1) is False

    def test_last_page_has_no_next(self) -> None:
        state = _with_totals()
        state.go_to_page(5)
        assert not state.has_next_page

    def test_change_limit_resets_page(self) -> None:
        state = _with_totals()
        state.go_to_page(4)
        assert state.change_limit(25) == 25
        assert state.page == 1
        assert state.limit == 25

    @pytest.mark.parametrize("limit,expected", [(0, 1), (-3, 1), (500, 100)])
    def test_change_limit_clamps(self, limit: int, expected: int) -> None:
        state = PaginationState()
        assert state.change_limit(limit) == expected

    def test_apply_takes_server_values(self) -> None:
        state = PaginationState()
        state.apply(PaginationInfo(page=2, limit=20, total=41, total_pages=3))
        assert state.snapshot() == PaginationInfo(page=2, limit=20, total=41, total_pages=3)

    def test_seed(self) -> None:
        state = PaginationState()
        state.seed(page=3, limit=25)
        assert (state.page, state.limit) == (3, 25)
        state.seed(limit=1000)
        assert state.limit == 100

    def test_reset_page(self) -> None:
        state = _with_totals()
        state.go_to_page(2)
        state.reset_page()
        assert state.page == 1

    def test_invalid_construction(self) -> None:
        with pytest.raises(ValueError):
            PaginationState(page=0)
        with pytest.raises(ValueError):
            PaginationState(max_limit=0)


# ---------------------------------------------------------------------------
# PaginationInfo / PaginatedResponse
# ---------------------------------------------------------------------------


class TestPaginationInfo:
    def test_from_dict_camel_case(self) -> None:
        info = PaginationInfo.from_dict({"page": 2, "limit": 10, "total": 45, "totalPages": 5})
        assert info == PaginationInfo(2, 10, 45, 5)
        assert info.has_next
        assert info.has_previous

    def test_from_dict_snake_case(self) -> None:
        info = PaginationInfo.from_dict({"page": "1", "limit": "10", "total": "0", "total_pages": "0"})
        assert info == PaginationInfo(1, 10, 0, 0)

    def test_from_dict_missing_key_raises(self) -> None:
        with pytest.raises(InvalidEnvelopeError):
            PaginationInfo.from_dict({"page": 1, "limit": 10})

    def test_to_dict(self) -> None:
        assert PaginationInfo(1, 10, 3, 1).to_dict() == {"page": 1, "limit": 10, "total": 3, "totalPages": 1}


class TestPaginatedResponse:
    def test_of_slices(self) -> None:
        response = PaginatedResponse.of(list(range(25)), page=3, limit=10)
        assert response.data == [20, 21, 22, 23, 24]
        assert response.pagination == PaginationInfo(3, 10, 25, 3)

    def test_of_empty(self) -> None:
        response = PaginatedResponse.of([], page=1, limit=10)
        assert response.data == []
        assert response.pagination.total_pages == 0

    def test_coerce_instance_passthrough(self) -> None:
        response = PaginatedResponse.of([1], 1, 10)
        assert PaginatedResponse.coerce(response) is response

    def test_coerce_mapping(self) -> None:
        response = PaginatedResponse.coerce(
            {"data": [{"id": 1}], "pagination": {"page": 1, "limit": 10, "total": 1, "totalPages": 1}}
        )
        assert response.data == [{"id": 1}]
        assert response.pagination.total == 1

    @pytest.mark.parametrize(
        "payload",
        [None, "oops", [], {"data": "x", "pagination": {}}, {"data": [], "pagination": None}],
    )
    def test_coerce_rejects(self, payload: object) -> None:
        with pytest.raises(InvalidEnvelopeError):
            PaginatedResponse.coerce(payload)
