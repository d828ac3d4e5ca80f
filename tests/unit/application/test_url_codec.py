"""Unit tests for the URL query-string codec."""

from __future__ import annotations

from hypothesis import given, settings
from structlog.testing import capture_logs

from datatable_kit.application.sorting import SortConfig, SortDirection
from datatable_kit.application.url_sync import (
    TableUrlState,
    UrlStateOverrides,
    UrlSyncConfig,
    deserialize,
    parse_overrides,
    serialize,
)
from datatable_kit.testing.generators import table_url_state_strategy

DEFAULTS = TableUrlState(
    page=1,
    limit=10,
    search="",
    filters={"status": "", "branch": "", "tags": [], "archived": False, "min_age": 0, "score": 0.0},
)

# A view opened with preset filters and sort, plus nullable typed filters.
PRESET_DEFAULTS = TableUrlState(
    filters={"status": "active", "roles": ["admin"], "min_amount": None, "verified": None},
    sort=SortConfig("name"),
)
TYPED_CONFIG = UrlSyncConfig(filter_types={"min_amount": int, "verified": bool})


def _state(**changes: object) -> TableUrlState:
    filters = {**DEFAULTS.filters, **changes.pop("filters", {})}  # type: ignore[arg-type]
    return TableUrlState(**{"page": 1, "limit": 10, "search": "", "filters": filters, "sort": None, **changes})


# ---------------------------------------------------------------------------
# serialize
# ---------------------------------------------------------------------------


class TestSerialize:
    def test_defaults_produce_empty_query(self) -> None:
        assert serialize(DEFAULTS, DEFAULTS) == ""

    def test_filters_only(self) -> None:
        state = _state(filters={"status": "active", "branch": "Lagos"})
        assert serialize(state, DEFAULTS) == "status=active&branch=Lagos"

    def test_page_limit_search_sort(self) -> None:
        state = _state(page=3, limit=25, search="ada", sort=SortConfig("name", SortDirection.DESC))
        assert serialize(state, DEFAULTS) == "page=3&limit=25&search=ada&sortKey=name&sortDir=desc"

    def test_list_joined_with_commas(self) -> None:
        assert serialize(_state(filters={"tags": ["vip", "new"]}), DEFAULTS) == "tags=vip,new"

    def test_boolean_and_numbers(self) -> None:
        state = _state(filters={"archived": True, "min_age": 18, "score": 2.5})
        assert serialize(state, DEFAULTS) == "archived=true&min_age=18&score=2.5"

    def test_blank_values_omitted(self) -> None:
        assert serialize(_state(search="   ", filters={"status": "  "}), DEFAULTS) == ""

    def test_special_characters_encoded(self) -> None:
        assert serialize(_state(search="a&b c"), DEFAULTS) == "search=a%26b+c"

    def test_unrelated_params_preserved(self) -> None:
        query = serialize(_state(page=2), DEFAULTS, base_query="tab=users&page=9")
        assert query == "tab=users&page=2"

    def test_owned_params_removed_when_back_to_default(self) -> None:
        query = serialize(DEFAULTS, DEFAULTS, base_query="tab=users&status=active&sortKey=name&sortDir=asc")
        assert query == "tab=users"

    def test_custom_param_names(self) -> None:
        config = UrlSyncConfig(page_param="p", search_param="q", filter_params={"status": "st"})
        state = _state(page=2, search="x", filters={"status": "active"})
        assert serialize(state, DEFAULTS, config) == "p=2&q=x&st=active"

    def test_disabled_concerns_not_written(self) -> None:
        config = UrlSyncConfig(sync_pagination=False, sync_sort=False)
        state = _state(page=4, sort=SortConfig("name"), filters={"status": "active"})
        assert serialize(state, DEFAULTS, config) == "status=active"

    def test_default_sort_omitted(self) -> None:
        defaults = TableUrlState(sort=SortConfig("name"))
        state = TableUrlState(sort=SortConfig("name"))
        assert serialize(state, defaults) == ""

    def test_cleared_preset_filters_written_as_empty_params(self) -> None:
        defaults = TableUrlState(filters={"status": "active", "tags": ["vip"], "archived": False})
        state = TableUrlState(filters={"status": "", "tags": [], "archived": False})
        assert serialize(state, defaults) == "status=&tags="

    def test_cleared_default_sort_written_as_empty_key(self) -> None:
        defaults = TableUrlState(sort=SortConfig("name"))
        query = serialize(TableUrlState(), defaults, base_query="sortKey=age&sortDir=desc")
        assert query == "sortKey="

    def test_repeated_foreign_params_preserved(self) -> None:
        query = serialize(_state(page=2), DEFAULTS, base_query="tag=a&page=9&tag=b")
        assert query == "tag=a&page=2&tag=b"


# ---------------------------------------------------------------------------
# parse_overrides / deserialize
# ---------------------------------------------------------------------------


class TestDeserialize:
    def test_empty_query_gives_defaults(self) -> None:
        assert deserialize("", DEFAULTS) == DEFAULTS
        assert parse_overrides("", DEFAULTS).is_empty

    def test_shared_link_hydrates_filters(self) -> None:
        state = deserialize("?status=active&branch=Lagos", DEFAULTS)
        assert state.filters["status"] == "active"
        assert state.filters["branch"] == "Lagos"
        assert state.page == 1

    def test_typed_filters(self) -> None:
        state = deserialize("tags=vip,new&archived=true&min_age=21&score=1.5", DEFAULTS)
        assert state.filters["tags"] == ["vip", "new"]
        assert state.filters["archived"] is True
        assert state.filters["min_age"] == 21
        assert state.filters["score"] == 1.5

    def test_full_state(self) -> None:
        state = deserialize("page=2&limit=50&search=ada&sortKey=age&sortDir=asc", DEFAULTS)
        assert (state.page, state.limit, state.search) == (2, 50, "ada")
        assert state.sort == SortConfig("age", SortDirection.ASC)

    def test_invalid_values_fall_back_to_defaults(self) -> None:
        query = "page=abc&limit=-5&archived=maybe&min_age=old&score=inf&sortDir=sideways&sortKey=name"
        assert deserialize(query, DEFAULTS) == DEFAULTS

    def test_sort_needs_both_params(self) -> None:
        assert parse_overrides("sortKey=name", DEFAULTS).sort is None
        assert parse_overrides("sortDir=asc", DEFAULTS).sort is None

    def test_sortable_fields_whitelist(self) -> None:
        config = UrlSyncConfig(sortable_fields=frozenset({"name"}))
        assert parse_overrides("sortKey=password&sortDir=asc", DEFAULTS, config).sort is None
        assert parse_overrides("sortKey=name&sortDir=asc", DEFAULTS, config).sort == SortConfig("name")

    def test_unknown_params_ignored(self) -> None:
        overrides = parse_overrides("tab=users&colour=red", DEFAULTS)
        assert overrides == UrlStateOverrides()

    def test_first_occurrence_wins(self) -> None:
        assert parse_overrides("page=2&page=5", DEFAULTS).page == 2

    def test_disabled_concerns_not_read(self) -> None:
        config = UrlSyncConfig(sync_search=False, sync_filters=False)
        overrides = parse_overrides("search=ada&status=active&page=2", DEFAULTS, config)
        assert overrides.search is None
        assert overrides.filters == {}
        assert overrides.page == 2

    def test_dropped_values_are_logged(self) -> None:
        with capture_logs() as logs:
            parse_overrides("archived=maybe&sortKey=name&sortDir=up", DEFAULTS)
        events = [entry["event"] for entry in logs]
        assert "url_sync.filter_ignored" in events
        assert "url_sync.sort_ignored" in events

    def test_merged_over(self) -> None:
        overrides = UrlStateOverrides(limit=20, filters={"status": "active"})
        merged = overrides.merged_over(DEFAULTS)
        assert merged.limit == 20
        assert merged.page == 1
        assert merged.filters["status"] == "active"
        assert merged.filters["branch"] == ""

    def test_empty_param_clears_preset_filter(self) -> None:
        defaults = TableUrlState(filters={"status": "active", "tags": ("vip",), "min_age": 18})
        overrides = parse_overrides("status=&tags=&min_age=", defaults)
        assert overrides.filters == {"status": "", "tags": (), "min_age": None}

    def test_empty_param_over_blank_default_ignored(self) -> None:
        assert parse_overrides("status=&tags=", DEFAULTS).filters == {}

    def test_empty_sort_key_clears_default_sort(self) -> None:
        defaults = TableUrlState(sort=SortConfig("name"))
        overrides = parse_overrides("sortKey=", defaults)
        assert overrides.sort_cleared
        assert not overrides.is_empty
        assert overrides.merged_over(defaults).sort is None

    def test_filter_types_decode_nullable_filters(self) -> None:
        defaults = TableUrlState(filters={"min_amount": None, "verified": None, "city": None})
        config = UrlSyncConfig(filter_types={"min_amount": int, "verified": bool})
        state = deserialize("min_amount=500&verified=true&city=Lagos", defaults, config)
        assert state.filters == {"min_amount": 500, "verified": True, "city": "Lagos"}

    def test_filter_types_reject_malformed_values(self) -> None:
        defaults = TableUrlState(filters={"min_amount": None})
        config = UrlSyncConfig(filter_types={"min_amount": float})
        assert parse_overrides("min_amount=lots", defaults, config).filters == {}


# ---------------------------------------------------------------------------
# Round trip
# ---------------------------------------------------------------------------


class TestRoundTrip:
    @settings(max_examples=200)
    @given(table_url_state_strategy(DEFAULTS))
    def test_serialize_then_deserialize_is_identity(self, state: TableUrlState) -> None:
        assert deserialize(serialize(state, DEFAULTS), DEFAULTS) == state

    def test_tuple_defaults_stay_tuples(self) -> None:
        defaults = TableUrlState(filters={"ids": (0,)})
        state = TableUrlState(filters={"ids": (3, 4)})
        assert deserialize(serialize(state, defaults), defaults) == state

    @settings(max_examples=200)
    @given(table_url_state_strategy(PRESET_DEFAULTS, TYPED_CONFIG))
    def test_preset_and_nullable_filters_round_trip(self, state: TableUrlState) -> None:
        restored = deserialize(serialize(state, PRESET_DEFAULTS, TYPED_CONFIG), PRESET_DEFAULTS, TYPED_CONFIG)
        assert restored == state

    def test_nullable_numeric_filter_keeps_its_type(self) -> None:
        state = TableUrlState(filters={**PRESET_DEFAULTS.filters, "min_amount": 500}, sort=SortConfig("name"))
        query = serialize(state, PRESET_DEFAULTS, TYPED_CONFIG)
        assert query == "min_amount=500"
        assert deserialize(query, PRESET_DEFAULTS, TYPED_CONFIG).filters["min_amount"] == 500
