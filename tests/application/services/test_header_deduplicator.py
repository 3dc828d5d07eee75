# tests/application/services/test_header_deduplicator.py
from application.services.header_deduplicator import (
    ALWAYS_FILTERED,
    HeaderDeduplicator,
    filtered_header_names,
)
from application.services.url_normalizer import normalize
from domain.elements import PauseElement, RequestElement


def _requests(*header_sets):
    elements = [RequestElement(method="GET", url=f"http://x.test/{i}", headers=h) for i, h in enumerate(header_sets)]
    return normalize(elements, "http://x.test")


class TestFilteredHeaderNames:
    def test_referer_filtered_with_automatic_referer(self):
        assert filtered_header_names(True) == ALWAYS_FILTERED | {"Referer"}

    def test_referer_kept_without_automatic_referer(self):
        names = filtered_header_names(False)
        assert "Referer" not in names
        assert {"Cookie", "Content-Length", "Host"} <= names


class TestExtraHeaders:
    def test_removes_filtered_and_baseline_headers_and_sorts(self):
        dedup = HeaderDeduplicator(filtered_header_names(True))
        el = RequestElement(
            method="GET",
            url="http://x.test/",
            headers={
                "X-Z": "z",
                "Cookie": "s=1",
                "Accept": "*/*",
                "Referer": "http://x.test/",
                "Content-Type": "text/plain",
            },
        )
        assert dedup.extra_headers(el, {"Accept": "*/*"}) == [("Content-Type", "text/plain"), ("X-Z", "z")]

    def test_baseline_header_with_other_value_is_kept(self):
        dedup = HeaderDeduplicator()
        el = RequestElement(method="GET", url="http://x.test/", headers={"Accept": "text/html"})
        assert dedup.extra_headers(el, {"Accept": "*/*"}) == [("Accept", "text/html")]


class TestDeduplicate:
    def test_identical_sets_share_first_id(self):
        elements = _requests({"Auth": "t1"}, {"Auth": "t1"}, {"Auth": "t2"})

        result = HeaderDeduplicator().deduplicate(elements, {})

        assert [el.filtered_headers_id for el in result.elements] == [0, 0, 2]
        assert result.header_groups == {0: [("Auth", "t1")], 2: [("Auth", "t2")]}

    def test_comparison_ignores_header_order(self):
        elements = _requests({"A": "1", "B": "2"}, {"B": "2", "A": "1"})

        result = HeaderDeduplicator().deduplicate(elements, {})

        assert [el.filtered_headers_id for el in result.elements] == [0, 0]
        assert result.header_groups == {0: [("A", "1"), ("B", "2")]}

    def test_subset_is_a_different_group(self):
        elements = _requests({"A": "1", "B": "2"}, {"A": "1"})

        result = HeaderDeduplicator().deduplicate(elements, {})

        assert [el.filtered_headers_id for el in result.elements] == [0, 1]
        assert len(result.header_groups) == 2

    def test_no_extra_headers_means_no_reference(self):
        elements = _requests({"Cookie": "a=b"}, {"Accept": "*/*"})

        result = HeaderDeduplicator().deduplicate(elements, {"Accept": "*/*"})

        assert [el.filtered_headers_id for el in result.elements] == [None, None]
        assert result.header_groups == {}

    def test_non_request_elements_pass_through(self):
        pause = PauseElement(duration_ms=10)
        elements = normalize(
            [
                RequestElement(method="GET", url="http://x.test/a", headers={"A": "1"}),
                pause,
                RequestElement(method="GET", url="http://x.test/b", headers={"A": "1"}),
            ],
            "http://x.test",
        )

        result = HeaderDeduplicator().deduplicate(elements, {})

        assert result.elements[1] is pause
        assert result.elements[2].filtered_headers_id == 0

    def test_group_count_matches_distinct_sets_and_keys_are_ascending(self):
        sets = [{"A": "1"}, {"B": "1"}, {}, {"A": "1"}, {"C": "1"}, {"B": "1"}]
        elements = _requests(*sets)

        result = HeaderDeduplicator().deduplicate(elements, {})

        assert list(result.header_groups) == [0, 1, 4]
        assert [el.filtered_headers_id for el in result.elements] == [0, 1, None, 0, 4, 1]

    def test_input_elements_are_not_mutated(self):
        elements = _requests({"A": "1"})

        HeaderDeduplicator().deduplicate(elements, {})

        assert elements[0].filtered_headers_id is None
