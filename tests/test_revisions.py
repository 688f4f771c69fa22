"""
Revision selection and ordering tests.
"""

import pytest

from serving_spec.models import RevisionList
from exporter.errors import NotFoundError
from exporter.revisions import (
    _compare_revisions,
    get_revisions_to_export,
    get_routed_revisions,
    parse_generation,
    sort_revisions,
)


def names(revisions):
    return [r.name for r in revisions]


class TestRoutedRevisions:

    def test_explicit_names_only(self, make_service):
        svc = make_service(traffic=[
            {"revisionName": "foo-00001", "percent": 30},
            {"latestRevision": True, "percent": 70},
            {"tag": "canary", "revisionName": "foo-00003", "percent": 0},
        ])
        assert get_routed_revisions(svc) == {"foo-00001", "foo-00003"}

    def test_latest_indirection_not_routed(self, make_service):
        svc = make_service(traffic=[{"latestRevision": True, "percent": 100}], latest_ready="foo-00002")
        assert get_routed_revisions(svc) == set()

    def test_no_traffic_block(self, make_service):
        assert get_routed_revisions(make_service()) == set()


class TestSortRevisions:

    def test_smaller_generation_first_regardless_of_name(self, make_revision):
        revisions = [
            make_revision("a", generation=3),
            make_revision("z", generation=1),
            make_revision("m", generation=2),
        ]
        sort_revisions(revisions)
        assert names(revisions) == ["z", "m", "a"]

    def test_equal_generation_sorts_name_descending(self, make_revision):
        revisions = [
            make_revision("foo-a", generation=1),
            make_revision("foo-c", generation=1),
            make_revision("foo-b", generation=1),
        ]
        sort_revisions(revisions)
        assert names(revisions) == ["foo-c", "foo-b", "foo-a"]

    def test_unparseable_generation_falls_back_to_name(self, make_revision):
        revisions = [
            make_revision("foo-a"),
            make_revision("foo-b", generation="seven"),
        ]
        sort_revisions(revisions)
        assert names(revisions) == ["foo-b", "foo-a"]

    def test_mixed_pair_falls_back_to_name(self, make_revision):
        revisions = [
            make_revision("foo-a", generation=1),
            make_revision("foo-z"),
        ]
        sort_revisions(revisions)
        assert names(revisions) == ["foo-z", "foo-a"]

    def test_fallback_applies_in_both_argument_orders(self, make_revision):
        valid = make_revision("foo-a", generation=1)
        missing = make_revision("foo-z")
        # Only b is unusable, then only a is unusable
        assert _compare_revisions(valid, missing) == 1
        assert _compare_revisions(missing, valid) == -1

        same_name_valid = make_revision("foo-m", generation=5)
        same_name_missing = make_revision("foo-m", generation="n/a")
        assert _compare_revisions(same_name_valid, same_name_missing) == 0
        assert _compare_revisions(same_name_missing, same_name_valid) == 0

    def test_generation_parsing(self, make_revision):
        assert parse_generation(make_revision("r", generation=12)) == 12
        assert parse_generation(make_revision("r", generation="+4")) == 4
        assert parse_generation(make_revision("r")) is None
        assert parse_generation(make_revision("r", generation="1.5")) is None
        assert parse_generation(make_revision("r", generation=" 1")) is None

    def test_history_in_creation_order(self, make_revision):
        revisions = [make_revision(f"foo-{i:05d}", generation=i) for i in (10, 2, 7, 1)]
        sort_revisions(revisions)
        assert names(revisions) == ["foo-00001", "foo-00002", "foo-00007", "foo-00010"]

    def test_stable_for_identical_keys(self, make_revision):
        first = make_revision("foo-00001", generation=1, image="first")
        second = make_revision("foo-00001", generation=1, image="second")
        revisions = [first, second]
        sort_revisions(revisions)
        assert revisions[0] is first
        assert revisions[1] is second


class TestRevisionsToExport:

    def test_single_list_query_with_service_filter(self, two_revision_service, two_revisions, client_with):
        client = client_with(two_revisions)
        revisions, routed = get_revisions_to_export(two_revision_service, client)

        client.list_revisions.assert_called_once_with("serving.knative.dev/service=foo")
        assert names(revisions) == ["foo-00001", "foo-00002"]
        assert routed == {"foo-00001", "foo-00002"}

    def test_empty_history_is_not_found(self, two_revision_service, mock_client):
        mock_client.list_revisions.return_value = RevisionList(items=[])
        with pytest.raises(NotFoundError, match="no revisions found for the service foo"):
            get_revisions_to_export(two_revision_service, mock_client)

    def test_listing_result_not_mutated(self, two_revision_service, two_revisions, client_with):
        client = client_with(two_revisions)
        get_revisions_to_export(two_revision_service, client)
        assert names(client.list_revisions.return_value.items) == ["foo-00002", "foo-00001"]
