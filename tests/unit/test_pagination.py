"""Tests for pagination metadata and page links."""

import httpx
import pytest

from harvest_client.errors import DecodingError, ServerError
from harvest_client.pagination import PageLinks, Pagination, parse_link_header, parse_page, parse_pagination
from harvest_client.resources import Client

LINK = "https://api.harvestapp.com/v2/clients?page={}&per_page=2"


def page_body(page, total_pages, total_entries=None, links=True):
    body = {
        "per_page": 2,
        "total_pages": total_pages,
        "total_entries": total_entries if total_entries is not None else total_pages * 2,
        "page": page,
        "next_page": page + 1 if page < total_pages else None,
        "previous_page": page - 1 if page > 1 else None,
    }
    if links:
        body["links"] = {
            "first": LINK.format(1),
            "next": LINK.format(page + 1) if page < total_pages else None,
            "previous": LINK.format(page - 1) if page > 1 else None,
            "last": LINK.format(total_pages),
        }
    return body


class TestParsePagination:
    @pytest.mark.unit
    def test_single_page(self):
        pagination = parse_pagination(page_body(1, 1, total_entries=2))

        assert pagination == Pagination(
            per_page=2,
            total_pages=1,
            total_entries=2,
            page=1,
            links=PageLinks(first=LINK.format(1), last=LINK.format(1)),
        )
        assert not pagination.has_next
        assert not pagination.has_previous

    @pytest.mark.unit
    def test_middle_page(self):
        pagination = parse_pagination(page_body(2, 3))

        assert pagination.next_page == 3
        assert pagination.previous_page == 1
        assert pagination.links.next == LINK.format(3)
        assert pagination.links.previous == LINK.format(1)

    @pytest.mark.unit
    @pytest.mark.parametrize(("page", "total_pages"), [(1, 1), (1, 4), (2, 4), (4, 4)])
    def test_next_page_set_iff_not_last(self, page, total_pages):
        pagination = parse_pagination(page_body(page, total_pages))

        assert (pagination.next_page is not None) == (pagination.page < pagination.total_pages)
        assert (pagination.previous_page is not None) == (pagination.page > 1)

    @pytest.mark.unit
    def test_links_copied_verbatim(self):
        body = page_body(1, 2)
        body["links"]["next"] = "https://example.test/weird/path?page=2&per_page=2&extra=%20"

        pagination = parse_pagination(body)

        assert pagination.links.next == "https://example.test/weird/path?page=2&per_page=2&extra=%20"

    @pytest.mark.unit
    def test_empty_string_link_is_absent(self):
        body = page_body(1, 1)
        body["links"]["next"] = ""

        assert parse_pagination(body).links.next is None

    @pytest.mark.unit
    def test_no_links_anywhere_rejected(self):
        with pytest.raises(DecodingError):
            parse_pagination(page_body(1, 3, links=False))

    @pytest.mark.unit
    def test_empty_collection_needs_no_links(self):
        body = {"per_page": 100, "total_pages": 0, "total_entries": 0, "page": 1}

        assert parse_pagination(body).links == PageLinks()

    @pytest.mark.unit
    def test_link_header_without_first_and_last_rejected(self):
        header_links = {"next": {"url": LINK.format(2), "rel": "next"}}

        with pytest.raises(DecodingError):
            parse_pagination(page_body(1, 2, links=False), header_links)

    @pytest.mark.unit
    def test_links_from_link_header(self):
        response = httpx.Response(
            200,
            headers={"Link": f'<{LINK.format(1)}>; rel="first", <{LINK.format(3)}>; rel="next", '
            f'<{LINK.format(1)}>; rel="prev", <{LINK.format(3)}>; rel="last"'},
        )

        pagination = parse_pagination(page_body(2, 3, links=False), response.links)

        assert pagination.links == PageLinks(
            first=LINK.format(1), next=LINK.format(3), previous=LINK.format(1), last=LINK.format(3)
        )

    @pytest.mark.unit
    def test_body_links_win_over_header(self):
        header_links = {"first": {"url": "https://other.test/1", "rel": "first"}}

        pagination = parse_pagination(page_body(1, 1), header_links)

        assert pagination.links.first == LINK.format(1)

    @pytest.mark.unit
    def test_parse_link_header_ignores_other_rels(self):
        links = parse_link_header({"self": {"url": "https://x.test/", "rel": "self"}})

        assert links == PageLinks()

    @pytest.mark.unit
    @pytest.mark.parametrize("key", ["per_page", "total_pages", "total_entries", "page"])
    def test_missing_required_field(self, key):
        body = page_body(1, 1)
        del body[key]

        with pytest.raises(DecodingError):
            parse_pagination(body)

    @pytest.mark.unit
    def test_next_page_on_last_page_rejected(self):
        body = page_body(1, 1)
        body["next_page"] = 2

        with pytest.raises(DecodingError):
            parse_pagination(body)

    @pytest.mark.unit
    def test_missing_next_page_before_last_rejected(self):
        body = page_body(1, 2)
        body["next_page"] = None

        with pytest.raises(DecodingError):
            parse_pagination(body)

    @pytest.mark.unit
    def test_previous_page_on_first_page_rejected(self):
        body = page_body(1, 2)
        body["previous_page"] = 1

        with pytest.raises(DecodingError):
            parse_pagination(body)

    @pytest.mark.unit
    def test_next_page_must_follow_page(self):
        body = page_body(2, 3)
        body["next_page"] = 2

        with pytest.raises(DecodingError):
            parse_pagination(body)

    @pytest.mark.unit
    def test_previous_page_must_precede_page(self):
        body = page_body(3, 4)
        body["previous_page"] = 1

        with pytest.raises(DecodingError):
            parse_pagination(body)

    @pytest.mark.unit
    def test_missing_first_link_rejected(self):
        body = page_body(1, 1)
        body["links"]["first"] = None

        with pytest.raises(DecodingError):
            parse_pagination(body)

    @pytest.mark.unit
    def test_link_disagreeing_with_next_page_rejected(self):
        body = page_body(1, 2)
        body["links"]["next"] = None

        with pytest.raises(DecodingError):
            parse_pagination(body)

    @pytest.mark.unit
    def test_non_string_link_rejected(self):
        body = page_body(1, 1)
        body["links"]["first"] = 1

        with pytest.raises(DecodingError):
            parse_pagination(body)


class TestParsePage:
    @pytest.mark.unit
    def test_items_keep_server_order(self):
        body = page_body(1, 1, total_entries=3)
        body["per_page"] = 3
        body["clients"] = [{"id": 3}, {"id": 1}, {"id": 2}]

        page = parse_page(httpx.Response(200, json=body), "clients", Client)

        assert [client.id for client in page.items] == [3, 1, 2]
        assert len(page) == 3
        assert [client.id for client in page] == [3, 1, 2]

    @pytest.mark.unit
    def test_empty_page(self):
        body = {"clients": [], "per_page": 100, "total_pages": 0, "total_entries": 0, "page": 1}

        page = parse_page(httpx.Response(200, json=body), "clients", Client)

        assert page.items == []
        assert page.pagination.total_entries == 0

    @pytest.mark.unit
    def test_missing_collection_key(self):
        response = httpx.Response(200, json=page_body(1, 1))

        with pytest.raises(DecodingError) as exc_info:
            parse_page(response, "clients", Client)

        assert exc_info.value.status_code == 200

    @pytest.mark.unit
    def test_bad_item_names_its_index(self):
        body = page_body(1, 1)
        body["clients"] = [{"id": 1}, {"id": "2"}]

        with pytest.raises(DecodingError) as exc_info:
            parse_page(httpx.Response(200, json=body), "clients", Client)

        assert "clients[1].id" in str(exc_info.value)

    @pytest.mark.unit
    def test_bad_pagination_keeps_response(self):
        body = page_body(1, 1)
        body["clients"] = []
        body["next_page"] = 2
        response = httpx.Response(200, json=body)

        with pytest.raises(DecodingError) as exc_info:
            parse_page(response, "clients", Client)

        assert exc_info.value.response is response

    @pytest.mark.unit
    def test_error_status(self):
        with pytest.raises(ServerError):
            parse_page(httpx.Response(503, text="down"), "clients", Client)
