"""Unit tests for request payloads and response records."""

from __future__ import annotations

import json

import pytest
from pydantic import ValidationError

from tly.schemas.dto.requests.link import (
    BulkShortenRequest,
    ExpandRequest,
    ShortLinkCreateRequest,
    ShortLinkUpdateRequest,
)
from tly.schemas.dto.requests.pixel import PixelCreateRequest, PixelUpdateRequest
from tly.schemas.dto.requests.tag import TagRequest
from tly.schemas.dto.responses.link import ExpandedLink, ShortLink
from tly.schemas.dto.responses.pixel import Pixel
from tly.schemas.dto.responses.stats import LinkStats
from tly.schemas.dto.responses.tag import Tag


# ── ShortLinkCreateRequest ────────────────────────────────────────────────────


class TestShortLinkCreateRequest:
    def test_requires_long_url(self):
        with pytest.raises(ValidationError):
            ShortLinkCreateRequest.model_validate({"domain": "https://t.ly/"})

    def test_unset_fields_are_omitted(self):
        req = ShortLinkCreateRequest(long_url="https://example.com")
        assert req.to_payload() == {"long_url": "https://example.com"}

    def test_explicit_none_is_sent_as_null(self):
        req = ShortLinkCreateRequest(long_url="https://example.com", password=None)
        assert req.to_payload() == {"long_url": "https://example.com", "password": None}

    def test_zero_and_empty_values_are_kept(self):
        req = ShortLinkCreateRequest(
            long_url="https://example.com", expire_at_views=0, public_stats=False, tags=[]
        )
        assert req.to_payload() == {
            "long_url": "https://example.com",
            "expire_at_views": 0,
            "public_stats": False,
            "tags": [],
        }

    def test_json_round_trip_reproduces_input(self):
        data = {
            "long_url": "https://example.com",
            "short_id": "promo",
            "expire_at_datetime": "2035-01-17 15:00:00",
            "description": "Spring promo",
            "tags": [1, 2],
            "pixels": [7],
            "meta": {"smart_urls": [{"url": "https://m.example.com"}]},
        }
        req = ShortLinkCreateRequest.model_validate(data)
        assert json.loads(req.to_json()) == data

    def test_negative_view_expiry_rejected(self):
        with pytest.raises(ValidationError):
            ShortLinkCreateRequest(long_url="https://example.com", expire_at_views=-1)

    def test_unknown_fields_rejected(self):
        with pytest.raises(ValidationError):
            ShortLinkCreateRequest(long_url="https://example.com", alias="nope")


# ── Other payloads ────────────────────────────────────────────────────────────


class TestOtherPayloads:
    def test_update_requires_short_and_long_url(self):
        with pytest.raises(ValidationError):
            ShortLinkUpdateRequest(short_url="https://t.ly/abc")

    def test_update_has_no_domain(self):
        with pytest.raises(ValidationError):
            ShortLinkUpdateRequest(
                short_url="https://t.ly/abc", long_url="https://example.com", domain="x"
            )

    def test_expand_password_optional(self):
        assert ExpandRequest(short_url="https://t.ly/abc").to_payload() == {
            "short_url": "https://t.ly/abc"
        }

    def test_bulk_requires_domain_and_links(self):
        with pytest.raises(ValidationError):
            BulkShortenRequest(links=["https://a.example"])

    def test_pixel_create_all_fields_required(self):
        with pytest.raises(ValidationError):
            PixelCreateRequest(name="GTM", pixel_id="GTM-1")

    def test_pixel_update_payload(self):
        req = PixelUpdateRequest(id=3, name="n", pixel_id="p", pixel_type="facebook")
        assert req.to_payload() == {
            "id": 3,
            "name": "n",
            "pixel_id": "p",
            "pixel_type": "facebook",
        }

    def test_tag_payload(self):
        assert TagRequest(tag="fall2024").to_payload() == {"tag": "fall2024"}


# ── Response records ──────────────────────────────────────────────────────────


class TestResponseRecords:
    def test_tag_from_service_body(self):
        tag = Tag.model_validate_json(
            '{"id":1,"tag":"fall2024","created_at":"2024-01-01","updated_at":"2024-01-01"}'
        )
        assert tag.id == 1
        assert tag.tag == "fall2024"

    def test_unknown_fields_ignored(self):
        pixel = Pixel.model_validate(
            {"id": 1, "name": "n", "pixel_id": "p", "pixel_type": "t", "team_id": 9}
        )
        assert not hasattr(pixel, "team_id")

    def test_short_link_minimal(self):
        link = ShortLink.model_validate(
            {"short_url": "https://t.ly/a", "long_url": "https://example.com"}
        )
        assert link.public_stats is False
        assert link.meta is None

    @pytest.mark.parametrize("views", [10, "10", None])
    def test_short_link_view_expiry_shapes(self, views):
        link = ShortLink.model_validate(
            {"short_url": "https://t.ly/a", "long_url": "https://e.com", "expire_at_views": views}
        )
        assert link.expire_at_views == views

    def test_expanded_link(self):
        result = ExpandedLink.model_validate({"long_url": "https://e.com", "expired": True})
        assert result.expired is True

    def test_stats_defaults(self):
        stats = LinkStats.model_validate({})
        assert stats.clicks == 0
        assert stats.browsers == []
        assert stats.data is None

    def test_stats_null_breakdowns_become_empty(self):
        stats = LinkStats.model_validate({"clicks": 3, "countries": None, "daily_clicks": None})
        assert stats.countries == []
        assert stats.daily_clicks == []

    def test_null_public_stats_reads_as_false(self):
        link = ShortLink.model_validate(
            {"short_url": "https://t.ly/a", "long_url": "https://e.com", "public_stats": None}
        )
        assert link.public_stats is False

    def test_null_counters_read_as_zero(self):
        stats = LinkStats.model_validate({"clicks": None, "unique_clicks": None})
        assert stats.clicks == 0
        assert stats.unique_clicks == 0

    def test_null_required_string_reads_as_empty(self):
        pixel = Pixel.model_validate(
            {"id": 1, "name": None, "pixel_id": None, "pixel_type": "t"}
        )
        assert pixel.name == ""
        assert pixel.pixel_id == ""

    def test_null_expired_reads_as_false(self):
        assert ExpandedLink.model_validate({"long_url": "https://e.com", "expired": None}).expired is False

    def test_nullable_fields_keep_null(self):
        link = ShortLink.model_validate(
            {"short_url": "https://t.ly/a", "long_url": "https://e.com", "description": None, "meta": None}
        )
        assert link.description is None
        assert link.meta is None

    def test_missing_required_field_still_rejected(self):
        with pytest.raises(ValidationError):
            Tag.model_validate({"tag": "x"})
