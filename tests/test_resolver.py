from unittest.mock import MagicMock

import pytest

from tfdoc_scraper.errors import InvalidKindError, InvalidNameError, NotFoundError, TransportError
from tfdoc_scraper.fetch import FetchResponse
from tfdoc_scraper.scraper.base import DocKind
from tfdoc_scraper.scraper.resolver import build_url, resolve, split_resource_name

BASE = "https://www.terraform.io/docs"


def _fetcher(status_code: int = 200) -> MagicMock:
    fetcher = MagicMock()
    fetcher.fetch.return_value = FetchResponse(status_code, b"<html></html>")
    return fetcher


class TestSplitResourceName:
    def test_splits_on_first_separator_only(self):
        assert split_resource_name("aws_lambda_function") == ("aws", "lambda_function")

    def test_single_separator(self):
        assert split_resource_name("aws_instance") == ("aws", "instance")

    def test_missing_separator(self):
        with pytest.raises(InvalidNameError) as exc_info:
            split_resource_name("instance")
        assert exc_info.value.name == "instance"


class TestBuildUrl:
    def test_resource_urls(self):
        assert build_url("resource", "aws_instance", BASE) == f"{BASE}/providers/aws/r/instance.html"
        assert build_url("resource", "azurerm_virtual_machine", BASE) == (
            f"{BASE}/providers/azurerm/r/virtual_machine.html"
        )
        assert build_url("resource", "grafana_alert_notification", BASE) == (
            f"{BASE}/providers/grafana/r/alert_notification.html"
        )

    def test_provider_url(self):
        assert build_url("provider", "aws", BASE) == f"{BASE}/providers/aws/index.html"

    def test_default_base_url(self):
        assert build_url(DocKind.PROVIDER, "google") == (
            "https://www.terraform.io/docs/providers/google/index.html"
        )

    def test_trailing_slash_in_base(self):
        assert build_url("provider", "aws", "http://mirror.local/docs/") == (
            "http://mirror.local/docs/providers/aws/index.html"
        )

    def test_unknown_kind(self):
        with pytest.raises(InvalidKindError):
            build_url("module", "aws_instance", BASE)

    def test_resource_without_separator(self):
        with pytest.raises(InvalidNameError):
            build_url("resource", "instance", BASE)


class TestResolve:
    def test_resolve_resource(self):
        fetcher = _fetcher()
        resolved = resolve("resource", "aws_lambda_function", fetcher, BASE)
        assert resolved.url == f"{BASE}/providers/aws/r/lambda_function.html"
        assert resolved.kind is DocKind.RESOURCE
        assert resolved.name == "aws_lambda_function"
        fetcher.fetch.assert_called_once_with(resolved.url)

    def test_resolve_provider(self):
        resolved = resolve("provider", "aws", _fetcher(), BASE)
        assert resolved.url == f"{BASE}/providers/aws/index.html"

    def test_non_200_is_not_found(self):
        with pytest.raises(NotFoundError) as exc_info:
            resolve("resource", "aws_nothing", _fetcher(404), BASE)
        err = exc_info.value
        assert err.kind == "resource"
        assert err.name == "aws_nothing"
        assert err.status_code == 404
        assert err.url == f"{BASE}/providers/aws/r/nothing.html"
        assert "is not found" in str(err)

    def test_transport_failure_is_not_found(self):
        fetcher = MagicMock()
        fetcher.fetch.side_effect = TransportError(f"{BASE}/providers/aws/index.html", reason="timeout")
        with pytest.raises(NotFoundError) as exc_info:
            resolve("provider", "aws", fetcher, BASE)
        assert exc_info.value.status_code is None

    def test_invalid_name_skips_fetch(self):
        fetcher = _fetcher()
        with pytest.raises(InvalidNameError):
            resolve("resource", "instance", fetcher, BASE)
        fetcher.fetch.assert_not_called()

    def test_invalid_kind_skips_fetch(self):
        fetcher = _fetcher()
        with pytest.raises(InvalidKindError):
            resolve("datasource", "aws_ami", fetcher, BASE)
        fetcher.fetch.assert_not_called()
