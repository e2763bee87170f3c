# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

import socket
import ssl

import httpx

from hopscan import config
from hopscan.config import DEFAULT_USER_AGENT
from hopscan.errors import (
    ErrorCategory,
    HopScanError,
    ProbeError,
    SourceReadError,
    categorize_exception,
    error_category_to_reason,
)


def test_http_settings_env_overrides(monkeypatch):
    monkeypatch.setenv("HOPSCAN_HTTP_TIMEOUT", "2.5")
    monkeypatch.setenv("HOPSCAN_USER_AGENT", "CustomAgent/1.0")
    monkeypatch.setenv("HOPSCAN_HTTP_VERIFY_SSL", "0")
    monkeypatch.setenv("HOPSCAN_HTTP_MAX_REDIRECTS", "7")

    settings = config.load_http_settings()

    assert settings.timeout == 2.5
    assert settings.user_agent == "CustomAgent/1.0"
    assert settings.verify_ssl is False
    assert settings.max_redirects == 7


def test_http_settings_invalid_env_fall_back(monkeypatch):
    monkeypatch.setenv("HOPSCAN_HTTP_TIMEOUT", "not-a-number")
    monkeypatch.setenv("HOPSCAN_HTTP_MAX_REDIRECTS", "-3")
    monkeypatch.delenv("HOPSCAN_USER_AGENT", raising=False)

    settings = config.load_http_settings()

    assert settings.timeout == config.HttpSettings.timeout
    assert settings.max_redirects == config.HttpSettings.max_redirects
    assert settings.user_agent == DEFAULT_USER_AGENT


def test_pipeline_settings_defaults(monkeypatch):
    for name in ("HOPSCAN_WORKERS", "HOPSCAN_REDIRECT_POLICY", "HOPSCAN_SCHEMES"):
        monkeypatch.delenv(name, raising=False)
    settings = config.load_pipeline_settings()
    assert settings.workers == 5
    assert settings.redirect_policy == "stop-on-first"
    assert settings.schemes == ("http", "https")


def test_pipeline_settings_env_overrides(monkeypatch):
    monkeypatch.setenv("HOPSCAN_WORKERS", "8")
    monkeypatch.setenv("HOPSCAN_REDIRECT_POLICY", " Follow-All ")
    monkeypatch.setenv("HOPSCAN_SCHEMES", "HTTPS, ,http")
    settings = config.load_pipeline_settings()
    assert settings.workers == 8
    assert settings.redirect_policy == "follow-all"
    assert settings.schemes == ("https", "http")


def test_pipeline_settings_invalid_workers_fall_back(monkeypatch):
    monkeypatch.setenv("HOPSCAN_WORKERS", "0")
    assert config.load_pipeline_settings().workers == config.DEFAULT_WORKERS
    monkeypatch.setenv("HOPSCAN_WORKERS", "many")
    assert config.load_pipeline_settings().workers == config.DEFAULT_WORKERS
    monkeypatch.setenv("HOPSCAN_SCHEMES", " , ")
    assert config.load_pipeline_settings().schemes == config.DEFAULT_SCHEMES


def test_pipeline_settings_keep_unknown_policy_name_for_rejection(monkeypatch):
    monkeypatch.setenv("HOPSCAN_REDIRECT_POLICY", "Sometimes")
    assert config.load_pipeline_settings().redirect_policy == "sometimes"


def test_categorize_exception_maps_transport_failures():
    request = httpx.Request("GET", "http://example.com/")
    assert categorize_exception(httpx.ConnectTimeout("slow", request=request)) is ErrorCategory.TIMEOUT
    assert categorize_exception(httpx.ConnectError("[Errno 111] Connection refused", request=request)) is ErrorCategory.CONNECTION_ERROR
    assert categorize_exception(httpx.ConnectError("[Errno -2] Name or service not known", request=request)) is ErrorCategory.DNS_ERROR
    assert (
        categorize_exception(httpx.ConnectError("[SSL: CERTIFICATE_VERIFY_FAILED] certificate verify failed", request=request))
        is ErrorCategory.SSL_ERROR
    )
    assert categorize_exception(httpx.TooManyRedirects("loop", request=request)) is ErrorCategory.TOO_MANY_REDIRECTS
    assert categorize_exception(httpx.UnsupportedProtocol("gopher")) is ErrorCategory.INVALID_URL
    assert categorize_exception(httpx.InvalidURL("bad")) is ErrorCategory.INVALID_URL
    assert categorize_exception(ConnectionResetError()) is ErrorCategory.CONNECTION_ERROR
    assert categorize_exception(RuntimeError("boom")) is ErrorCategory.UNKNOWN_ERROR


def test_categorize_exception_follows_cause_chain():
    try:
        try:
            raise socket.gaierror(-2, "Name or service not known")
        except socket.gaierror as inner:
            raise httpx.ConnectError("connect failed") from inner
    except httpx.ConnectError as exc:
        assert categorize_exception(exc) is ErrorCategory.DNS_ERROR

    try:
        try:
            raise ssl.SSLError("handshake")
        except ssl.SSLError as inner:
            raise httpx.ConnectError("connect failed") from inner
    except httpx.ConnectError as exc:
        assert categorize_exception(exc) is ErrorCategory.SSL_ERROR


def test_error_category_to_reason():
    assert error_category_to_reason(ErrorCategory.DNS_ERROR) == "DNS resolution failure"
    assert error_category_to_reason(ErrorCategory.NONE) == ""
    assert error_category_to_reason(None) == ""


def test_probe_error_message_names_url_and_cause():
    error = ProbeError(
        "https://example.com/",
        category=ErrorCategory.CONNECTION_ERROR,
        error_type="ConnectError",
        message="[Errno 111] Connection refused",
    )
    assert isinstance(error, HopScanError)
    assert str(error) == "https://example.com/: Network connectivity issue (ConnectError: [Errno 111] Connection refused)"
    assert str(ProbeError("http://a/")) == "http://a/: Network error during probe"


def test_source_read_error_keeps_cause():
    cause = FileNotFoundError(2, "No such file or directory")
    error = SourceReadError("hosts.txt", cause)
    assert error.cause is cause
    assert str(error).startswith("hosts.txt: ")


def test_setup_logging_quiets_httpx_below_debug():
    import logging

    from hopscan.log import setup_logging

    setup_logging("INFO")
    assert logging.getLogger("httpx").level == logging.WARNING
    setup_logging("debug")
    assert logging.getLogger("httpx").level == logging.DEBUG
