import base64
import logging
from unittest.mock import MagicMock, patch

import pytest

from langfuseotellib.open_telemetry.langfuse_exporter_config import (
    LangfuseExporterConfig,
)
from langfuseotellib.open_telemetry.langfuse_exporter_factory import (
    create_basic_auth_header,
    create_langfuse_span_exporter,
    get_traces_endpoint,
)
from langfuseotellib.open_telemetry.langfuse_span_exporter import LangfuseSpanExporter

FACTORY_MODULE = "langfuseotellib.open_telemetry.langfuse_exporter_factory"


def test_create_basic_auth_header() -> None:
    header = create_basic_auth_header("pk-lf-test", "sk-lf-test")

    assert header.startswith("Basic ")
    assert base64.b64decode(header[len("Basic "):]).decode("utf-8") == (
        "pk-lf-test:sk-lf-test"
    )


@pytest.mark.parametrize(
    "endpoint",
    [
        "https://cloud.langfuse.com/api/public/otel",
        "https://cloud.langfuse.com/api/public/otel/",
    ],
)
def test_get_traces_endpoint(endpoint: str) -> None:
    assert (
        get_traces_endpoint(endpoint)
        == "https://cloud.langfuse.com/api/public/otel/v1/traces"
    )


def test_returns_none_when_not_configured(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.WARNING, logger=FACTORY_MODULE):
        exporter = create_langfuse_span_exporter(LangfuseExporterConfig())

    assert exporter is None
    assert "not fully configured" in caplog.text


def test_creates_wrapped_otlp_exporter() -> None:
    config = LangfuseExporterConfig(
        endpoint="https://langfuse.example.com/api/public/otel",
        public_key="pk-lf-test",
        secret_key="sk-lf-test",
        export_timeout_ms=15000,
        embabel_only=True,
    )
    otlp_exporter = MagicMock()

    with patch(f"{FACTORY_MODULE}.OTLPSpanExporter", return_value=otlp_exporter) as otlp_cls:
        exporter = create_langfuse_span_exporter(config)

    assert isinstance(exporter, LangfuseSpanExporter)
    assert exporter.wrapped_exporter is otlp_exporter
    assert exporter.embabel_only is True
    otlp_cls.assert_called_once_with(
        endpoint="https://langfuse.example.com/api/public/otel/v1/traces",
        headers={"Authorization": create_basic_auth_header("pk-lf-test", "sk-lf-test")},
        timeout=15.0,
    )


def test_creates_real_otlp_exporter() -> None:
    config = LangfuseExporterConfig(public_key="pk-lf-test", secret_key="sk-lf-test")

    exporter = create_langfuse_span_exporter(config)

    assert isinstance(exporter, LangfuseSpanExporter)
    assert exporter.embabel_only is False
    exporter.shutdown()
