from __future__ import annotations

import logging

import pytest

from provisioner.config.models import BucketMode, ProvisionDefaults
from provisioner.errors import ApiError
from provisioner.wizard.pipeline import ProvisioningPipeline
from provisioner.wizard.state import ProvisioningContext, SettingsAccumulator
from provisioner.wizard.steps import (
    CreateAppStep,
    CreateBucketEntryStep,
    CreateBucketStep,
    CreateWidgetStep,
    UploadWidgetStep,
    widget_source,
)

from tests.conftest import DEMO_RESPONSES, FakeClient


def _run(client, defaults=None):
    context = ProvisioningContext(client=client, defaults=defaults or ProvisionDefaults())
    pipeline = ProvisioningPipeline.for_app("Demo", "Demo widget", context)
    return pipeline, pipeline.run()


def test_steps_run_in_order(demo_client) -> None:
    _run(demo_client)

    assert demo_client.paths == [
        "/api/apps",
        "/api/apps/widgets",
        "/api/storage/buckets/W1",
        "/api/storage/buckets/W1/entry",
        "/api/apps/widgets/W1",
    ]
    assert [call[2] for call in demo_client.calls] == ["post", "post", "put", "put", "put"]


def test_create_app_payload(demo_client) -> None:
    _, settings = _run(demo_client)

    assert demo_client.calls[0][1] == {
        "name": "Demo",
        "description": "Demo widget",
        "distribution": ["all"],
    }
    assert settings.app == {"id": "A1"}


def test_create_widget_merges_caller_defaults_over_derived() -> None:
    client = FakeClient({
        "/api/apps": {"id": "A1", "name": "Demo", "description": "Demo widget", "created_at": "x"},
        "/api/apps/widgets": {"id": "W1"},
    })
    context = ProvisioningContext(
        client=client,
        defaults=ProvisionDefaults(widget={"title": "Custom title", "icon": "star"}),
    )
    settings = CreateAppStep("Demo", "Demo widget").execute(SettingsAccumulator(), context)

    settings = CreateWidgetStep().execute(settings, context)

    assert client.calls[1][1] == {
        "app_id": "A1",
        "description": "Demo widget",
        "source": "test",
        "title": "Custom title",
        "type": "marketplace",
        "use_public_bucket": True,
        "icon": "star",
    }
    assert settings.app == {"id": "A1", "name": "Demo", "description": "Demo widget"}
    assert settings.widget == {"id": "W1"}


def test_shared_bucket_grants_read_to_marketplace_customer(demo_client) -> None:
    _run(demo_client, ProvisionDefaults(customer_id="cust-42"))

    assert demo_client.calls[2][1] == {
        "type": "shared",
        "acl": [{"customer_id": "cust-42", "permission": "read"}],
    }
    assert demo_client.calls[3][1] == {"type": "public"}


def test_public_bucket_mode(demo_client) -> None:
    _run(demo_client, ProvisionDefaults(bucket_mode=BucketMode.PUBLIC))

    assert demo_client.calls[2][1] == {"type": "public"}


def test_upload_payload_never_contains_id(demo_client) -> None:
    _run(demo_client, ProvisionDefaults(widget={"id": "stale", "use_public_bucket": True}))

    upload_payload = demo_client.calls[4][1]
    assert "id" not in upload_payload


def test_upload_recomputes_type_and_source_last(demo_client) -> None:
    defaults = ProvisionDefaults(
        widget={"type": "legacy", "source": "/old/path", "color": "blue"},
        entry="bundle.zip",
    )
    _, settings = _run(demo_client, defaults)

    upload_payload = demo_client.calls[4][1]
    assert upload_payload["type"] == "marketplace"
    assert upload_payload["source"] == "/cmp/api/storage/buckets/W1/bundle.zip"
    assert upload_payload["color"] == "blue"
    assert settings.widget["source"] == "/cmp/api/storage/buckets/W1/bundle.zip"


def test_upload_result_keeps_id_and_source_over_response() -> None:
    responses = dict(DEMO_RESPONSES)
    responses["/api/apps/widgets/W1"] = {"title": "Demo", "source": "/elsewhere", "owner": "x"}
    client = FakeClient(responses)

    _, settings = _run(client)

    assert settings.widget == {
        "id": "W1",
        "title": "Demo",
        "source": widget_source("W1", ProvisionDefaults().entry),
    }


@pytest.mark.parametrize("widget_id,entry", [("W1", "widget.zip"), (1234, "index.html")])
def test_source_path_format(widget_id, entry) -> None:
    assert widget_source(widget_id, entry) == f"/cmp/api/storage/buckets/{widget_id}/{entry}"


def test_app_is_forwarded_unchanged(demo_client) -> None:
    context = ProvisioningContext(client=demo_client)
    settings = CreateAppStep("Demo", "Demo widget").execute(SettingsAccumulator(), context)
    app = settings.app

    for step in (CreateWidgetStep(), CreateBucketStep(), CreateBucketEntryStep(), UploadWidgetStep()):
        settings = step.execute(settings, context)
        assert settings.app is app


def test_bucket_step_requires_widget_id(demo_client) -> None:
    context = ProvisioningContext(client=demo_client)

    with pytest.raises(ApiError, match="no id"):
        CreateBucketStep().execute(SettingsAccumulator(app={"id": "A1"}), context)

    assert demo_client.calls == []


def test_failure_short_circuits_remaining_steps(caplog) -> None:
    client = FakeClient(
        DEMO_RESPONSES,
        fail_on=lambda path, method: path == "/api/storage/buckets/W1",
    )

    with caplog.at_level(logging.WARNING):
        with pytest.raises(ApiError):
            _run(client)

    assert client.paths == ["/api/apps", "/api/apps/widgets", "/api/storage/buckets/W1"]
    assert "Create App, Create Widget" in caplog.text


def test_steps_log_progress(demo_client, caplog) -> None:
    with caplog.at_level(logging.DEBUG, logger="provisioner.pipeline"):
        _run(demo_client)

    messages = [r.getMessage() for r in caplog.records if r.name == "provisioner.pipeline"]
    for expected in ("Created app", "Created widget", "Created bucket", "Created bucket entry", "Uploaded widget"):
        assert expected in messages


def test_on_step_sees_every_step_before_it_runs(demo_client) -> None:
    seen = []

    def on_step(index, total, step):
        assert total == 5
        seen.append((index, step.name, len(demo_client.calls)))

    context = ProvisioningContext(client=demo_client)
    ProvisioningPipeline.for_app("Demo", "Demo widget", context, on_step=on_step).run()

    assert seen == [
        (0, "Create App", 0),
        (1, "Create Widget", 1),
        (2, "Create Bucket", 2),
        (3, "Create Bucket Entry", 3),
        (4, "Upload Widget", 4),
    ]


def test_custom_step_list_reports_its_own_total(demo_client) -> None:
    totals = []
    context = ProvisioningContext(client=demo_client)
    pipeline = ProvisioningPipeline(
        [CreateAppStep("Demo", "Demo widget"), CreateWidgetStep()],
        context,
        on_step=lambda index, total, step: totals.append(total),
    )

    pipeline.run()

    assert totals == [2, 2]
