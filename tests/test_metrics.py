# tests/test_metrics.py
import pytest
from prometheus_client import REGISTRY
from dropbox_client.errors import HTTPStatusError
from dropbox_client.schemas import ListFolderArg


def _sample(name, **labels):
    return REGISTRY.get_sample_value(name, labels) or 0.0


async def test_request_counter(dbx):
    before = _sample("dropbox_requests_total", endpoint="files/list_folder")
    await dbx.list_folder(ListFolderArg(path=""))
    assert _sample("dropbox_requests_total", endpoint="files/list_folder") == before + 1


async def test_error_counter_by_kind(dbx, dropbox):
    before = _sample("dropbox_request_errors_total", endpoint="sharing/list_folders", kind="status")
    dropbox.status_code = 500
    with pytest.raises(HTTPStatusError):
        await dbx.sharing_list_folders()
    assert _sample("dropbox_request_errors_total", endpoint="sharing/list_folders", kind="status") == before + 1


async def test_metrics_endpoint(client, dbx):
    await dbx.sharing_list_folders()

    resp = await client.get("/metrics")
    assert resp.status_code == 200
    assert "dropbox_requests_total" in resp.text
