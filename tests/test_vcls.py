import pytest
import responses

from fastly_client.exceptions import (
    MissingNameError,
    MissingServiceIDError,
    MissingServiceVersionError,
    NotOKError,
)
from fastly_client.testutils import (
    SERVICE_ID,
    SERVICE_VERSION,
    form_body,
    version_url,
)
from fastly_client.vcls import (
    ActivateVCLInput,
    CreateVCLInput,
    DeleteVCLInput,
    GetGeneratedVCLInput,
    GetVCLInput,
    ListVCLsInput,
    UpdateVCLInput,
    activate_vcl,
    create_vcl,
    delete_vcl,
    get_generated_vcl,
    get_vcl,
    list_vcls,
    update_vcl,
)

CONTENT = """
sub vcl_recv {
#FASTLY recv
}
"""

VCL_PAYLOAD = {
    "content": CONTENT,
    "main": False,
    "name": "test-vcl",
    "service_id": SERVICE_ID,
    "version": SERVICE_VERSION,
    "created_at": "2021-06-10 08:51:32",
    "updated_at": None,
    "deleted_at": None,
}


def _ids(**kwargs):
    return dict(
        service_id=SERVICE_ID, service_version=SERVICE_VERSION, **kwargs
    )


@responses.activate
def test_list_vcls(client) -> None:
    responses.add(responses.GET, version_url("vcl"), json=[VCL_PAYLOAD])

    vcls = list_vcls(client, ListVCLsInput(**_ids()))
    assert [v.name for v in vcls] == ["test-vcl"]
    assert vcls[0].main is False
    assert vcls[0].created_at is not None
    assert vcls[0].created_at.year == 2021


@responses.activate
def test_create_vcl(client) -> None:
    responses.add(responses.POST, version_url("vcl"), json=VCL_PAYLOAD)

    vcl = create_vcl(
        client,
        CreateVCLInput(**_ids(name="test-vcl", content=CONTENT, main=False)),
    )
    assert vcl.content == CONTENT
    assert form_body(responses.calls[0].request) == {
        "name": "test-vcl",
        "content": CONTENT,
        "main": "false",
    }


@responses.activate
def test_get_vcl(client) -> None:
    responses.add(
        responses.GET, version_url("vcl", "test-vcl"), json=VCL_PAYLOAD
    )
    vcl = get_vcl(client, GetVCLInput(**_ids(name="test-vcl")))
    assert vcl.name == "test-vcl"
    assert vcl.service_id == SERVICE_ID


@responses.activate
def test_get_generated_vcl(client) -> None:
    responses.add(
        responses.GET,
        version_url("generated_vcl"),
        json={"content": CONTENT, "service_id": SERVICE_ID, "version": 3},
    )
    vcl = get_generated_vcl(client, GetGeneratedVCLInput(**_ids()))
    assert vcl.content == CONTENT
    assert vcl.name is None


@responses.activate
def test_update_vcl_renames(client) -> None:
    responses.add(
        responses.PUT,
        version_url("vcl", "test-vcl"),
        json=dict(VCL_PAYLOAD, name="new-test-vcl"),
    )
    vcl = update_vcl(
        client,
        UpdateVCLInput(**_ids(name="test-vcl", new_name="new-test-vcl")),
    )
    assert vcl.name == "new-test-vcl"
    assert form_body(responses.calls[0].request) == {"name": "new-test-vcl"}


@responses.activate
def test_activate_vcl(client) -> None:
    responses.add(
        responses.PUT,
        version_url("vcl", "test-vcl", "main"),
        json=dict(VCL_PAYLOAD, main=True),
    )
    vcl = activate_vcl(client, ActivateVCLInput(**_ids(name="test-vcl")))
    assert vcl.main is True
    assert responses.calls[0].request.body is None


@responses.activate
def test_delete_vcl(client) -> None:
    responses.add(
        responses.DELETE,
        version_url("vcl", "test-vcl"),
        json={"status": "ok"},
    )
    delete_vcl(client, DeleteVCLInput(**_ids(name="test-vcl")))
    assert len(responses.calls) == 1


@responses.activate
def test_delete_vcl_not_ok(client) -> None:
    responses.add(
        responses.DELETE,
        version_url("vcl", "test-vcl"),
        json={"status": "fail"},
    )
    with pytest.raises(NotOKError):
        delete_vcl(client, DeleteVCLInput(**_ids(name="test-vcl")))


@pytest.mark.parametrize(
    "func,i,error",
    [
        (list_vcls, ListVCLsInput(), MissingServiceIDError),
        (
            list_vcls,
            ListVCLsInput(service_id=SERVICE_ID),
            MissingServiceVersionError,
        ),
        (get_vcl, GetVCLInput(), MissingNameError),
        (get_vcl, GetVCLInput(name="v"), MissingServiceIDError),
        (
            get_generated_vcl,
            GetGeneratedVCLInput(service_id=SERVICE_ID),
            MissingServiceVersionError,
        ),
        (create_vcl, CreateVCLInput(name="v"), MissingServiceIDError),
        (
            update_vcl,
            UpdateVCLInput(service_id=SERVICE_ID, service_version=1),
            MissingNameError,
        ),
        (
            activate_vcl,
            ActivateVCLInput(name="v", service_id=SERVICE_ID),
            MissingServiceVersionError,
        ),
        (delete_vcl, DeleteVCLInput(), MissingNameError),
    ],
)
@responses.activate
def test_vcl_missing_fields(client, func, i, error) -> None:
    with pytest.raises(error):
        func(client, i)
    assert len(responses.calls) == 0
