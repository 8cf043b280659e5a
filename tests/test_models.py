from typing import Optional

import pytest
import requests
from pydantic import Field

from fastly_client.conditions import Condition, CreateConditionInput
from fastly_client.exceptions import (
    FastlyDecodeError,
    MissingNameError,
    MissingServiceIDError,
    MissingServiceVersionError,
    NotOKError,
)
from fastly_client.models import (
    RequestInput,
    check_status_ok,
    decode_as,
)
from fastly_client.stats import StatsResponse


class WidgetInput(RequestInput):
    required_fields = ("service_id", "service_version", "name")

    service_id: str = Field(default="", exclude=True)
    service_version: int = Field(default=0, exclude=True)
    name: str = Field(default="", exclude=True)

    new_name: Optional[str] = Field(default=None, serialization_alias="name")
    priority: Optional[int] = Field(
        default=None, serialization_alias="priority"
    )
    enabled: Optional[bool] = Field(
        default=None, serialization_alias="enabled"
    )


def test_encode_omits_absent_fields() -> None:
    i = WidgetInput(service_id="abc", service_version=1, name="w")
    assert i.encode() == {}


def test_encode_sends_zero_values() -> None:
    i = WidgetInput(new_name="", priority=0, enabled=False, timeout=3.0)
    assert i.encode() == {"name": "", "priority": "0", "enabled": "false"}


def test_encode_renames() -> None:
    i = WidgetInput(name="old", new_name="new", priority=10, enabled=True)
    assert i.payload() == {"name": "new", "priority": 10, "enabled": True}


@pytest.mark.parametrize(
    "i,error",
    [
        (WidgetInput(), MissingServiceIDError),
        (WidgetInput(name="w"), MissingServiceIDError),
        (WidgetInput(service_id="abc"), MissingServiceVersionError),
        (
            WidgetInput(service_id="abc", service_version=1),
            MissingNameError,
        ),
    ],
)
def test_check_required_order(i, error) -> None:
    with pytest.raises(error):
        i.check_required()


def test_check_required_passes() -> None:
    WidgetInput(service_id="abc", service_version=1, name="w").check_required()


def test_missing_field_message() -> None:
    assert str(MissingServiceIDError()) == (
        "missing required field 'ServiceID'"
    )
    assert isinstance(MissingServiceIDError(), ValueError)


def test_unknown_input_field_rejected() -> None:
    with pytest.raises(ValueError):
        CreateConditionInput(colour="blue")


def _response(body, status=200):
    r = requests.Response()
    r.status_code = status
    r._content = body.encode("utf-8")
    r.headers["Content-Type"] = "application/json"
    r.encoding = "utf-8"
    return r


def test_decode_as_model() -> None:
    condition = decode_as(
        _response(
            '{"name": "c", "version": "3", "priority": 10,'
            ' "created_at": "2016-01-05T17:33:37Z", "unknown": true}'
        ),
        Condition,
        "condition",
    )
    assert condition.name == "c"
    assert condition.service_version == 3
    assert condition.created_at.year == 2016
    assert condition.deleted_at is None


def test_decode_as_wrong_shape() -> None:
    with pytest.raises(FastlyDecodeError) as excinfo:
        decode_as(_response('"just a string"'), Condition, "condition")
    assert "error decoding condition" in str(excinfo.value)


@pytest.mark.parametrize(
    "body,error",
    [
        ('{"status": "error"}', NotOKError),
        ("{}", NotOKError),
        ("null", FastlyDecodeError),
        ("[]", FastlyDecodeError),
        ("<html>", FastlyDecodeError),
    ],
)
def test_check_status_ok_failures(body, error) -> None:
    with pytest.raises(error):
        check_status_ok(_response(body), "delete response")


def test_check_status_ok() -> None:
    check_status_ok(_response('{"status": "ok"}'), "delete response")


def test_create_condition_round_trip() -> None:
    i = CreateConditionInput(
        service_id="abc",
        service_version=1,
        name="is-mobile",
        priority=0,
        statement='req.http.User-Agent ~ "Mobile"',
        type="REQUEST",
    )
    echo = Condition.model_validate(i.encode())
    assert echo.name == i.name
    assert echo.priority == 0
    assert echo.statement == i.statement
    assert echo.type == i.type


def test_null_decodes_to_default() -> None:
    status = decode_as(
        _response('{"data": null, "meta": null, "status": null}'),
        StatsResponse,
        "stats response",
    )
    assert status.data == []
    assert status.meta == {}
    assert status.status is None
