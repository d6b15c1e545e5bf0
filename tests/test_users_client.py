from __future__ import annotations

import json

import pytest
import requests
import responses

from conftest import USERS_URL
from userdesk import load_config
from userdesk.clients.users import UNASSIGNED_ID, UsersClient
from userdesk.exceptions import InvalidResponseError, NotFoundError, ServerError, TransportError
from userdesk.http_client import HttpClient
from userdesk.models import UserFields

LEANNE = {
    "id": 1,
    "name": "Leanne Graham",
    "username": "Bret",
    "email": "Sincere@april.biz",
    "phone": "1-770-736-8031 x56442",
    "website": "hildegard.org",
}


def _client() -> UsersClient:
    return UsersClient(http=HttpClient(load_config()))


@responses.activate
def test_list_users_decodes_records_and_keeps_extras(api_env) -> None:
    responses.add(responses.GET, USERS_URL, json=[LEANNE], status=200)

    users = _client().list_users()

    assert users[0].id == 1
    assert users[0].name == "Leanne Graham"
    assert users[0].model_extra["username"] == "Bret"


@responses.activate
def test_create_user_posts_json_body(api_env) -> None:
    responses.add(
        responses.POST,
        USERS_URL,
        json={"id": 11, "name": "Nina", "email": "n@example.com", "phone": "1"},
        status=201,
    )

    created = _client().create_user(UserFields(name="Nina", email="n@example.com", phone="1"))

    assert created.id == UNASSIGNED_ID
    assert created.name == "Nina"
    request = responses.calls[0].request
    assert json.loads(request.body) == {"name": "Nina", "email": "n@example.com", "phone": "1"}
    assert request.headers["Content-type"] == "application/json; charset=UTF-8"


@responses.activate
def test_update_user_puts_to_item_path(api_env) -> None:
    responses.add(
        responses.PUT,
        f"{USERS_URL}/2",
        json={"id": 2, "name": "B", "email": "b@example.com", "phone": "2"},
        status=200,
    )

    assert _client().update_user(2, UserFields(name="B", email="b@example.com", phone="2")) is True
    assert responses.calls[0].request.method == "PUT"


@responses.activate
def test_delete_user_accepts_empty_body(api_env) -> None:
    responses.add(responses.DELETE, f"{USERS_URL}/3", body="", status=200)

    assert _client().delete_user(3) is True


@responses.activate
def test_non_success_status_raises_mapped_error(api_env) -> None:
    responses.add(responses.PUT, f"{USERS_URL}/99", body="not found", status=404)
    responses.add(responses.DELETE, f"{USERS_URL}/1", json={"message": "boom"}, status=500)

    client = _client()
    with pytest.raises(NotFoundError) as not_found:
        client.update_user(99, UserFields(name="x", email="x", phone="x"))
    assert not_found.value.status_code == 404
    with pytest.raises(ServerError) as server:
        client.delete_user(1)
    assert server.value.message == "boom"


@responses.activate
def test_connection_failure_raises_transport_error(api_env) -> None:
    responses.add(responses.GET, USERS_URL, body=requests.ConnectionError("refused"))

    with pytest.raises(TransportError) as raised:
        _client().list_users()
    assert raised.value.status_code == 0
    assert raised.value.code == "TRANSPORT_ERROR"


@responses.activate
def test_success_with_non_json_body_is_invalid_response(api_env) -> None:
    responses.add(responses.GET, USERS_URL, body="<html>", status=200)

    with pytest.raises(InvalidResponseError):
        _client().list_users()


@responses.activate
def test_create_without_id_in_body_succeeds(api_env) -> None:
    responses.add(
        responses.POST,
        USERS_URL,
        json={"name": "Nina", "email": "n@example.com", "phone": "1", "website": "nina.dev"},
        status=201,
    )

    created = _client().create_user(UserFields(name="Nina", email="n@example.com", phone="1"))

    assert created.id == UNASSIGNED_ID
    assert created.model_extra["website"] == "nina.dev"


@responses.activate
def test_create_ignores_server_id_and_non_json_body(api_env) -> None:
    responses.add(responses.POST, USERS_URL, body="Created", status=201)

    created = _client().create_user(UserFields(name="Nina", email="n@example.com", phone="1"))

    assert created.id == UNASSIGNED_ID
    assert (created.name, created.email, created.phone) == ("Nina", "n@example.com", "1")


@responses.activate
def test_create_submitted_fields_win_over_echoed_ones(api_env) -> None:
    responses.add(responses.POST, USERS_URL, json={"id": "abc", "name": None}, status=201)

    created = _client().create_user(UserFields(name="Nina", email="n@example.com", phone="1"))

    assert created.id == UNASSIGNED_ID
    assert created.name == "Nina"


@responses.activate
def test_update_accepts_no_content(api_env) -> None:
    responses.add(responses.PUT, f"{USERS_URL}/2", body="", status=204)

    assert _client().update_user(2, UserFields(name="B", email="b@example.com", phone="2")) is True


@responses.activate
def test_update_accepts_body_of_any_shape(api_env) -> None:
    responses.add(responses.PUT, f"{USERS_URL}/2", json={"id": "not-a-number"}, status=200)

    assert _client().update_user(2, UserFields(name="B", email="b@example.com", phone="2")) is True


@responses.activate
def test_delete_accepts_plain_text_body(api_env) -> None:
    responses.add(responses.DELETE, f"{USERS_URL}/3", body="OK", status=200)

    assert _client().delete_user(3) is True


@responses.activate
def test_list_server_error_is_not_retried(api_env) -> None:
    responses.add(responses.GET, USERS_URL, json={"message": "busy"}, status=503)
    responses.add(responses.GET, USERS_URL, json=[LEANNE], status=200)

    with pytest.raises(ServerError) as raised:
        _client().list_users()
    assert raised.value.status_code == 503
    assert len(responses.calls) == 1


@responses.activate
def test_mutations_are_sent_once(api_env) -> None:
    responses.add(responses.POST, USERS_URL, json={"message": "busy"}, status=503)

    with pytest.raises(ServerError):
        _client().create_user(UserFields(name="x", email="x", phone="x"))
    assert len(responses.calls) == 1


@responses.activate
def test_custom_users_path(api_env, monkeypatch) -> None:
    monkeypatch.setenv("USERDESK_USERS_PATH", "api/v1/people/")
    responses.add(responses.GET, "https://api.example.com/api/v1/people", json=[], status=200)

    assert _client().list_users() == []


@responses.activate
def test_last_operation_is_recorded(api_env) -> None:
    responses.add(responses.GET, USERS_URL, json=[], status=200)
    client = _client()

    client.list_users()

    assert client.http.last_operation is not None
    assert client.http.last_operation.operation == "users.list"
    assert client.http.last_operation.result == "success"
