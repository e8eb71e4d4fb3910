from fastapi import Depends, FastAPI, Request
from fastapi.testclient import TestClient

from kiwi_lib.container import Container
from kiwi_lib.server import Provide, install_container, resolve_optional_service, resolve_service


class TeamService:
    def list_teams(self):
        return [{'id': 1, 'name': 'TeamA'}]


def _make_app(container=None) -> FastAPI:
    app = FastAPI()
    if container is not None:
        install_container(app, container)

    @app.get('/teams')
    def teams(svc: TeamService = Depends(Provide(TeamService))):
        return svc.list_teams()

    @app.get('/named')
    def named(request: Request):
        return {'value': resolve_service(request, str, 'greeting')}

    @app.get('/optional')
    def optional(request: Request):
        return {'value': resolve_optional_service(request, str, 'greeting')}

    return app


def test_depends_resolves_registered_service():
    c = Container()
    c.register_instance(TeamService())
    client = TestClient(_make_app(c))
    r = client.get('/teams')
    assert r.status_code == 200
    assert r.json() == [{'id': 1, 'name': 'TeamA'}]


def test_named_resolution():
    c = Container()
    c.register_factory(lambda c: 'hello', 'greeting', as_type=str)
    client = TestClient(_make_app(c))
    assert client.get('/named').json() == {'value': 'hello'}
    assert client.get('/optional').json() == {'value': 'hello'}


def test_missing_service_is_500_even_when_silent():
    c = Container(silent=True)
    client = TestClient(_make_app(c), raise_server_exceptions=False)
    r = client.get('/teams')
    assert r.status_code == 500
    assert r.json()['detail'] == "Service 'TeamService' not configured"
    assert client.get('/named').json()['detail'] == "Service 'str/greeting' not configured"


def test_missing_container_is_500():
    client = TestClient(_make_app(), raise_server_exceptions=False)
    r = client.get('/teams')
    assert r.status_code == 500
    assert r.json()['detail'] == 'Service container not configured'


def test_optional_returns_none_when_missing():
    client = TestClient(_make_app())
    assert client.get('/optional').json() == {'value': None}
    client = TestClient(_make_app(Container()))
    assert client.get('/optional').json() == {'value': None}
