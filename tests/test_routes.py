import pytest

from templweaver.routes import MethodNotAllowed, Route, Routes


def echo(tag):
    return lambda request: (tag, request)


@pytest.fixture
def routes():
    return Routes(
        {
            "/": Route(echo("home"), title="Home", allowed_methods=("GET", "HEAD")),
            "/ping": Route(lambda _r: "pong", api_only=True, allowed_methods=("POST",)),
            "/static/": Route(echo("static"), api_only=True, allowed_methods=("GET", "HEAD")),
            "/any": Route(echo("any")),
        }
    )


def test_allows_listed_methods_only():
    route = Route(echo("x"), allowed_methods=("GET", "HEAD"))
    assert route.allows("GET")
    assert route.allows("HEAD")
    assert not route.allows("POST")


def test_empty_methods_allow_everything():
    route = Route(echo("x"))
    assert all(route.allows(m) for m in ("GET", "POST", "DELETE"))


def test_exact_match(routes):
    assert routes.match("/ping") is routes["/ping"]


def test_subtree_match(routes):
    assert routes.match("/static/css/tailwind.css") is routes["/static/"]


def test_root_catches_unknown_paths(routes):
    assert routes.match("/ping/extra") is routes["/"]
    assert routes.match("/nowhere") is routes["/"]


def test_no_match_without_root():
    table = Routes({"/ping": Route(echo("ping"))})
    assert table.match("/other") is None
    with pytest.raises(LookupError):
        table.dispatch("GET", "/other", None)


def test_dispatch_calls_handler(routes):
    assert routes.dispatch("POST", "/ping", object()) == "pong"
    request = {"id": 7}
    assert routes.dispatch("GET", "/static/app.js", request) == ("static", request)


def test_dispatch_rejects_method(routes):
    with pytest.raises(MethodNotAllowed) as info:
        routes.dispatch("DELETE", "/", None)
    assert str(info.value) == 'method "DELETE" not allowed'
    assert info.value.status == 405
    assert info.value.method == "DELETE"


def test_dispatch_any_method(routes):
    assert routes.dispatch("PATCH", "/any", "req") == ("any", "req")