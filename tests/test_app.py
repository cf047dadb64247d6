import pytest

from colour_wheel.app import create_app, parse_lab, parse_overrides
from colour_wheel.scaling import ScaleOverrides


@pytest.fixture()
def client():
    app = create_app({"TESTING": True})
    return app.test_client()


def test_parse_helpers():
    assert parse_lab("50, 10,-20") == (50.0, 10.0, -20.0)
    with pytest.raises(ValueError):
        parse_lab("50,10")
    with pytest.raises(ValueError):
        parse_lab("a,b,c")
    assert parse_overrides({"aMin": "10", "bMax": ""}) == ScaleOverrides(a_min=10.0)


def test_models_endpoint(client):
    resp = client.get("/models")
    assert resp.status_code == 200
    models = {m["code"]: m for m in resp.get_json()}
    assert len(models) == 8
    assert models["HWB"]["defaults"]["aMax"] == 0
    assert models["HSL"]["angleGradient"] is True
    assert models["LAB"]["angleGradient"] is False


def test_wheel_endpoint(client):
    resp = client.get("/wheel?model=JCh&rings=2&slices=3&aMin=20&aMax=80")
    assert resp.status_code == 200
    data = resp.get_json()
    assert data["model"] == "JCh"
    assert len(data["cells"]) == 6
    assert data["scaling"] == {"aMin": 20, "aMax": 80, "bMin": 0, "bMax": 100}
    assert {"sRGB", "inGamut", "gamutEdge"} <= set(data["cells"][0])


def test_wheel_defaults_from_config(client):
    data = client.get("/wheel").get_json()
    assert data["model"] == "HSL"
    assert (data["rings"], data["slices"]) == (10, 60)


def test_unknown_model_falls_back(client):
    resp = client.get("/wheel?model=XYZ123&rings=1&slices=1")
    assert resp.status_code == 200
    assert resp.get_json()["model"] == "HSL"


def test_configured_default_model():
    app = create_app({"TESTING": True, "DEFAULT_MODEL": "HCL"})
    data = app.test_client().get("/wheel?rings=1&slices=2").get_json()
    assert data["model"] == "HCL"


@pytest.mark.parametrize(
    "query",
    ["rings=0", "rings=999", "slices=121", "rings=two", "aMin=abc", "aMin=nan", "bMax=inf"],
)
def test_wheel_bad_input(client, query):
    resp = client.get(f"/wheel?{query}")
    assert resp.status_code == 400
    assert "error" in resp.get_json()


def test_locate_endpoint(client):
    resp = client.get("/locate?model=LAB&lab=60,64,0")
    assert resp.status_code == 200
    data = resp.get_json()
    assert data["location"]["angle"] == 0.0
    assert data["location"]["distance"] == pytest.approx(0.6)
    assert data["placement"]["marker"] is None
    assert set(data["gradients"]) == {"a", "b"}
    assert len(data["gradients"]["a"]["stops"]) == 11
    assert data["gradients"]["b"]["position"] == pytest.approx(64.0)
    assert data["gradients"]["b"]["extent"] == pytest.approx(128.0)


def test_locate_polar_has_angle_gradient(client):
    data = client.get("/locate?model=HSL&lab=53.2,80.1,67.2").get_json()
    assert set(data["gradients"]) == {"a", "b", "angle"}
    assert data["colour"].startswith("#")


def test_locate_outside(client):
    data = client.get("/locate?model=HSL&lab=100,0,0&aMin=50&aMax=50&bMax=50").get_json()
    assert data["location"]["distance"] > 1
    assert data["placement"]["marker"] == "outside"


def test_locate_needs_lab(client):
    resp = client.get("/locate?model=HSL")
    assert resp.status_code == 400


def test_unknown_route_is_404(client):
    assert client.get("/nope").status_code == 404
