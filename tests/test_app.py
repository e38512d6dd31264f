import pytest

from game_palette.app import create_app, require_hex


@pytest.fixture()
def client():
    app = create_app({"TESTING": True})
    return app.test_client()


def test_require_hex():
    assert require_hex("#FA0") == "#ffaa00"
    assert require_hex(" abcdef ") == "#abcdef"
    for bad in ("#12345", "##abc", None, 123):
        with pytest.raises(ValueError):
            require_hex(bad)


def test_color(client):
    r = client.get("/color?hex=fa0")
    assert r.status_code == 200
    d = r.get_json()
    assert d["hex"] == "#ffaa00"
    assert d["rgb"] == {"r": 255, "g": 170, "b": 0}
    assert d["display"]["HEX"] == "#FFAA00"
    assert d["display"]["RGB"] == "rgb(255, 170, 0)"
    assert d["contrast"] == "#000000"


def test_invalid_hex_is_400(client):
    r = client.get("/color?hex=zzz")
    assert r.status_code == 400
    assert "error" in r.get_json()


def test_variations(client):
    d = client.get("/variations?hex=808080&hue_shift=1").get_json()
    assert [v["label"] for v in d] == ["S2", "S1", "Base", "L1", "L2"]
    assert d[0]["fullLabel"] == "Shadow 2"
    assert d[2]["hex"] == "#808080"


def test_harmonies_language(client):
    d = client.get("/harmonies?hex=ff0000&lang=ko").get_json()
    assert d[0]["description"] == "보색 - 정반대 색상"
    assert d[0]["colors"][1]["hex"] == "#00ffff"


def test_default_language_from_config():
    c = create_app({"TESTING": True, "DEFAULT_LANGUAGE": "ko"}).test_client()
    d = c.get("/harmonies?hex=ff0000").get_json()
    assert d[2]["description"] == "삼각배색 - 120° 간격"


def test_simulate(client):
    r = client.get("/simulate?colors=ff0000,ffffff&type=protanopia")
    assert r.get_json() == ["#6d5f00", "#ffffff"]
    r = client.get("/simulate?hex=ff0000&type=monochromacy")
    assert r.status_code == 400
    assert "supported" in r.get_json()


def test_adjust(client):
    assert client.get("/adjust?hex=f00&style=original").get_json() == ["#ff0000"]
    assert client.get("/adjust?hex=f00&saturation=0.5").get_json() == ["#bf4040"]
    assert client.get("/adjust?hex=f00&style=sepia").status_code == 400
    assert client.get("/adjust?hex=f00&saturation=lots").status_code == 400


def test_extract(client):
    pixels = [[255, 0, 0]] * 6 + [[0, 0, 255]] * 4
    r = client.post("/extract", json={"pixels": pixels, "count": 3})
    assert r.status_code == 200
    assert r.get_json()[:2] == ["#ff0000", "#0000ff"]
    r = client.post("/extract", json={"pixels": pixels, "count": 12})
    assert r.status_code == 400
    r = client.post("/extract", json={"pixels": pixels, "method": "octree"})
    assert r.status_code == 400


def test_export(client):
    r = client.post("/export", json={"colors": ["#ff0000", "0f0"], "format": "css"})
    assert r.status_code == 200
    d = r.get_json()
    assert d["filename"] == "palette.css"
    assert d["content"] == ":root {\n  --color-1: #ff0000;\n  --color-2: #00ff00;\n}"
    assert d["histogram"]["maxValue"] == 150
    r = client.post("/export", json={"colors": [], "format": "css"})
    assert r.status_code == 400
    r = client.post("/export", json={"colors": ["#ff0000"], "format": "ase"})
    assert r.status_code == 400


def test_non_string_colors_are_400(client):
    r = client.post("/export", json={"colors": [123], "format": "css"})
    assert r.status_code == 400
    assert "error" in r.get_json()
    r = client.get("/color?hex=%23%23abc")
    assert r.status_code == 400
