from io import BytesIO

import pytest
from PIL import Image

from adstudio.handlers import cli
from fakes import FakeImageProvider, FakeTextProvider


class FakeClient(FakeImageProvider, FakeTextProvider):
    def __init__(self, replies=()):
        FakeImageProvider.__init__(self)
        FakeTextProvider.__init__(self, list(replies))


@pytest.fixture
def image_file(tmp_path):
    def write(name):
        path = tmp_path / name
        buffer = BytesIO()
        Image.new("RGB", (4, 4), (0, 128, 0)).save(buffer, format="PNG")
        path.write_bytes(buffer.getvalue())
        return str(path)

    return write


def _use_client(monkeypatch, client):
    monkeypatch.setattr(cli.GeminiClient, "from_env", classmethod(lambda cls: client))


def test_generate_writes_one_file_per_direction(monkeypatch, tmp_path, image_file):
    client = FakeClient()
    _use_client(monkeypatch, client)
    out = tmp_path / "ads"

    code = cli.main([
        "generate",
        "--product", image_file("product.png"),
        "--style", image_file("style.png"),
        "--logo", image_file("logo.png"),
        "--headline", "Summer Sale",
        "--description", "Everything must go",
        "--aspect-ratio", "4:5",
        "--out", str(out),
    ])

    assert code == 0
    assert sorted(p.name for p in out.iterdir()) == ["ad_1.png", "ad_2.png", "ad_3.png"]
    assert {aspect for _, aspect in client.calls} == {"4:5"}


def test_edit_applies_prompts_in_order(monkeypatch, tmp_path, image_file):
    client = FakeClient()
    _use_client(monkeypatch, client)
    out = tmp_path / "edits"

    code = cli.main(["edit", image_file("ad.png"), "brighter", "add a border", "--out", str(out)])

    assert code == 0
    assert (out / "edit_1.png").read_bytes() == b"image-1"
    assert (out / "edit_2.png").read_bytes() == b"image-2"
    assert client.calls[1][0][0].inline_data.data == b"image-1"


def test_suggest_prints_refined_copy(monkeypatch, capsys):
    _use_client(monkeypatch, FakeClient(['"Grab it now"']))
    assert cli.main(["suggest", "cta", "Click here to buy"]) == 0
    assert capsys.readouterr().out.strip() == "Grab it now"


def test_missing_copy_exits_with_error(monkeypatch, tmp_path, image_file, capsys):
    client = FakeClient()
    _use_client(monkeypatch, client)

    code = cli.main([
        "generate",
        "--product", image_file("product.png"),
        "--style", image_file("style.png"),
        "--logo", image_file("logo.png"),
        "--out", str(tmp_path),
    ])

    assert code == 1
    assert "Headline and description are required" in capsys.readouterr().err
    assert client.calls == []


def test_missing_api_key_exits_with_error(monkeypatch, capsys):
    monkeypatch.setattr("adstudio.clients.gemini.GEMINI_API_KEY", None)
    assert cli.main(["suggest", "headline", "Hello"]) == 1
    assert "GEMINI_API_KEY" in capsys.readouterr().err
