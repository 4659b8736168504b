import httpx

from themestars.manifest import fetch_manifest, read_manifest

MANIFEST_URL = "https://themes.example.org/themes.txt"


def test_fetch_manifest_splits_lines(json_transport):
    body = "https://github.com/foo/bar\r\n\ngitlab.com/baz/qux  \n"
    transport = json_transport(
        {"themes.example.org/themes.txt": httpx.Response(200, text=body)}
    )
    with httpx.Client(transport=transport) as client:
        lines = fetch_manifest(client, MANIFEST_URL)

    assert lines == ["https://github.com/foo/bar", "", "gitlab.com/baz/qux"]


def test_fetch_manifest_failure_yields_no_lines(log_records, json_transport):
    with httpx.Client(transport=json_transport({})) as client:
        lines = fetch_manifest(client, MANIFEST_URL)

    assert lines == []
    assert any(level == "ERROR" for level, _ in log_records)


def test_read_manifest(tmp_path):
    path = tmp_path / "themes.txt"
    path.write_text("github.com/a/b\ngithub.com/c/d\n", encoding="utf-8")

    assert read_manifest(path) == ["github.com/a/b", "github.com/c/d"]
