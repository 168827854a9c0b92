import re

from conftest import build_export, build_playlist, make_item, make_playlist
from playlist_docs.renderers import COMMON_STYLES, HTMLRenderer


def _visible_text(html: str) -> str:
    body = html.split("<body>", 1)[1]
    return re.sub(r"<[^>]+>", "", body)


def test_render_playlist_escapes_user_text() -> None:
    playlist = build_playlist(
        name="<Mix> & \"Friends\"",
        modified="2023 <today>",
        items=[make_item("A & B", "It's", "<Album>", "spotify:track:1", "\"soon\"")],
    )
    output = HTMLRenderer().render_playlist(playlist)
    assert "<title>&lt;Mix&gt; &amp; &quot;Friends&quot;</title>" in output
    assert "<h1>&lt;Mix&gt; &amp; &quot;Friends&quot;</h1>" in output
    assert "<p><strong>Last Modified:</strong> 2023 &lt;today&gt;</p>" in output
    assert "<td><a href=\"spotify:track:1\">A &amp; B</a></td>" in output
    assert "<td>It&#39;s</td>" in output
    assert "<td>&lt;Album&gt;</td>" in output
    assert "<td>&quot;soon&quot;</td>" in output
    text = _visible_text(output)
    for raw in ("<Mix>", "<today>", "<Album>", "It's", "\"soon\""):
        assert raw not in text


def test_render_playlist_keeps_track_uri_verbatim() -> None:
    playlist = build_playlist(items=[make_item(uri="https://example.com/?a=1&b=2")])
    output = HTMLRenderer().render_playlist(playlist)
    assert "<a href=\"https://example.com/?a=1&b=2\">" in output


def test_render_playlist_structure() -> None:
    playlist = build_playlist(name="Chill", items=[make_item(), make_item()], followers=-1)
    output = HTMLRenderer().render_playlist(playlist)
    assert output.startswith("<!DOCTYPE html>\n<html lang=\"en\">\n<head>\n")
    assert output.endswith("</body>\n</html>")
    assert COMMON_STYLES in output
    assert output.count("<a href=\"index.html\" class=\"nav-link\">← Back to Index</a>") == 2
    assert "<a href=\"#\" class=\"back-to-top\">↑ Top</a>" in output
    assert "<p><strong>Followers:</strong> -1</p>" in output
    assert "<p><strong>Total Tracks:</strong> 2</p>" in output
    assert "<td class=\"track-number\">1</td>" in output
    assert "<td class=\"track-number\">2</td>" in output
    assert "<th>Added Date</th>" in output


def test_render_empty_playlist_omits_table() -> None:
    output = HTMLRenderer().render_playlist(build_playlist(name="Empty"))
    assert "<table>" not in output
    assert "<h2>Tracks</h2>" not in output
    assert "<div class=\"metadata\">" in output
    assert "<p><strong>Total Tracks:</strong> 0</p>" in output


def test_render_index_stats_and_cards() -> None:
    collection = build_export(
        make_playlist("Rock & Roll", items=[make_item(), make_item()], followers=7),
        make_playlist("Road/Trip", items=[make_item()], followers=5),
    )
    output = HTMLRenderer().render_index(
        collection.playlists, ["Rock & Roll.html", "Road-Trip.html"]
    )
    assert "<title>My Spotify Playlists</title>" in output
    assert (
        "<h3>Total Playlists</h3>\n                <p>2</p>" in output
    )
    assert "<h3>Total Tracks</h3>\n                <p>3</p>" in output
    assert "<h3><a href=\"Rock &amp; Roll.html\">Rock &amp; Roll</a></h3>" in output
    assert "<h3><a href=\"Road-Trip.html\">Road/Trip</a></h3>" in output
    assert "                    2 tracks<br>\n                    7 followers\n" in output
    assert output.index("Rock &amp; Roll") < output.index("Road/Trip")
    assert COMMON_STYLES in output


def test_render_index_escapes_title() -> None:
    output = HTMLRenderer("Tom's <Mixes>").render_index([], [])
    assert "<title>Tom&#39;s &lt;Mixes&gt;</title>" in output
    assert "<h1>Tom&#39;s &lt;Mixes&gt;</h1>" in output


def test_rendering_is_idempotent() -> None:
    collection = build_export(make_playlist("A", items=[make_item("x & y")]))
    renderer = HTMLRenderer()
    first = renderer.render_index(collection.playlists, ["A.html"])
    assert first == renderer.render_index(collection.playlists, ["A.html"])
    playlist = collection.playlists[0]
    assert renderer.render_playlist(playlist) == renderer.render_playlist(playlist)
