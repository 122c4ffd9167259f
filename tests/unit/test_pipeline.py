from asset_buster.pipeline import AssetQueue
from tests.conftest import MTIME


def test_finalize_src_goes_through_resolver(resolver):
    queue = AssetQueue(resolver)
    asset = queue.enqueue_script("app-js", "https://site/app.js?foo=bar")
    assert queue.finalize_src(asset) == "https://site/app.js?foo=bar&ver=42"


def test_first_enqueue_wins(resolver):
    queue = AssetQueue(resolver)
    first = queue.enqueue_script("app-js", "/first.js")
    second = queue.enqueue_script("app-js", "/second.js")
    assert second is first
    assert len(queue) == 1


def test_same_handle_for_style_and_script_is_allowed(resolver):
    queue = AssetQueue(resolver)
    queue.enqueue_style("app-js", "/app.css")
    queue.enqueue_script("app-js", "/app.js")
    assert len(queue) == 2


def test_resolved_orders_dependencies_first(resolver):
    queue = AssetQueue(resolver)
    queue.enqueue_script("main", "/main.js", deps=["vendor", "unknown"])
    queue.enqueue_script("vendor", "/vendor.js")
    queue.enqueue_style("theme-css", "/static/css/theme.css")

    handles = [(asset.kind, asset.handle) for asset, _ in queue.resolved()]
    assert handles == [("style", "theme-css"), ("script", "vendor"), ("script", "main")]


def test_dependency_cycle_does_not_loop(resolver):
    queue = AssetQueue(resolver)
    queue.enqueue_script("a", "/a.js", deps=["b"])
    queue.enqueue_script("b", "/b.js", deps=["a"])
    assert [asset.handle for asset, _ in queue.resolved("script")] == ["b", "a"]


def test_render_tags(resolver):
    queue = AssetQueue(resolver)
    queue.enqueue_script("app-js", "https://site/app.js?foo=bar")
    queue.enqueue_style("theme-css", "/static/css/theme.css?ver=6.4")
    queue.enqueue_style("plain", "/plain.css")

    html = queue.render_tags()
    assert html.splitlines() == [
        f'<link rel="stylesheet" id="theme-css-css" href="/static/css/theme.css?ver={MTIME}">',
        '<link rel="stylesheet" id="plain-css" href="/plain.css">',
        '<script id="app-js-js" src="https://site/app.js?foo=bar&amp;ver=42"></script>',
    ]


def test_render_tags_filters_by_kind(resolver):
    queue = AssetQueue(resolver)
    queue.enqueue_script("app-js", "/app.js")
    queue.enqueue_style("plain", "/plain.css")
    assert queue.render_tags("script") == '<script id="app-js-js" src="/app.js?ver=42"></script>'
    assert queue.render_tags("style") == '<link rel="stylesheet" id="plain-css" href="/plain.css">'
