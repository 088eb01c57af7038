"""HTML pages emitted by the wrapper.

Module content is embedded verbatim; only the sanitized identifier is
interpolated into markup, so it needs no further escaping.
"""

from __future__ import annotations

from .identifiers import ModulePaths

FRAME_SCRIPT_URL = "/static/js/custom.js"

_SHELL = """<!DOCTYPE html>
<html>
<head>
    <meta charset="utf-8">
    <title></title>
    <link rel="stylesheet" href="{assets}/css/normalize-1.1.3.css">
    <link rel="stylesheet" href="{assets}/css/style.css">
    <link rel="stylesheet" href="{assets}/css/ui-lightness/jquery-ui-1.10.4.custom.min.css">
    <script src="{assets}/js/jquery-1.10.2.min.js"></script>
    <script src="{assets}/js/jquery-ui-1.10.4.custom.min.js"></script>
    <script>
        $(function() {{
            $("#{search_id}").autocomplete({{ source: "{suggest_url}", }});
        }});
    </script>
    <base target="_blank" />
</head>
<body>
<div id="content">
{content}</div>
</body>
</html>
"""

_VIEWER = """<!DOCTYPE html>
<html>
<head>
    <meta charset="utf-8">
    <title>{identifier}</title>
    <link rel="stylesheet" href="{assets}/css/normalize-1.1.3.css">
    <link rel="stylesheet" href="{assets}/css/style.css">
    <script src="{frame_script}"></script>
</head>
<body>
<iframe id="modframe" src="{wrap_url}" style="width: 100%; border: 0;" onload="setIframeHeight(this)"></iframe>
</body>
</html>
"""


def render_shell(paths: ModulePaths, content: str, asset_prefix: str = "/sample_assets") -> str:
    return _SHELL.format(
        assets=asset_prefix.rstrip("/"),
        search_id=paths.search_id,
        suggest_url=paths.suggest_url,
        content=content,
    )


def render_viewer(paths: ModulePaths, wrap_url: str, asset_prefix: str = "/sample_assets") -> str:
    """Page hosting the wrapped module in an iframe sized to its content."""
    return _VIEWER.format(
        identifier=paths.identifier,
        assets=asset_prefix.rstrip("/"),
        frame_script=FRAME_SCRIPT_URL,
        wrap_url=wrap_url,
    )
