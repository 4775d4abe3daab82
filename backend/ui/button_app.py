# ui/button_app.py
import json
from html import escape

PAGE_TEMPLATE = """<!DOCTYPE html>
<html>
<head>
  <meta charset="utf-8">
  <title>{title}</title>
  <style>
    body {{ font-family: sans-serif; margin: 2em; }}
    .shell {{ display: inline-block; border: 1px solid #999; padding: 0; }}
    .shell-title {{ background: #3b6ea5; color: #fff; padding: 4px 8px; }}
    .shell-body {{ padding: 8px; }}
  </style>
</head>
<body>
  <div class="shell">
    <div class="shell-title">{title}</div>
    <div class="shell-body">
      <button id="{button_id}" type="button">{before}</button>
    </div>
  </div>
  <script>
    document.getElementById({button_id_js}).addEventListener('click', function () {{
      this.textContent = {after_js};
    }});
  </script>
</body>
</html>
"""


def _js_string(value: str) -> str:
    # json escapes quotes, newlines and U+2028/U+2029; "<" is hidden so "</script>" cannot end the block
    return json.dumps(value).replace('<', '\\u003c')


def render_button_page(title: str = 'App Title', button_id: str = 'myButton',
                       before: str = 'Before', after: str = 'After') -> str:
    """Single shell with one push button whose label changes from `before` to `after` on click."""
    return PAGE_TEMPLATE.format(
        title=escape(title),
        button_id=escape(button_id),
        before=escape(before),
        button_id_js=_js_string(button_id),
        after_js=_js_string(after),
    )
