"""Page stylesheet: embedded default or an external file."""

from pathlib import Path

from godown.core.logger import LogIcon, logger

DEFAULT_CSS = """\
/* Light theme */
:root {
    --bg-color: #ffffff;
    --text-color: #333333;
    --link-color: #0366d6;
    --border-color: #dddddd;
    --code-bg: #f5f5f5;
    --quote-border: #dddddd;
    --quote-text: #666666;
    --table-header-bg: #f5f5f5;
}

/* Dark theme */
@media (prefers-color-scheme: dark) {
    :root {
        --bg-color: #1e1e1e;
        --text-color: #e0e0e0;
        --link-color: #58a6ff;
        --border-color: #444444;
        --code-bg: #2d2d2d;
        --quote-border: #444444;
        --quote-text: #aaaaaa;
        --table-header-bg: #2d2d2d;
    }
}

body {
    max-width: 900px;
    margin: 40px auto;
    padding: 0 20px;
    font-family: -apple-system, BlinkMacSystemFont, "Segoe UI", Roboto, sans-serif;
    line-height: 1.6;
    color: var(--text-color);
    background-color: var(--bg-color);
    transition: background-color 0.3s ease, color 0.3s ease;
}

pre {
    background: var(--code-bg);
    padding: 15px;
    overflow-x: auto;
    border-radius: 5px;
    border: 1px solid var(--border-color);
}

code {
    background: var(--code-bg);
    padding: 2px 6px;
    border-radius: 3px;
    font-family: 'Courier New', monospace;
}

pre code {
    background: none;
    padding: 0;
}

a {
    color: var(--link-color);
    text-decoration: none;
}

a:hover {
    text-decoration: underline;
}

h1, h2, h3 {
    margin-top: 24px;
}

table {
    border-collapse: collapse;
    width: 100%;
}

th, td {
    border: 1px solid var(--border-color);
    padding: 8px;
    text-align: left;
}

th {
    background: var(--table-header-bg);
}

blockquote {
    border-left: 4px solid var(--quote-border);
    margin: 0;
    padding-left: 16px;
    color: var(--quote-text);
}

img {
    max-width: 100%;
    height: auto;
}
"""


def load_stylesheet(style_path: Path | None = None) -> str:
    """Return the configured stylesheet, or the embedded one if it is unset or unreadable."""
    if style_path is None:
        return DEFAULT_CSS
    try:
        return style_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as ex:
        logger.warning(
            "Custom stylesheet unreadable, using embedded",
            icon=LogIcon.WARNING,
            path=str(style_path),
            error=str(ex),
        )
        return DEFAULT_CSS
