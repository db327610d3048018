from flask import Response

HTML_CONTENT_TYPE = 'text/html; charset=utf-8'
CSS_CONTENT_TYPE = 'text/css; charset=utf-8'


def send_html(body, status_code=200, content_type=HTML_CONTENT_TYPE):
    return Response(body, status=status_code, content_type=content_type)


def send_css(body, status_code=200):
    return Response(body, status=status_code, content_type=CSS_CONTENT_TYPE)


def send_not_found():
    return Response(status=404)


def read_asset(path):
    """Read a UTF-8 text asset from disk. Returns None if it can't be read."""
    try:
        with open(path, 'r', encoding='utf-8') as f:
            return f.read()
    except (OSError, UnicodeDecodeError):
        return None
