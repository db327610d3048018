import logging
import os
import time

from flask import Flask, g, request

from templates import TEMPLATE_DIR, TemplateLibrary, load_templates
from utils import read_asset, send_css, send_html, send_not_found

# Directory for static files
PUBLIC_DIR = os.path.join(os.path.dirname(__file__), 'resources', 'public')
STYLESHEET_PATH = os.path.join(PUBLIC_DIR, 'system.css')

SERVER_NAME = 'site'

logger = logging.getLogger('site')


def _add_request_logging(app):
    @app.before_request
    def start_timer():
        g.request_started = time.perf_counter()

    @app.after_request
    def log_request(response):
        started = g.get('request_started')
        elapsed_ms = (time.perf_counter() - started) * 1000 if started else 0.0
        logger.info(
            "%s %s -> %d (%.2f ms)",
            request.method, request.path, response.status_code, elapsed_ms
        )
        response.headers['Server'] = SERVER_NAME
        return response


def build_router(templates_dir=TEMPLATE_DIR, stylesheet_path=STYLESHEET_PATH):
    """
    Build the Flask app serving the site. Templates are loaded once here
    and shared read-only by every handler.
    """
    library = TemplateLibrary(load_templates(templates_dir))

    app = Flask(__name__, static_folder=None)
    _add_request_logging(app)

    @app.get('/system.css')
    def stylesheet():
        css = read_asset(stylesheet_path)
        if css is None:
            logger.warning("Stylesheet unreadable: %s", stylesheet_path)
            return send_not_found()
        return send_css(css)

    @app.get('/')
    def home():
        home_data = {
            'greeting': '/dev/disk1s1',
            'message':  "Altheman's OS System 25.0",
            'features': [
                {'name': 'Python Powered',
                 'description': 'Built with Python and the Flask framework'},
                {'name': 'Mustache Templates',
                 'description': 'Dynamic HTML rendering with Mustache'},
            ]
        }
        return send_html(library.render_page('Home', 'home', home_data))

    @app.get('/about')
    def about():
        about_data = {
            'name': 'Altheman',
            'bio':  'A passionate developer working with Swift, Hummingbird, '
                    'and modern web technologies. Building fast and reliable '
                    'web applications with a focus on clean code and great '
                    'user experience.',
            'skills': [
                'Swift',
                'Hummingbird Framework',
                'Mustache Templating',
                'Web Development',
                'API Design',
                'Cloud Deployment',
            ]
        }
        return send_html(library.render_page('About', 'about', about_data))

    @app.get('/contact')
    def contact():
        contact_data = {
            'contacts': [
                {'type': 'Email',   'value': 'contact@altheman.dev'},
                {'type': 'GitHub',  'value': 'github.com/altheman'},
                {'type': 'Twitter', 'value': '@altheman'},
            ],
            'footer_message': 'I typically respond within 24 hours. '
                              'Looking forward to hearing from you!'
        }
        return send_html(library.render_page('Contact', 'contact', contact_data))

    return app
