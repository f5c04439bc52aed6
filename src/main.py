import sys
from datetime import datetime
from pathlib import Path
from flask import Flask, render_template_string, request, jsonify, abort

# Project root holds the api package
app_root = Path(__file__).parent.parent
if str(app_root) not in sys.path:
    sys.path.insert(0, str(app_root))

from api.translations import TranslationCatalog, get_available_locales
from api.exceptions import TranslationError

from config.tools import TOOLS, load_app_config, is_tool_enabled, get_enabled_tools
from config.template import DASHBOARD_TEMPLATE
from blueprints.base_converter import base_converter_bp
from blueprints.password_strength import password_strength_bp

app = Flask(__name__)

app.config['TOOLS_CONFIG'] = load_app_config()

app.register_blueprint(base_converter_bp)
app.register_blueprint(password_strength_bp)


def get_request_catalog():
    """Catalog for the ?lang= query parameter, falling back to the configured default locale."""
    default_locale = app.config['TOOLS_CONFIG']['i18n'].get('default_locale', 'en')
    lang = request.args.get('lang') or default_locale
    try:
        return TranslationCatalog(lang)
    except TranslationError:
        abort(404)


@app.route('/')
def dashboard():
    catalog = get_request_catalog()
    tools = get_enabled_tools(app.config['TOOLS_CONFIG'], catalog)
    return render_template_string(DASHBOARD_TEMPLATE, tools=tools, lang=catalog.lang,
                                  locales=get_available_locales())


@app.route('/api/tools')
def api_tools():
    catalog = get_request_catalog()
    return jsonify({'tools': get_enabled_tools(app.config['TOOLS_CONFIG'], catalog)})


@app.route('/api/locales')
def api_locales():
    return jsonify({
        'locales': get_available_locales(),
        'default': app.config['TOOLS_CONFIG']['i18n'].get('default_locale', 'en')
    })


@app.route('/tools/<tool_name>')
def serve_tool(tool_name):
    """Describe a single tool and its API endpoint"""
    if not is_tool_enabled(tool_name, app.config['TOOLS_CONFIG']):
        abort(404)

    catalog = get_request_catalog()
    for tool in get_enabled_tools(app.config['TOOLS_CONFIG'], catalog):
        if tool['id'] == tool_name:
            return jsonify(tool)
    abort(404)


@app.route('/health')
def health():
    return jsonify({
        'status': 'healthy',
        'timestamp': datetime.now().isoformat(),
        'tools_count': len(TOOLS),
        'enabled_tools_count': len([t for t in TOOLS if is_tool_enabled(t['id'], app.config['TOOLS_CONFIG'])])
    })
