import math
from flask import Blueprint, request, jsonify, current_app
from api.password_strength import estimate_password_strength, get_human_friendly_duration
from api.translations import TranslationCatalog
from api.exceptions import TranslationError

password_strength_bp = Blueprint('password_strength', __name__)


def _get_guesses_per_second(data):
    """Guess rate from the request, else the configured default."""
    default = current_app.config['TOOLS_CONFIG']['password_strength'].get('guesses_per_second', 1e9)
    raw = data.get('guesses_per_second')
    if raw in (None, ''):
        return float(default)
    guesses_per_second = float(raw)
    if not math.isfinite(guesses_per_second) or guesses_per_second <= 0:
        raise ValueError('must be a positive number')
    return guesses_per_second


def _get_catalog(data):
    """Translation catalog for the requested language, else the configured default."""
    lang = data.get('lang') or current_app.config['TOOLS_CONFIG']['i18n'].get('default_locale', 'en')
    return TranslationCatalog(lang)


@password_strength_bp.route('/api/password-strength/analyze', methods=['POST'])
def api_analyze_password():
    """Estimate entropy and brute-force crack time for a password"""
    try:
        data = request.get_json(silent=True)
        if not isinstance(data, dict) or 'password' not in data:
            return jsonify({'success': False, 'error': 'No password provided'}), 400

        password = data.get('password')
        if not isinstance(password, str):
            return jsonify({'success': False, 'error': 'Password must be a string'}), 400

        try:
            guesses_per_second = _get_guesses_per_second(data)
        except (TypeError, ValueError) as e:
            return jsonify({'success': False, 'error': f'Invalid guesses_per_second: {str(e)}'}), 400

        catalog = _get_catalog(data)
        estimation = estimate_password_strength(password, guesses_per_second=guesses_per_second)

        result = estimation.to_dict(catalog)
        result['success'] = True
        result['lang'] = catalog.lang
        return jsonify(result)

    except TranslationError as e:
        return jsonify({'success': False, 'error': str(e)}), 400
    except Exception as e:
        current_app.logger.exception("Password analysis failed")
        return jsonify({'success': False, 'error': f'Server error: {str(e)}'}), 500


@password_strength_bp.route('/api/password-strength/duration', methods=['POST'])
def api_format_duration():
    """Format a number of seconds as human-friendly text"""
    try:
        data = request.get_json(silent=True)
        if not isinstance(data, dict) or 'seconds' not in data:
            return jsonify({'success': False, 'error': 'No seconds provided'}), 400

        try:
            seconds = float(data.get('seconds'))
            if math.isnan(seconds):
                raise ValueError(seconds)
        except (TypeError, ValueError):
            return jsonify({'success': False, 'error': 'seconds must be a number'}), 400

        catalog = _get_catalog(data)
        return jsonify({
            'success': True,
            'seconds': seconds if math.isfinite(seconds) else None,
            'duration': get_human_friendly_duration(seconds, catalog),
            'lang': catalog.lang
        })

    except TranslationError as e:
        return jsonify({'success': False, 'error': str(e)}), 400
    except Exception as e:
        current_app.logger.exception("Duration formatting failed")
        return jsonify({'success': False, 'error': f'Server error: {str(e)}'}), 500
