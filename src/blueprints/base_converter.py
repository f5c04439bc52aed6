from flask import Blueprint, request, jsonify, current_app
from api.base_converter import convert_base, convert_to_common_bases, get_digit_alphabet
from api.exceptions import ValidationError

base_converter_bp = Blueprint('base_converter', __name__)


def _parse_base(data, field):
    """Read a radix field from the request body, accepting numeric strings."""
    raw = data.get(field)
    if raw is None or raw == '':
        raise ValidationError(f"{field} is required")
    if isinstance(raw, bool):
        raise ValidationError(f"{field} must be an integer")
    try:
        return int(raw)
    except (TypeError, ValueError):
        raise ValidationError(f"{field} must be an integer")


@base_converter_bp.route('/api/base-converter/convert', methods=['POST'])
def api_convert_base():
    """Convert a number from one base to another"""
    try:
        data = request.get_json(silent=True)
        if not isinstance(data, dict) or not data:
            return jsonify({'success': False, 'error': 'No data provided'}), 400

        value = data.get('value')
        value = '' if value is None else str(value).strip()
        if not value:
            return jsonify({'success': False, 'error': 'No input value provided'}), 400

        from_base = _parse_base(data, 'from_base')
        to_base = _parse_base(data, 'to_base')
        result = convert_base(value, from_base, to_base)

        return jsonify({
            'success': True,
            'result': result,
            'from_base': from_base,
            'to_base': to_base
        })

    except ValidationError as e:
        return jsonify({'success': False, 'error': str(e)}), 400
    except Exception as e:
        current_app.logger.exception("Base conversion failed")
        return jsonify({'success': False, 'error': f'Server error: {str(e)}'}), 500


@base_converter_bp.route('/api/base-converter/common', methods=['POST'])
def api_convert_common_bases():
    """Render a number in binary, octal, decimal, hexadecimal and base64"""
    try:
        data = request.get_json(silent=True)
        if not isinstance(data, dict) or not data:
            return jsonify({'success': False, 'error': 'No data provided'}), 400

        value = data.get('value')
        value = '' if value is None else str(value).strip()
        if not value:
            return jsonify({'success': False, 'error': 'No input value provided'}), 400

        from_base = _parse_base(data, 'from_base')
        results = convert_to_common_bases(value, from_base)

        to_base = data.get('to_base')
        if to_base not in (None, ''):
            custom_base = _parse_base(data, 'to_base')
            results['custom'] = convert_base(value, from_base, custom_base)

        return jsonify({'success': True, 'results': results, 'from_base': from_base})

    except ValidationError as e:
        return jsonify({'success': False, 'error': str(e)}), 400
    except Exception as e:
        current_app.logger.exception("Common base conversion failed")
        return jsonify({'success': False, 'error': f'Server error: {str(e)}'}), 500


@base_converter_bp.route('/api/base-converter/alphabet/<int:base>', methods=['GET'])
def api_digit_alphabet(base):
    """Return the digits that are valid in a base"""
    try:
        return jsonify({
            'success': True,
            'base': base,
            'alphabet': get_digit_alphabet(base),
            'case_sensitive': base > 36
        })
    except ValidationError as e:
        return jsonify({'success': False, 'error': str(e)}), 400
