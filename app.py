from flask import Flask, request, jsonify
from werkzeug.exceptions import HTTPException
import logging

from config import get_config
from constants import STANDARD, METRIC, STANDARD_UNITS, METRIC_UNITS, TEMPERATURE_UNITS
from services import (
    convert_temperature,
    format_temperature,
    convert_measurement,
    convert_ingredient_measurement,
    convert_ingredient_list,
)
from utils.request_validator import (
    PayloadError, get_payload, require_number, require_unit, require_system,
    require_temperature_unit, require_ingredient, require_ingredient_list
)

logger = logging.getLogger(__name__)


def register_template_filters(app):
    """Jinja filters for rendering converted ingredient lines and temperatures."""
    app.jinja_env.filters['metric'] = lambda line: convert_ingredient_measurement(line, METRIC)
    app.jinja_env.filters['standard'] = lambda line: convert_ingredient_measurement(line, STANDARD)
    app.jinja_env.filters['temperature'] = (
        lambda value, unit=None: format_temperature(value, unit or app.config['DEFAULT_TEMPERATURE_UNIT'])
    )


def register_error_handlers(app):
    @app.errorhandler(PayloadError)
    def handle_payload_error(e):
        logger.warning("Rejected conversion request to %s: %s", request.path, e)
        return jsonify({'error': str(e)}), 400

    @app.errorhandler(HTTPException)
    def handle_http_error(e):
        if e.code == 404:
            return jsonify({'error': 'Not found'}), 404
        return jsonify({'error': e.description}), e.code


def register_routes(app):
    @app.route('/api/health')
    def health():
        return jsonify({'status': 'ok'})

    @app.route('/api/units')
    def list_units():
        return jsonify({
            STANDARD: sorted(STANDARD_UNITS),
            METRIC: sorted(METRIC_UNITS),
            'temperature': list(TEMPERATURE_UNITS),
        })

    @app.route('/api/convert/temperature', methods=['POST'])
    def api_convert_temperature():
        payload = get_payload(request)
        value = require_number(payload, 'value')
        from_unit = require_temperature_unit(
            payload, 'from_unit', default=app.config['DEFAULT_TEMPERATURE_UNIT']
        )
        to_unit = require_temperature_unit(payload, 'to_unit')

        return jsonify({
            'value': convert_temperature(value, from_unit, to_unit),
            'unit': to_unit,
            'label': format_temperature(value, from_unit),
        })

    @app.route('/api/convert/measurement', methods=['POST'])
    def api_convert_measurement():
        payload = get_payload(request)
        value = require_number(payload, 'value')
        unit = require_unit(payload)
        to_system = require_system(payload, app.config['DEFAULT_MEASUREMENT_SYSTEM'])

        result = convert_measurement(value, unit, to_system)
        return jsonify({
            'converted': result is not None,
            'result': result.to_dict() if result else None,
        })

    @app.route('/api/convert/ingredient', methods=['POST'])
    def api_convert_ingredient():
        payload = get_payload(request)
        ingredient = require_ingredient(payload)
        to_system = require_system(payload, app.config['DEFAULT_MEASUREMENT_SYSTEM'])

        converted = convert_ingredient_measurement(ingredient, to_system)
        return jsonify({
            'original': ingredient,
            'converted': converted,
            'changed': converted != ingredient,
        })

    @app.route('/api/convert/ingredients', methods=['POST'])
    def api_convert_ingredients():
        payload = get_payload(request)
        ingredients = require_ingredient_list(
            payload, max_items=app.config['MAX_BATCH_INGREDIENTS']
        )
        to_system = require_system(payload, app.config['DEFAULT_MEASUREMENT_SYSTEM'])

        converted = convert_ingredient_list(ingredients, to_system)
        logger.info("Converted %d ingredient lines to %s", len(converted), to_system)
        return jsonify({'ingredients': converted, 'to_system': to_system})


def create_app(config_class=None):
    """Create the converter app with the given (or environment) config."""
    app = Flask(__name__)
    app.config.from_object(config_class or get_config())

    logging.basicConfig(
        level=app.config['LOG_LEVEL'],
        format='%(asctime)s %(levelname)s %(name)s: %(message)s',
    )
    app.json.sort_keys = app.config['JSON_SORT_KEYS']

    register_template_filters(app)
    register_error_handlers(app)
    register_routes(app)
    return app


app = create_app()


if __name__ == '__main__':
    app.run(debug=app.config.get('DEBUG', False))
