# Standard library imports
import logging
import threading
from typing import Optional

# Third-party imports
from flask import Flask, request, jsonify, abort

# Local/application imports
from restaurateur.core.config import HOST, PORT
from restaurateur.core.menu_handler import menu_from_dict, MalformedMenuError
from restaurateur.core.models import Customer, create_business
from restaurateur.core.order import assemble_order, MenuNotFoundError, SelectionError
from restaurateur.core.store import Store
from restaurateur.utils.log import configure_logging
from restaurateur.utils.parsing import parse_age, parse_payment_mode

configure_logging('restaurateur_api')
logger = logging.getLogger(__name__)
logger.info("=== Restaurateur API Starting ===")

def _not_found(what: str):
    return jsonify({'error': f"{what} not found"}), 404

def _json_object() -> dict:
    """Request body as a dict, 400 for anything else"""
    data = request.get_json(force=True)
    if data is None:
        return {}
    if not isinstance(data, dict):
        abort(400, description="Request body must be a JSON object")
    return data

def _parse_selections(raw) -> list:
    if raw is None:
        return []
    if not isinstance(raw, list):
        abort(400, description="Selections must be a list of [cuisine, food] pairs")
    selections = []
    for pair in raw:
        if not isinstance(pair, (list, tuple)) or len(pair) != 2:
            abort(400, description=f"Selection must be a [cuisine, food] pair, got {pair!r}")
        selections.append((str(pair[0]), str(pair[1])))
    return selections

def create_app(store: Optional[Store] = None) -> Flask:
    """Build the API around one store; every store access holds the lock"""
    app = Flask(__name__)
    store = store if store is not None else Store()
    lock = threading.Lock()
    app.config['STORE'] = store

    @app.errorhandler(Exception)
    def handle_error(e):
        code = getattr(e, 'code', None)
        if isinstance(code, int):
            return jsonify({'error': getattr(e, 'description', str(e))}), code
        logger.error(f"Error processing request: {str(e)}", exc_info=True)
        return jsonify({'error': "Sorry, something went wrong."}), 500

    @app.route('/health')
    def health_check():
        return 'OK', 200

    @app.route('/businesses', methods=['GET'])
    def list_businesses():
        with lock:
            return jsonify(store.list_businesses())

    @app.route('/businesses', methods=['POST'])
    def add_business():
        data = _json_object()
        name = str(data.get('name', '')).strip()
        if not name:
            return jsonify({'error': "Business name is required"}), 400
        business = create_business(name, str(data.get('address', '')), str(data.get('phone', '')))
        with lock:
            store.add_business(business)
            return jsonify(business.to_dict()), 201

    @app.route('/businesses/<name>', methods=['GET'])
    def get_business(name):
        with lock:
            business = store.get_business(name)
            if business is None:
                return _not_found("Business")
            return jsonify(business.to_dict())

    @app.route('/businesses/<name>', methods=['DELETE'])
    def remove_business(name):
        with lock:
            if not store.remove_business(name):
                return _not_found("Business")
        return '', 204

    @app.route('/businesses/<name>/menu', methods=['PUT'])
    def add_menu(name):
        try:
            builder = menu_from_dict(_json_object())
        except MalformedMenuError as e:
            return jsonify({'error': str(e)}), 400
        menu = builder.build()
        with lock:
            if not store.add_menu(name, menu):
                return _not_found("Business")
        return jsonify({'menu': menu.to_dict(), 'warnings': builder.warnings})

    @app.route('/businesses/<name>/orders', methods=['GET'])
    def show_orders(name):
        with lock:
            if store.get_business(name) is None:
                return _not_found("Business")
            orders = store.show_orders(name)
        return jsonify([order.to_dict() for order in orders])

    @app.route('/businesses/<name>/orders', methods=['POST'])
    def add_order(name):
        data = _json_object()
        warnings = []
        customer_data = data.get('customer') or {}
        if not isinstance(customer_data, dict):
            return jsonify({'error': "Customer must be a JSON object"}), 400
        age, warning = parse_age(customer_data.get('age', 0))
        if warning:
            warnings.append(warning)
        payment_mode, warning = parse_payment_mode(data.get('payment_mode', 'card'))
        if warning:
            warnings.append(warning)
        customer = Customer(
            name=str(customer_data.get('name', '')),
            age=age,
            address=str(customer_data.get('address', '')),
            phone=str(customer_data.get('phone', '')),
        )
        selections = _parse_selections(data.get('selections'))

        with lock:
            business = store.get_business(name)
            if business is None:
                return _not_found("Business")
            try:
                order = assemble_order(business.menu, selections, customer, payment_mode, data.get('date'))
            except MenuNotFoundError:
                return jsonify({'error': "Menu not found for business"}), 409
            except SelectionError as e:
                return jsonify({'error': str(e), 'cuisine': e.cuisine, 'food': e.food,
                                'suggestion': e.suggestion}), 422
            store.add_order(name, order)
        return jsonify({'order': order.to_dict(), 'warnings': warnings}), 201

    @app.route('/businesses/<name>/orders', methods=['DELETE'])
    def remove_orders(name):
        date = request.args.get('date')
        if date is None:
            return jsonify({'error': "Query parameter 'date' is required"}), 400
        with lock:
            if not store.remove_order(name, date):
                return _not_found("Business")
        return '', 204

    @app.route('/businesses/<name>/orders/<order_id>', methods=['DELETE'])
    def remove_order(name, order_id):
        with lock:
            if store.get_business(name) is None:
                return _not_found("Business")
            if not store.remove_order_by_id(name, order_id):
                return _not_found("Order")
        return '', 204

    return app

app = create_app()

if __name__ == '__main__':
    app.run(host=HOST, port=PORT, debug=True)
