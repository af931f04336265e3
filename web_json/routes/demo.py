"""Demo routes using the JSON request helpers."""

from flask import Blueprint, request
import logging

from web_json.middleware.error_handler import handle_errors

logger = logging.getLogger('web_json')


def register_routes(app):
    """Register demo routes with the Flask app."""

    bp = Blueprint('demo', __name__)

    @bp.route('/echo', methods=['POST'])
    @handle_errors
    def echo():
        """Decode the JSON body and send it back."""
        data = request.decoded_json_content()
        status = request.args.get('status', type=int)
        logger.debug(f"Echoing payload of type {type(data).__name__}")
        return request.new_json_response(data, {'X-Echo': 'yes'}, status)

    @bp.route('/fail', methods=['GET', 'POST'])
    @handle_errors
    def fail():
        """Return a JSON error, structured when the body carries one."""
        status = request.args.get('status', type=int)
        if request.get_data():
            return request.new_json_error(request.decoded_json_content(), status)
        return request.new_json_error(request.args.get('message', 'crash'), status)

    app.register_blueprint(bp)
