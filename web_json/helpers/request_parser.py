import json
import logging

from web_json.errors import MalformedJson

logger = logging.getLogger('web_json')


def _reject_constant(name):
    raise ValueError(f"Invalid literal {name}")


def decode_payload(request):
    """Extract and decode a JSON payload from the request.

    Werkzeug already turned the body bytes into text, so the text goes
    straight to the parser without another decoding pass. An empty body
    is not JSON and raises MalformedJson like any other syntax error.
    NaN and Infinity are not JSON either.
    """
    content = request.get_data(as_text=True)

    try:
        return json.loads(content, parse_constant=_reject_constant)
    except json.JSONDecodeError as e:
        logger.warning(f"Request body is not valid JSON: {e.msg} at line {e.lineno} column {e.colno}")
        raise MalformedJson(f"Malformed JSON payload: {e.msg}") from e
    except (ValueError, RecursionError) as e:
        # Non-standard constants, oversized integers, too deep nesting
        logger.warning(f"Request body is not valid JSON: {str(e)}")
        raise MalformedJson(f"Malformed JSON payload: {str(e)}") from e
