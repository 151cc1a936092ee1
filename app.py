from flask import Flask, request, jsonify
from loguru import logger

from curl_parser import parse, request_kwargs
from curl_parser.config import Settings, get_settings
from curl_parser.errors import ParseError
from curl_parser.logging_utils import configure_logging
from curl_parser.view import JsonField, Part, build_json_value, error_payload


def _curl_field(payload):
    curl_cmd = payload.get("curl", "")
    if not isinstance(curl_cmd, str) or not curl_cmd.strip():
        return None
    return curl_cmd


def create_app(settings: Settings = None) -> Flask:
    settings = settings or get_settings()
    configure_logging(settings.log_level)

    app = Flask(__name__)
    app.json.sort_keys = False

    @app.post("/parse")
    def parse_endpoint():
        payload = request.get_json(force=True, silent=True) or {}
        curl_cmd = _curl_field(payload)
        if curl_cmd is None:
            return jsonify(error_payload("bad_request", "Field 'curl' is required")), 400

        try:
            part = Part(payload["part"]) if payload.get("part") else None
            keys = [JsonField(key) for key in payload.get("keys") or []]
        except ValueError as e:
            return jsonify(error_payload("bad_request", str(e))), 400

        try:
            parsed = parse(curl_cmd)
        except ParseError as e:
            logger.info("parse rejected code={} error={}", e.code, e)
            return jsonify(error_payload(e.code, str(e))), 400

        return jsonify(build_json_value(parsed, part, keys)), 200

    @app.post("/convert")
    def convert_endpoint():
        # the request is described, never sent
        payload = request.get_json(force=True, silent=True) or {}
        curl_cmd = _curl_field(payload)
        if curl_cmd is None:
            return jsonify(error_payload("bad_request", "Field 'curl' is required")), 400

        try:
            spec = request_kwargs(parse(curl_cmd))
        except ParseError as e:
            logger.info("convert rejected code={} error={}", e.code, e)
            return jsonify(error_payload(e.code, str(e))), 400
        except ValueError as e:
            return jsonify(error_payload("bad_request", str(e))), 400

        if spec["auth"] is not None:
            spec["auth"] = list(spec["auth"])
        return jsonify(spec), 200

    return app


if __name__ == "__main__":
    settings = get_settings()
    create_app(settings).run(host=settings.host, port=settings.port, debug=settings.debug)
