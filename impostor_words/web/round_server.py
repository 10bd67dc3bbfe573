"""
Web server exposing the admin and player round endpoints.
"""

from typing import Any, Dict, Optional
from flask import Flask, jsonify, request

from ..config.room_config import DEFAULT_BASE_URL
from ..core import (
    DEFAULT_CATALOG,
    InvalidRoundParamsError,
    MalformedPayloadError,
    NotRegisteredError,
    RoundParams,
    ThemeCatalog,
    assign,
    build_payload,
    build_share_url,
    check_roster,
    encode,
    resolve_link,
)


def _error(kind: str, message: str, status: int):
    return jsonify({"error": message, "kind": kind}), status


class RoundServer:
    """Stateless HTTP surface around the round core."""

    def __init__(self, port: int = 5000, host: str = '127.0.0.1',
                 base_url: str = DEFAULT_BASE_URL, catalog: Optional[ThemeCatalog] = None):
        self.port = port
        self.host = host
        self.base_url = base_url
        self.catalog = catalog or DEFAULT_CATALOG

        self.app = Flask(__name__)

        # Setup routes
        self._setup_routes()

    def _setup_routes(self):
        """Setup Flask routes."""
        @self.app.route('/api/themes')
        def list_themes():
            """List the theme pairs by index."""
            return jsonify([
                {"index": i, "main": pair.main.label, "impostor": pair.impostor.label}
                for i, pair in enumerate(self.catalog)
            ])

        @self.app.route('/api/rounds', methods=['POST'])
        def create_round():
            """Compute the assignment table and share link for a roster and round settings."""
            body = request.get_json(silent=True)
            if not isinstance(body, dict):
                return _error("invalid_round", "Request body must be a JSON object", 400)

            roster = body.get("roster", [])
            if not isinstance(roster, list) or not all(isinstance(n, str) for n in roster):
                return _error("invalid_round", "roster must be a list of names", 400)

            try:
                params = RoundParams(
                    seed=body.get("seed"),
                    round_number=body.get("round_number", 1),
                    impostor_count=body.get("impostor_count", 1),
                    word_refresh=body.get("word_refresh", 0),
                    pair_index=body.get("pair_index", 0),
                )
                assignments = assign(roster, params, self.catalog)
            except InvalidRoundParamsError as e:
                return _error("invalid_round", e.message, 400)

            return jsonify(self._round_response(roster, params, assignments, body.get("base_url")))

        @self.app.route('/api/resolve')
        def resolve_player():
            """Resolve a typed name against a payload or share link."""
            text = request.args.get('payload') or request.args.get('link') or ''
            name = request.args.get('name', '')

            try:
                result = resolve_link(text, name, self.catalog)
            except MalformedPayloadError as e:
                return _error("malformed_payload", e.message, 400)
            except NotRegisteredError as e:
                return _error("not_registered", e.message, 404)

            return jsonify({
                "name": result.name,
                "role": result.role.value,
                "word": result.word,
                "round_number": result.round_number,
                "roster_size": result.roster_size,
                "main_label": result.main_label,
            })

    def _round_response(self, roster, params: RoundParams, assignments, base_url: Optional[str]) -> Dict[str, Any]:
        payload = build_payload(roster, params)
        warning = check_roster(roster, params.impostor_count)
        pair = self.catalog[params.pair_index]
        return {
            "theme": pair.label,
            "assignments": [
                {"name": a.name, "role": a.role.value, "word": a.word}
                for a in assignments
            ],
            "warning": {"kind": warning.kind.value, "message": warning.message} if warning else None,
            "payload": encode(payload),
            "share_url": build_share_url(base_url or self.base_url, payload),
        }

    def start(self) -> None:
        """Start the web server."""
        print(f"\n{'='*60}")
        print(f"[SERVER] Starting round server on http://{self.host}:{self.port}")
        print(f"[SERVER] Player links point to: {self.base_url}")
        print(f"{'='*60}\n")
        self.app.run(host=self.host, port=self.port, debug=False, use_reloader=False)
