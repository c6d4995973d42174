"""Flask application exposing matches and tournaments as a JSON API."""
from __future__ import annotations

import logging
import os
from typing import Any, Dict

from flask import Flask, jsonify, request

from .engine import Payoffs
from .tournament import list_available_strategies, parse_rounds, run_single_match, run_tournament

logger = logging.getLogger(__name__)


def _payoffs(payload: Dict[str, Any]) -> Payoffs:
    payoff_data = payload.get("payoffs") or {}
    return Payoffs(
        T=int(payoff_data.get("T", 10)),
        R=int(payoff_data.get("R", 7)),
        P=int(payoff_data.get("P", 1)),
        S=int(payoff_data.get("S", 0)),
    )


def _seed(payload: Dict[str, Any]) -> int | None:
    seed = payload.get("seed")
    return int(seed) if seed not in (None, "") else None


def create_app() -> Flask:
    app = Flask(__name__)

    @app.get("/api/strategies")
    def api_strategies():
        return jsonify({"strategies": list_available_strategies()})

    @app.post("/api/match")
    def api_match():
        payload: Dict[str, Any] = request.get_json(silent=True) or {}
        try:
            result = run_single_match(
                str(payload.get("a", "")),
                str(payload.get("b", "")),
                parse_rounds(payload.get("rounds", "")),
                seed=_seed(payload),
                payoffs=_payoffs(payload),
            )
        except (ValueError, TypeError) as exc:
            return jsonify({"error": str(exc)}), 400
        except Exception as exc:  # pragma: no cover - generic safeguard
            logger.exception("Match failed")
            return jsonify({"error": "Failed to run match", "details": str(exc)}), 500

        return jsonify(result.to_dict())

    @app.post("/api/run")
    def api_run():
        payload: Dict[str, Any] = request.get_json(silent=True) or {}
        try:
            result = run_tournament(
                rounds=parse_rounds(payload.get("rounds", 200)),
                seed=_seed(payload),
                payoffs=_payoffs(payload),
                only=payload.get("strategies") or None,
                exclude=payload.get("exclude") or None,
            )
        except (ValueError, TypeError) as exc:
            return jsonify({"error": str(exc)}), 400
        except Exception as exc:  # pragma: no cover - generic safeguard
            logger.exception("Tournament failed")
            return jsonify({"error": "Failed to run tournament", "details": str(exc)}), 500

        return jsonify(result)

    return app


if __name__ == "__main__":
    create_app().run(host="0.0.0.0", port=int(os.environ.get("PORT", 5000)))
