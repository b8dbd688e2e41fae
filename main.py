"""
main.py — Graph Algorithm Visualizer JSON API
==============================================
A thin, read-only Flask layer over the trace engine.  The browser UI
fetches a whole trace once and replays it locally with its own
playback controller; the server holds no playback state.

Routes:
  GET  /api/algorithms             – registry catalog (pseudocode, concept, …)
  GET  /api/graph/<algo>           – the graph an algorithm runs on
  GET  /api/trace/<algo>           – full step trace + run summary
  GET  /api/compare?left=&right=   – side-by-side run metrics
  GET  /api/config                 – playback defaults & speed presets

Errors come back as {"error": "..."}: 404 for unknown algorithms,
400 for any other ValueError (e.g. a graph that can't drive the
requested algorithm).
"""

import logging

from flask import Flask, jsonify, request

import config
from logging_setup import init_logging
from graph import GraphConfigError
from algorithms import get_algorithm, list_algorithms
from engine import compare, generate, summarize

logger = logging.getLogger(__name__)

app = Flask(__name__)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------
def _lookup(algo_key: str):
    info = get_algorithm(algo_key)
    if info is None:
        return None, (jsonify({"error": f"Unknown algorithm: {algo_key}"}), 404)
    return info, None


@app.errorhandler(ValueError)
def handle_value_error(exc: ValueError):
    if isinstance(exc, GraphConfigError):
        logger.warning("Graph configuration error: %s", exc)
    else:
        logger.warning("Bad request: %s", exc)
    return jsonify({"error": str(exc)}), 400


# ---------------------------------------------------------------------------
# API: Catalog
# ---------------------------------------------------------------------------
@app.route("/api/algorithms")
def api_algorithms():
    return jsonify({"algorithms": [info.to_dict() for info in list_algorithms()]})


@app.route("/api/config")
def api_config():
    return jsonify({
        "default_algorithm":   config.DEFAULT_ALGORITHM,
        "default_interval_ms": config.DEFAULT_INTERVAL_MS,
        "min_interval_ms":     config.MIN_INTERVAL_MS,
        "max_interval_ms":     config.MAX_INTERVAL_MS,
        "speed_presets":       dict(config.SPEED_PRESETS),
    })


@app.route("/api/graph/<algo_key>")
def api_graph(algo_key: str):
    info, error = _lookup(algo_key)
    if error:
        return error
    return jsonify(info.default_graph().to_dict())


# ---------------------------------------------------------------------------
# API: Traces
# ---------------------------------------------------------------------------
@app.route("/api/trace/<algo_key>")
def api_trace(algo_key: str):
    info, error = _lookup(algo_key)
    if error:
        return error

    graph = info.default_graph()
    trace = generate(graph, info.key)
    payload = trace.to_dict()
    payload["pseudocode_lines"] = [info.line_for(step) for step in trace]
    payload["summary"] = summarize(trace, graph).to_dict()
    return jsonify(payload)


@app.route("/api/compare")
def api_compare():
    left_key  = request.args.get("left", "dijkstra")
    right_key = request.args.get("right", "astar")

    left, error = _lookup(left_key)
    if error:
        return error
    right, error = _lookup(right_key)
    if error:
        return error
    if left.weighted != right.weighted:
        return jsonify({"error": "Both algorithms must run on the same graph"}), 400

    graph = left.default_graph()
    result = compare(
        summarize(generate(graph, left.key), graph),
        summarize(generate(graph, right.key), graph),
    )
    return jsonify(result.to_dict())


if __name__ == "__main__":
    init_logging()
    app.run(host=config.HOST, port=config.PORT)
