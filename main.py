"""
main.py — Shortest-Path Visualizer Flask API
==============================================
JSON API in front of the step-trace engine.  Rendering lives in the
browser; this server only builds graphs, runs algorithms and hands out
recorded steps.

Routes:
  GET  /api/algorithms         – registry metadata
  GET  /api/graph              – current graph
  PUT  /api/graph              – replace the graph ({nodes, edges})
  POST /api/run                – run an algorithm, return the full result
  POST /api/step/next          – advance one step
  POST /api/step/prev          – rewind one step
  POST /api/step/goto          – jump to step N
  POST /api/play               – toggle auto-play
  POST /api/step/tick          – auto-advance one step when due
  PUT  /api/speed              – set replay speed (preset or seconds)
  GET  /api/state              – current replay state

State management:
  The Flask session holds the serialised graph, the last run's algorithm
  and source, the replay index, and playback state (playing flag, last
  tick time, speed).  Steps are NOT stored: a run is deterministic for a
  fixed graph, so step requests re-run it and index into the fresh trace.
"""

import secrets
import time

from flask import Flask, jsonify, request, session

from algorithms import get_algorithm, list_algorithms
from core.config import ENGINE_CONFIG
from core.errors import SpvizError, UnknownAlgorithmError, UnknownSourceError
from core.logging import get_logger, set_global_log_level
from engine import SPEED_PRESETS, Recorder, Stepper
from graph import Graph

logger = get_logger(__name__)

app = Flask(__name__)
app.secret_key = ENGINE_CONFIG.secret_key or secrets.token_hex(32)
set_global_log_level(ENGINE_CONFIG.log_level)


# ---------------------------------------------------------------------------
# Session State Helpers
# ---------------------------------------------------------------------------
def get_graph() -> Graph:
    """Deserialise graph from session, or start empty."""
    return Graph.from_dict(session.get("graph", {}))


def save_graph(graph: Graph):
    session["graph"] = graph.to_dict()


def get_state():
    """Return current replay state as a dict."""
    return {
        "selected_algo": session.get("selected_algo"),
        "source":        session.get("source"),
        "current_step":  session.get("current_step", 0),
        "total_steps":   session.get("total_steps", 0),
        "playing":       session.get("playing", False),
        "speed":         session.get("speed", _default_speed()),
    }


def set_state(**kwargs):
    for k, v in kwargs.items():
        session[k] = v


def _default_speed() -> float:
    return SPEED_PRESETS.get(ENGINE_CONFIG.default_speed, SPEED_PRESETS["medium"])


def _new_stepper() -> Stepper:
    stepper = Stepper(speed=ENGINE_CONFIG.default_speed)
    if "speed" in session:
        stepper.set_speed_value(session["speed"])
    return stepper


def _record(algo_key: str, graph: Graph, source) -> Recorder:
    info = get_algorithm(algo_key)
    if info is None:
        raise UnknownAlgorithmError(algo_key)
    if not info.is_all_pairs and not source:
        raise UnknownSourceError(f"{info.label} needs a source node")
    rec = Recorder()
    rec.start(algo_key, graph, source)
    rec.run_to_completion()
    return rec


def _replay() -> Stepper:
    """Rebuild the Stepper for the session's last run at its saved index."""
    state = get_state()
    if not state["selected_algo"]:
        raise SpvizError("Run an algorithm first")
    rec = _record(state["selected_algo"], get_graph(), state["source"])
    stepper = _new_stepper()
    stepper.start(rec.result.steps, state["current_step"])
    if state["playing"]:
        stepper.play(now=session.get("last_tick"))
    return stepper


def _step_payload(stepper: Stepper, **extra):
    set_state(
        current_step=stepper.current_idx,
        playing=stepper.is_playing,
        last_tick=stepper.last_tick,
    )
    step = stepper.current_step
    return jsonify({
        "step":         step.to_dict() if step else None,
        "current_step": stepper.current_idx,
        "total_steps":  stepper.total_steps,
        "finished":     stepper.is_finished,
        "playing":      stepper.is_playing,
        "speed":        stepper.speed,
        **extra,
    })


@app.errorhandler(SpvizError)
def handle_engine_error(exc: SpvizError):
    logger.warning("request rejected: %s", exc)
    return jsonify({"error": str(exc)}), 400


# ---------------------------------------------------------------------------
# API: Registry & Graph
# ---------------------------------------------------------------------------
@app.route("/api/algorithms", methods=["GET"])
def api_algorithms():
    return jsonify([a.to_dict() for a in list_algorithms()])


@app.route("/api/graph", methods=["GET"])
def api_graph_get():
    graph = get_graph()
    return jsonify({**graph.to_dict(), "has_negative_edges": graph.has_negative_edges()})


@app.route("/api/graph", methods=["PUT"])
def api_graph_put():
    data = request.get_json(silent=True) or {}
    try:
        g = Graph.from_dict(data)
    except (KeyError, TypeError, ValueError) as e:
        return jsonify({"error": f"Malformed graph: {e}"}), 400

    save_graph(g)
    set_state(selected_algo=None, source=None, current_step=0, total_steps=0, playing=False)
    return jsonify({**g.to_dict(), "has_negative_edges": g.has_negative_edges()})


# ---------------------------------------------------------------------------
# API: Run Algorithm
# ---------------------------------------------------------------------------
@app.route("/api/run", methods=["POST"])
def api_run():
    data     = request.get_json(silent=True) or {}
    algo_key = data.get("algorithm", "dijkstra")
    source   = data.get("source")

    if "nodes" in data or "edges" in data:
        try:
            save_graph(Graph.from_dict(data))
        except (KeyError, TypeError, ValueError) as e:
            return jsonify({"error": f"Malformed graph: {e}"}), 400

    rec = _record(algo_key, get_graph(), source)
    set_state(
        selected_algo=algo_key,
        source=source,
        current_step=0,
        total_steps=len(rec.result.steps),
        playing=False,
    )

    return jsonify({
        **rec.result.to_dict(),
        "metrics":      rec.export()["metrics"],
        "current_step": 0,
        "total_steps":  len(rec.result.steps),
    })


# ---------------------------------------------------------------------------
# API: Step Navigation
# ---------------------------------------------------------------------------
@app.route("/api/step/next", methods=["POST"])
def api_step_next():
    stepper = _replay()
    if not stepper.next_step():
        return jsonify({"error": "Already at last step"}), 400
    return _step_payload(stepper)


@app.route("/api/step/prev", methods=["POST"])
def api_step_prev():
    stepper = _replay()
    if not stepper.prev_step():
        return jsonify({"error": "Already at first step"}), 400
    return _step_payload(stepper)


@app.route("/api/step/goto", methods=["POST"])
def api_step_goto():
    stepper = _replay()
    idx = (request.get_json(silent=True) or {}).get("index", 0)
    if not isinstance(idx, int) or not stepper.goto_step(idx):
        return jsonify({"error": "Invalid step index"}), 400
    return _step_payload(stepper)


# ---------------------------------------------------------------------------
# API: Playback
# ---------------------------------------------------------------------------
@app.route("/api/play", methods=["POST"])
def api_play():
    """Toggle auto-play.  While playing, the client polls /api/step/tick."""
    stepper = _replay()
    stepper.toggle_play()
    return _step_payload(stepper)


@app.route("/api/step/tick", methods=["POST"])
def api_step_tick():
    stepper = _replay()
    advanced = stepper.tick(time.monotonic())
    return _step_payload(stepper, advanced=advanced)


@app.route("/api/speed", methods=["PUT"])
def api_speed():
    data = request.get_json(silent=True) or {}
    stepper = _new_stepper()

    seconds = data.get("seconds")
    preset  = data.get("preset")
    if isinstance(seconds, (int, float)) and not isinstance(seconds, bool):
        stepper.set_speed_value(seconds)
    elif isinstance(preset, str) and preset in SPEED_PRESETS:
        stepper.set_speed(preset)
    else:
        return jsonify({"error": f"Unknown speed: expected one of {sorted(SPEED_PRESETS)} or seconds"}), 400

    set_state(speed=stepper.speed)
    return jsonify({"speed": stepper.speed})


@app.route("/api/state", methods=["GET"])
def api_state():
    return jsonify(get_state())


# ---------------------------------------------------------------------------
# Run
# ---------------------------------------------------------------------------
if __name__ == "__main__":
    logger.info("Starting Flask server on http://localhost:5000")
    app.run(debug=True, host="0.0.0.0", port=5000)
