"""Lightweight local HTTP API for the launcher UI: /state, /submit and /get-results.

The Flask thread never touches the store. It serves the last snapshot the
event loop published and hands submitted intents to the command queue.
"""

from typing import Optional, Any, Dict, List
import threading
from flask import Flask, request, jsonify

from .command_queue import put_command


_app_instance: Optional[Flask] = None
_server_thread: Optional[threading.Thread] = None

# Thread-safe published store state
_state_data: Dict[str, Any] = {}
_state_version = 0
_state_lock = threading.Lock()

# Thread-safe results store
_results_data: Optional[Dict[str, Any]] = None
_results_consumed = False
_results_lock = threading.Lock()


def _create_app() -> Flask:
	app = Flask("space_agent_api")

	@app.get("/health")
	def health():
		return jsonify({"status": "ok"})

	# Basic CORS for a local file:// renderer
	@app.after_request
	def add_cors_headers(response):
		response.headers["Access-Control-Allow-Origin"] = "*"
		response.headers["Access-Control-Allow-Methods"] = "GET, POST, OPTIONS"
		response.headers["Access-Control-Allow-Headers"] = "Content-Type"
		return response

	@app.route("/state", methods=["GET", "OPTIONS"])
	def state():
		"""Return the last published store state."""
		if request.method == "OPTIONS":
			return ("", 204)
		with _state_lock:
			return jsonify({"version": _state_version, "state": _state_data})

	@app.route("/submit", methods=["POST", "OPTIONS"])
	def submit():
		if request.method == "OPTIONS":
			return ("", 204)
		data = request.get_json(silent=True) or {}
		if not isinstance(data, dict) or not str(data.get('type', '')).strip():
			return jsonify({'status': 'error', 'message': 'missing intent type'}), 400
		# Clear previous results when submitting a new intent
		global _results_data, _results_consumed
		with _results_lock:
			_results_data = None
			_results_consumed = False
		put_command(data)
		return jsonify({'status': 'ok'})

	@app.route("/get-results", methods=["GET", "OPTIONS"])
	def get_results():
		"""Get results if available (for list commands and failures)."""
		if request.method == "OPTIONS":
			return ("", 204)
		global _results_data, _results_consumed
		with _results_lock:
			if _results_data and not _results_consumed:
				# Mark as consumed after first read
				_results_consumed = True
				return jsonify({"results": _results_data})
			return jsonify({"results": None})

	return app


def start_api_server(port: int = 8771) -> None:
	"""
	Start the local API server in a background thread.
	Only binds to 127.0.0.1.
	"""
	global _app_instance, _server_thread
	if _server_thread and _server_thread.is_alive():
		return
	_app_instance = _create_app()

	def run():
		_app_instance.run(host="127.0.0.1", port=port, debug=False, use_reloader=False)

	_server_thread = threading.Thread(target=run, daemon=True)
	_server_thread.start()


def publish_state(state: Dict[str, Any]) -> None:
	"""
	Publish a store snapshot for the UI (called from the event loop).

	Args:
		state: JSON-ready store snapshot
	"""
	global _state_data, _state_version
	with _state_lock:
		_state_data = state
		_state_version += 1


def send_results(title: str, items: List[str]) -> None:
	"""
	Send results to the UI (for list commands).

	Args:
		title: Title for the results
		items: List of result items to display
	"""
	global _results_data, _results_consumed
	with _results_lock:
		_results_data = {
			"title": title,
			"items": items
		}
		_results_consumed = False


def send_error(message: str) -> None:
	"""
	Send error message to the UI.

	Args:
		message: Error message to display
	"""
	global _results_data, _results_consumed
	with _results_lock:
		_results_data = {
			"error": message
		}
		_results_consumed = False
