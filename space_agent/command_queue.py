"""Thread-safe intent queue used to bridge the API thread and the event loop."""

from queue import Queue, Empty
from typing import Any, Dict, Optional, List
import threading


class _CommandQueue:
	_instance = None
	_lock = threading.Lock()

	def __new__(cls):
		if cls._instance is None:
			with cls._lock:
				if cls._instance is None:
					cls._instance = super().__new__(cls)
					cls._instance._queue = Queue()
		return cls._instance

	def put_command(self, intent: Dict[str, Any]) -> bool:
		if not isinstance(intent, dict):
			return False
		intent_type = str(intent.get("type", "")).strip()
		if not intent_type:
			return False
		self._queue.put({**intent, "type": intent_type})
		return True

	def try_get_command(self) -> Optional[Dict[str, Any]]:
		try:
			return self._queue.get_nowait()
		except Empty:
			return None

	def drain_commands(self, max_items: int = 100) -> List[Dict[str, Any]]:
		collected: List[Dict[str, Any]] = []
		for _ in range(max_items):
			try:
				collected.append(self._queue.get_nowait())
			except Empty:
				break
		return collected


_shared_queue = _CommandQueue()


def put_command(intent: Dict[str, Any]) -> bool:
	return _shared_queue.put_command(intent)


def try_get_command() -> Optional[Dict[str, Any]]:
	return _shared_queue.try_get_command()


def drain_commands(max_items: int = 100) -> List[Dict[str, Any]]:
	return _shared_queue.drain_commands(max_items=max_items)
