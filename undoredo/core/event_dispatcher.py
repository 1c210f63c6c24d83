# file: undoredo/core/event_dispatcher.py

import logging
from collections import defaultdict
from typing import Callable, Any, Dict, List

class EventDispatcher:
    """
    A small synchronous event bus.

    Listeners are called on the publishing thread, in the order they
    subscribed, before publish() returns. A listener that raises is logged
    and skipped so the remaining listeners still receive the event.
    """

    def __init__(self):
        # A dictionary mapping event_type (str) to a list of listeners (Callable)
        self._listeners: Dict[str, List[Callable[..., Any]]] = defaultdict(list)
        self.logger = logging.getLogger(self.__class__.__name__)

    def subscribe(self, event_type: str, listener: Callable[..., Any]):
        """
        Subscribes a listener function to a specific event type.

        Args:
            event_type (str): The event to listen for (e.g., "COMMAND.EXECUTED").
            listener (Callable): The function to call when the event is published.
        """
        self._listeners[event_type].append(listener)

    def unsubscribe(self, event_type: str, listener: Callable[..., Any]):
        """Removes a specific listener from an event type."""
        if event_type in self._listeners:
            try:
                self._listeners[event_type].remove(listener)
            except ValueError:
                # Listener was not found, which is fine
                pass

    def has_listeners(self, event_type: str) -> bool:
        return bool(self._listeners.get(event_type))

    def publish(self, event_type: str, *args, raise_errors: bool = False, **kwargs):
        """
        Delivers an event to every listener of event_type.

        Args:
            event_type (str): The event being published.
            raise_errors (bool): If True, a failing listener stops delivery and
                its exception reaches the publisher instead of being logged.
            *args: Positional arguments to pass to the listeners.
            **kwargs: Keyword arguments to pass to the listeners.
        """
        if event_type not in self._listeners:
            return  # No one is listening, do nothing

        # Iterate over a copy so listeners may unsubscribe while being called
        for listener in list(self._listeners[event_type]):
            try:
                listener(*args, **kwargs)
            except Exception as e:
                if raise_errors:
                    raise
                self.logger.error(f"Error in listener for {event_type}: {e}", exc_info=True)

    def clear(self):
        """Removes every listener for every event type."""
        self._listeners.clear()
