from typing import Type, Callable, List, Dict, Any
from mediaopt.domain.events import Event

class EventBus:
    """Synchronous publish/subscribe between the orchestrator and the UI."""
    
    def __init__(self):
        self._subscribers: Dict[Type[Event], List[Callable[[Any], None]]] = {}

    def subscribe(self, event_type: Type[Event], callback: Callable[[Any], None]):
        """Subscribes a callback to a specific event type."""
        self._subscribers.setdefault(event_type, []).append(callback)

    def publish(self, event: Event):
        """Publishes an event to subscribers of its type and of its base types."""
        for event_type in type(event).__mro__:
            for callback in self._subscribers.get(event_type, []):
                callback(event)
