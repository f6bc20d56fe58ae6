"""In-memory store backing the reference tracer server."""

from typing import Protocol

from ..models import Label, Request, Tracer, TracerEvent


class ITracerStore(Protocol):
    """Storage for tracers, their events and labels."""

    def add_tracers(self, request: Request) -> list[Tracer]:
        """Store the tracers of a request bundle, assigning ids."""
        ...

    def get_tracers(self) -> list[Tracer]:
        """Get all tracers in insertion order."""
        ...

    def get_tracer(self, tracer_id: int) -> Tracer | None:
        """Get a tracer by ID."""
        ...

    def add_event(self, tracer_id: int, event: TracerEvent) -> TracerEvent | None:
        """Attach an event to a tracer. Returns None if the tracer is unknown."""
        ...

    def get_events(self, tracer_id: int) -> list[TracerEvent] | None:
        """Get the events of a tracer. Returns None if the tracer is unknown."""
        ...

    def add_label(self, label: Label) -> Label:
        """Store a label, assigning an id."""
        ...

    def get_labels(self) -> list[Label]:
        """Get all labels in insertion order."""
        ...

    def get_label(self, label_id: int) -> Label | None:
        """Get a label by ID."""
        ...

    def clear(self) -> None:
        """Clear all data."""
        ...


class TracerStore:
    """Dict-backed store. Ids start at 1 and are never reused."""

    def __init__(self):
        self._tracers: dict[int, Tracer] = {}
        self._events: dict[int, list[TracerEvent]] = {}
        self._labels: dict[int, Label] = {}
        self._next_tracer_id = 1
        self._next_event_id = 1
        self._next_label_id = 1

    def add_tracers(self, request: Request) -> list[Tracer]:
        stored = []
        for tracer in request.tracers:
            tracer = tracer.model_copy(update={"id": self._next_tracer_id})
            self._tracers[tracer.id] = tracer
            self._events[tracer.id] = []
            self._next_tracer_id += 1
            stored.append(tracer)
        return stored

    def get_tracers(self) -> list[Tracer]:
        return list(self._tracers.values())

    def get_tracer(self, tracer_id: int) -> Tracer | None:
        return self._tracers.get(tracer_id)

    def add_event(self, tracer_id: int, event: TracerEvent) -> TracerEvent | None:
        tracer = self._tracers.get(tracer_id)
        if tracer is None:
            return None

        event = event.model_copy(
            update={"id": self._next_event_id, "tracer_id": tracer_id}
        )
        self._next_event_id += 1
        self._events[tracer_id].append(event)
        self._tracers[tracer_id] = tracer.model_copy(update={"has_tracer_events": True})
        return event

    def get_events(self, tracer_id: int) -> list[TracerEvent] | None:
        if tracer_id not in self._tracers:
            return None
        return list(self._events[tracer_id])

    def add_label(self, label: Label) -> Label:
        label = label.model_copy(update={"id": self._next_label_id})
        self._next_label_id += 1
        self._labels[label.id] = label
        return label

    def get_labels(self) -> list[Label]:
        return list(self._labels.values())

    def get_label(self, label_id: int) -> Label | None:
        return self._labels.get(label_id)

    def clear(self) -> None:
        self._tracers.clear()
        self._events.clear()
        self._labels.clear()
