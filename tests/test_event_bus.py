from konane.events.bus import EventBus


def test_event_bus_emit_subscribe():
    bus = EventBus()
    received = {}

    def handler(sender, **kwargs):
        received.update(kwargs)

    bus.subscribe("test", handler)
    bus.emit("test", value=42, msg="hello")

    assert received["value"] == 42
    assert received["msg"] == "hello"


def test_emit_without_subscribers_is_silent():
    bus = EventBus()
    bus.emit("nobody_listens", value=1)


def test_sender_is_the_bus_and_handlers_run_in_subscription_order():
    bus = EventBus()
    calls = []
    bus.subscribe("ordered", lambda sender, **kw: calls.append(("first", sender)))
    bus.subscribe("ordered", lambda sender, **kw: calls.append(("second", sender)))
    bus.emit("ordered")
    assert calls == [("first", bus), ("second", bus)]


def test_bound_method_handlers_stay_alive():
    bus = EventBus()
    hits = []

    class Listener:
        def __init__(self, event_bus):
            event_bus.subscribe("ping", self.on_ping)

        def on_ping(self, sender, **payload):
            hits.append(payload["n"])

    Listener(bus)
    bus.emit("ping", n=3)
    assert hits == [3]
