from arcade import registry, socketio
from arcade.services.broadcast import broadcast_room


def start_goose_clock(app, room) -> None:
    """Run the Goose Hunt countdown for the room's current clock.

    - One worker per clock handle; a started handle is never started twice
    - No-ops in TESTING mode unless ENABLE_SCHEDULER_IN_TESTS is set
    - The worker exits once the handle is cancelled (winner, restart,
      room deleted, game changed)
    """
    with room.lock:
        clock = room.clock
        if clock is None or clock.started or clock.cancelled:
            return
        clock.started = True

    if app.config.get('TESTING') and not app.config.get('ENABLE_SCHEDULER_IN_TESTS'):
        return

    app.logger.info(f"[goose-clock-start] room={room.id}")
    socketio.start_background_task(_worker, app, room, clock)


def _worker(app, room, clock):
    interval = float(app.config.get('GOOSE_TICK_SEC', 1))
    while not clock.cancelled:
        socketio.sleep(interval)
        if registry.tick(room, clock):
            broadcast_room(room)
    app.logger.info(f"[goose-clock-stop] room={room.id}")
