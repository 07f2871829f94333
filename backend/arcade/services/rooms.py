"""Session registry: the process-wide map of room code -> Room.

The map itself is guarded by one short-lived lock that is only held while
inserting, removing or looking up entries. Everything that reads or writes a
room's state holds that room's own lock, so rooms never wait on each other.
Lock order is always room lock first, registry lock second.
"""
import logging
import threading
from typing import Dict, List, Optional, Set

from arcade.errors import GameInProgress, RoomFull, RoomNotFound
from arcade.models import GAME_TYPES, GOOSE, LOBBY, PLAYING, SNAKE, TICTACTOE, Countdown, Player, Room
from arcade.services.games import apply_action, goose, init_state, randomizer

logger = logging.getLogger(__name__)


def normalize_code(room_id) -> str:
    return str(room_id or '').strip().upper()


class RoomRegistry:

    def __init__(self, max_players=8, code_length=6, snake_min_players=2):
        self.max_players = max_players
        self.code_length = code_length
        self.snake_min_players = snake_min_players
        self._rooms: Dict[str, Room] = {}
        self._memberships: Dict[str, Set[str]] = {}
        self._lock = threading.Lock()

    def init_app(self, app):
        self.max_players = int(app.config.get('MAX_ROOM_PLAYERS', self.max_players))
        self.code_length = int(app.config.get('ROOM_CODE_LENGTH', self.code_length))
        self.snake_min_players = int(app.config.get('SNAKE_MIN_PLAYERS', self.snake_min_players))
        app.extensions['room_registry'] = self

    # ---- lookups ----

    def get(self, room_id) -> Optional[Room]:
        with self._lock:
            return self._rooms.get(normalize_code(room_id))

    def rooms(self) -> List[Room]:
        with self._lock:
            return list(self._rooms.values())

    def _is_live(self, room: Room) -> bool:
        with self._lock:
            return self._rooms.get(room.id) is room

    def clear(self) -> None:
        """Drop every room and stop their clocks."""
        with self._lock:
            rooms = list(self._rooms.values())
            self._rooms.clear()
            self._memberships.clear()
        for room in rooms:
            with room.lock:
                room.stop_clock()

    # ---- lifecycle ----

    def create_room(self, player_id, username) -> Room:
        host = Player(id=player_id, username=username, color=randomizer.random_color(), is_host=True)
        with self._lock:
            code = randomizer.generate_room_code(self.code_length)
            while code in self._rooms:
                logger.warning(f"Room code collision detected, regenerating: {code}")
                code = randomizer.generate_room_code(self.code_length)
            room = Room(id=code, players=[host])
            room.game_state = init_state(TICTACTOE, room.players)
            self._rooms[code] = room
            self._memberships.setdefault(player_id, set()).add(code)
        logger.info(f"Created room {code} for {username!r}")
        return room

    def join_room(self, room_id, player_id, username) -> Room:
        room = self.get(room_id)
        if room is None:
            raise RoomNotFound(room_id)
        with room.lock:
            # The room may have emptied out between lookup and lock
            if not self._is_live(room):
                raise RoomNotFound(room_id)
            if room.find_player(player_id) is not None:
                return room
            if room.status != LOBBY:
                raise GameInProgress(room.id)
            if len(room.players) >= self.max_players:
                raise RoomFull(room.id)
            room.players.append(Player(id=player_id, username=username, color=randomizer.random_color()))
            with self._lock:
                self._memberships.setdefault(player_id, set()).add(room.id)
        logger.info(f"{username!r} joined room {room.id} ({len(room.players)} players)")
        return room

    def leave(self, player_id, room_id=None) -> List[Room]:
        """Remove a player from one room, or from every room on disconnect.

        Returns the rooms that still exist and changed, for broadcasting.
        """
        with self._lock:
            codes = self._memberships.get(player_id, set())
            if room_id is None:
                targets = set(codes)
            else:
                targets = codes & {normalize_code(room_id)}
            codes -= targets
            if not codes:
                self._memberships.pop(player_id, None)

        changed = []
        for code in sorted(targets):
            room = self.get(code)
            if room is None:
                continue
            with room.lock:
                player = room.find_player(player_id)
                if player is None:
                    continue
                room.players.remove(player)
                if not room.players:
                    room.stop_clock()
                    with self._lock:
                        if self._rooms.get(code) is room:
                            del self._rooms[code]
                    logger.info(f"Room {code} is empty, deleted")
                    continue
                if not any(p.is_host for p in room.players):
                    room.players[0].is_host = True
                    logger.info(f"Host of room {code} passed to {room.players[0].username!r}")
                # Goose Hunt keeps running with a thinning roster
                if room.status == PLAYING and len(room.players) < 2 and room.game_type != GOOSE:
                    room.status = LOBBY
                    room.stop_clock()
            changed.append(room)
        return changed

    # ---- host controls ----

    def select_game(self, room_id, player_id, game_type) -> Optional[Room]:
        room = self.get(room_id)
        if room is None:
            return None
        with room.lock:
            if game_type not in GAME_TYPES:
                return None
            if not room.is_host(player_id) or room.status != LOBBY:
                return None
            room.stop_clock()
            room.game_type = game_type
            room.game_state = init_state(game_type, room.players)
        logger.info(f"Room {room.id} selected {game_type}")
        return room

    def start_game(self, room_id, player_id) -> Optional[Room]:
        """Start (or restart) the selected game. A fresh Goose Hunt gets a new clock."""
        room = self.get(room_id)
        if room is None:
            return None
        with room.lock:
            if not room.is_host(player_id):
                return None
            if room.game_type == SNAKE and len(room.players) < self.snake_min_players:
                return None
            room.game_state = init_state(room.game_type, room.players)
            room.stop_clock()
            room.status = PLAYING
            if room.game_type == GOOSE:
                room.clock = Countdown()
        logger.info(f"Room {room.id} started {room.game_type} with {len(room.players)} players")
        return room

    # ---- game intents ----

    def game_action(self, room_id, player_id, action, payload) -> Optional[Room]:
        """Validate and apply one intent. Returns None when nothing changed."""
        room = self.get(room_id)
        if room is None:
            return None
        with room.lock:
            if room.find_player(player_id) is None:
                return None
            if action == 'reset':
                room.game_state = init_state(room.game_type, room.players)
                if room.game_type == GOOSE and room.status == PLAYING:
                    room.stop_clock()
                    room.clock = Countdown()
                return room
            if room.status != PLAYING:
                return None
            next_state = apply_action(room.game_type, room.game_state, player_id, action, payload)
            if next_state is None:
                logger.debug(f"Ignored {action!r} from {player_id} in room {room.id}")
                return None
            room.game_state = next_state
            if room.game_type == GOOSE and next_state.winner:
                room.stop_clock()
        return room

    def tick(self, room: Room, clock: Countdown) -> bool:
        """One countdown step for ``clock``. Returns whether the room changed."""
        with room.lock:
            if (clock.cancelled or room.clock is not clock or not self._is_live(room)
                    or room.status != PLAYING or room.game_type != GOOSE
                    or room.game_state.winner):
                clock.cancel()
                if room.clock is clock:
                    room.clock = None
                return False
            changed = goose.tick(room.game_state)
            if not changed or room.game_state.winner:
                room.stop_clock()
            return changed
