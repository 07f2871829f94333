import random
import string

ROOM_CODE_ALPHABET = string.ascii_uppercase + string.digits
PLAYER_COLORS = (
    '#ef4444', '#3b82f6', '#22c55e', '#eab308',
    '#a855f7', '#ec4899', '#f97316', '#06b6d4',
)


def generate_room_code(length=6):
    """Generate a short, uppercase room code. Uniqueness is the caller's job."""
    return ''.join(random.choices(ROOM_CODE_ALPHABET, k=length))


def random_color():
    return random.choice(PLAYER_COLORS)


def roll_die(sides=6):
    return random.randint(1, sides)


def pick_index(count):
    return random.randrange(count)


def coordinate(low, high):
    return random.uniform(low, high)
