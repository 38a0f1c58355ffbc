"""Map key names from keyboard events to move directions."""

from game2048.core.types import Direction

# ##>: Arrow keys (matplotlib and browser names), WASD and vim keys.
KEY_BINDINGS: dict[str, Direction] = {
    'left': Direction.LEFT,
    'arrowleft': Direction.LEFT,
    'a': Direction.LEFT,
    'h': Direction.LEFT,
    'up': Direction.UP,
    'arrowup': Direction.UP,
    'w': Direction.UP,
    'k': Direction.UP,
    'right': Direction.RIGHT,
    'arrowright': Direction.RIGHT,
    'd': Direction.RIGHT,
    'l': Direction.RIGHT,
    'down': Direction.DOWN,
    'arrowdown': Direction.DOWN,
    's': Direction.DOWN,
    'j': Direction.DOWN,
}


def key_to_direction(key: str | None) -> Direction | None:
    """
    Find the direction bound to a key.

    Parameters
    ----------
    key : str or None
        Key name, e.g. ``"left"``, ``"ArrowUp"``, ``"KeyW"`` or ``"j"``. Case-insensitive.

    Returns
    -------
    Direction or None
        The bound direction, None for an unbound key.
    """
    if not key:
        return None
    key = key.strip().lower()
    # ##: Browser key codes such as "KeyW".
    if key.startswith('key') and len(key) == 4:
        key = key[3:]
    return KEY_BINDINGS.get(key)
