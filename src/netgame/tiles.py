# Tile and barrier byte layout.
#
# Tile byte:    bits 0..3 connection mask (R, U, L, D), 0x10 locked.
# Barrier byte: bits 0..3 blocked edges, bits 4..7 corner flags. The corner
# flag for direction d sits at d << 4 and names the corner between d and the
# direction one quarter-turn anticlockwise from it.

from .grid import ALL_DIRS, Direction, count_bits

LOCKED = 0x10

CORNER_SHIFT = 4
RU = Direction.R << CORNER_SHIFT   # 0x10
UL = Direction.U << CORNER_SHIFT   # 0x20
LD = Direction.L << CORNER_SHIFT   # 0x40
DR = Direction.D << CORNER_SHIFT   # 0x80
ALL_CORNERS = RU | UL | LD | DR


def mask_of(tile: int) -> int:
    return tile & ALL_DIRS


def is_locked(tile: int) -> bool:
    return bool(tile & LOCKED)


def is_endpoint(tile: int) -> bool:
    return count_bits(tile & ALL_DIRS) == 1


def is_valid_piece(tile: int) -> bool:
    # 1..3 arms; zero means a generation bug and four a full cross.
    return 1 <= count_bits(tile & ALL_DIRS) <= 3


def corner_bit(d: Direction) -> int:
    return d << CORNER_SHIFT


def edges_of(barrier: int) -> int:
    return barrier & ALL_DIRS


def corners_of(barrier: int) -> int:
    return (barrier & ALL_CORNERS) >> CORNER_SHIFT
