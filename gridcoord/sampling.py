from typing import Callable, Optional, TypeVar

import numpy as np

from .coord import Coord


T = TypeVar('T')

DEFAULT_DTYPE = float


def sample(draw: Callable[[], T]) -> 'Coord[T]':
    """
    Build a Coord from two independent calls to draw, x first.
    """
    x = draw()
    y = draw()
    return Coord(x, y)


def uniform(rng: np.random.Generator, dtype=DEFAULT_DTYPE) -> Callable[[], T]:
    """
    Draw function using numpy's default uniform distribution for dtype.

    Integer types cover their whole representable range, floating point
    types (float32 and float64 only) cover [0, 1).
    """
    dtype = np.dtype(dtype)

    if np.issubdtype(dtype, np.integer):
        info = np.iinfo(dtype)
        return lambda: dtype.type(rng.integers(info.min, info.max, endpoint=True, dtype=dtype))

    if dtype in (np.dtype(np.float32), np.dtype(np.float64)):
        return lambda: dtype.type(rng.random(dtype=dtype))

    raise TypeError(f'No uniform distribution for dtype {dtype}')


def random_coord(rng: Optional[np.random.Generator] = None, dtype=DEFAULT_DTYPE) -> 'Coord[T]':
    if rng is None:
        rng = np.random.default_rng()
    return sample(uniform(rng, dtype))
