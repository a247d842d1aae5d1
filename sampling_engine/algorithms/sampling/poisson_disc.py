# ==============================================================================
# file: sampling_engine/algorithms/sampling/poisson_disc.py
# Bridson's Poisson-disc sampling over [0, width) x [0, height).
# https://www.cs.ubc.ca/~rbridson/docs/bridson-siggraph07-poissondisk.pdf
# ==============================================================================
from __future__ import annotations
import logging
import math
import numbers
import time
from enum import Enum
from typing import List

from .candidates import generate_candidate, in_region
from .grid import SpatialGrid
from .validator import Verdict, check_candidate
from ...core.constants import DEFAULT_K, DEFAULT_MAX_GRID_CELLS
from ...core.errors import ParameterError, SamplerError
from ...core.types import SampleResult, SampleStats
from ...numerics.rng import UniformSource, time_seed
from ...numerics.vector import Vec2

logger = logging.getLogger(__name__)


class SamplerState(str, Enum):
    RUNNING = "running"
    DONE = "done"


def _require(cond: bool, msg: str) -> None:
    if not cond:
        raise ParameterError(msg)


def _is_real(value) -> bool:
    return isinstance(value, numbers.Real) and not isinstance(value, bool)


def _is_integral(value) -> bool:
    return isinstance(value, numbers.Integral) and not isinstance(value, bool)


def _is_finite(value) -> bool:
    try:
        return math.isfinite(value)
    except OverflowError:
        # ints too large for a float
        return False


def validate_parameters(width: float, height: float, radius: float, k: int) -> None:
    """Rejects parameters that would make the run undefined or never finish."""
    for name, value in (("width", width), ("height", height), ("radius", radius)):
        _require(_is_real(value), f"{name} must be a number, got {value!r}")
        _require(_is_finite(value), f"{name} must be finite, got {value!r}")
        _require(value > 0, f"{name} must be > 0, got {value!r}")
    _require(_is_integral(k), f"k must be an integer, got {k!r}")
    _require(k >= 0, f"k must be >= 0, got {k!r}")


def validate_seed(seed: int) -> None:
    _require(_is_integral(seed), f"seed must be an integer, got {seed!r}")


class PoissonDiscSampler:
    """
    One sampling run.

    Points live in a single append-only list; the grid and the active list
    only hold indices into it. The constructor places the seed point, then
    every step() either adds one point near a random active point or
    retires that active point. The run is over when nothing is active.
    """

    def __init__(
        self,
        seed: int,
        width: float,
        height: float,
        radius: float,
        k: int = DEFAULT_K,
        max_grid_cells: int = DEFAULT_MAX_GRID_CELLS,
    ):
        validate_seed(seed)
        validate_parameters(width, height, radius, k)
        _require(
            _is_integral(max_grid_cells) and max_grid_cells >= 1,
            f"max_grid_cells must be an integer >= 1, got {max_grid_cells!r}",
        )

        self.seed = int(seed)
        self.width = float(width)
        self.height = float(height)
        self.radius = float(radius)
        self.k = int(k)

        self.grid = SpatialGrid(self.width, self.height, self.radius, max_cells=max_grid_cells)
        self.points: List[Vec2] = []
        self.active: List[int] = []
        self.stats = SampleStats()
        self.source = UniformSource(self.seed)

        logger.debug(
            "Sampler seed=%d region=%gx%g r=%g k=%d grid=%dx%d cell=%.4f",
            self.seed, self.width, self.height, self.radius, self.k,
            self.grid.rows, self.grid.cols, self.grid.cell_size,
        )
        self._seed_point()

    @property
    def state(self) -> SamplerState:
        return SamplerState.RUNNING if self.active else SamplerState.DONE

    @property
    def is_done(self) -> bool:
        return not self.active

    def _seed_point(self) -> None:
        x0 = Vec2(self.source.range_float(self.width), self.source.range_float(self.height))
        self._accept(x0)

    def _accept(self, point: Vec2) -> int:
        idx = len(self.points)
        self.points.append(point)
        self.grid.set(point, idx)
        self.active.append(idx)
        return idx

    def _try_around(self, origin: Vec2) -> bool:
        for _ in range(self.k):
            self.stats.attempts += 1
            candidate = generate_candidate(origin, self.source, self.radius)
            if not in_region(candidate, self.width, self.height):
                self.stats.out_of_bounds += 1
                continue

            verdict = check_candidate(self.grid, self.points, candidate, self.radius)
            if verdict is Verdict.ACCEPTED:
                self._accept(candidate)
                return True
            if verdict is Verdict.CELL_OCCUPIED:
                self.stats.cell_rejections += 1
            else:
                self.stats.distance_rejections += 1
        return False

    def step(self) -> bool:
        """Runs one iteration. Returns True while active points remain."""
        if self.is_done:
            raise SamplerError("Sampler already finished, active list is empty")

        self.stats.iterations += 1
        slot = self.source.range_int(len(self.active))
        origin_idx = self.active[slot]

        if not self._try_around(self.points[origin_idx]):
            # no room left near this point
            del self.active[slot]
            self.stats.evictions += 1

        return not self.is_done

    def run(self) -> SampleResult:
        t_start = time.perf_counter()
        while not self.is_done:
            self.step()
        self.stats.elapsed_ms += (time.perf_counter() - t_start) * 1000.0

        logger.info(
            "Sampled %d points in %d iterations (%.1f ms), seed=%d",
            len(self.points), self.stats.iterations, self.stats.elapsed_ms, self.seed,
        )
        return SampleResult(
            seed=self.seed,
            width=self.width,
            height=self.height,
            radius=self.radius,
            k=self.k,
            points=list(self.points),
            stats=self.stats,
        )


def sample_region(
    seed: int,
    width: float,
    height: float,
    r: float,
    k: int = DEFAULT_K,
    max_grid_cells: int = DEFAULT_MAX_GRID_CELLS,
) -> SampleResult:
    """Full run with stats and parameters attached."""
    return PoissonDiscSampler(seed, width, height, r, k, max_grid_cells=max_grid_cells).run()


def sample_points(
    seed: int,
    width: float,
    height: float,
    r: float,
    k: int = DEFAULT_K,
    max_grid_cells: int = DEFAULT_MAX_GRID_CELLS,
) -> List[Vec2]:
    """
    Poisson-disc points over [0, width) x [0, height), no two closer than r.

    Deterministic in (seed, width, height, r, k). Points come back in the
    order they were accepted; the first one is the seed point.
    max_grid_cells caps the acceleration grid size.
    """
    return sample_region(seed, width, height, r, k, max_grid_cells).points


def sample_points_unseeded(
    width: float,
    height: float,
    r: float,
    k: int = DEFAULT_K,
    max_grid_cells: int = DEFAULT_MAX_GRID_CELLS,
) -> List[Vec2]:
    """Same as sample_points with a clock-derived seed (not reproducible)."""
    seed = time_seed()
    logger.info("Using time-derived seed %d", seed)
    return sample_points(seed, width, height, r, k, max_grid_cells)
