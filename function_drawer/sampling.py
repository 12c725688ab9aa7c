"""
Sampling and drawing of a single-variable expression over a symmetric domain.

The expression is evaluated once over all sample points; points where it is
not finite (poles, NaN from fractional powers of negatives) are left as gaps.
"""

from typing import Optional, Tuple

import numpy as np

from .expression_tree import Expression
from .logging_system import log_milestone, log_warning


def sample_function(expression: Expression, max_x: float, samples: int = 600) -> Tuple[np.ndarray, np.ndarray]:
  """Evaluate `expression` at `samples` evenly spaced points of [-max_x, max_x]."""
  xs = np.linspace(-max_x, max_x, samples)
  ys = np.asarray(expression.evaluate(xs), dtype=np.float64)
  if ys.shape != xs.shape:
    ys = np.broadcast_to(ys, xs.shape).copy()

  n_bad = int(np.count_nonzero(~np.isfinite(ys)))
  if n_bad:
    log_warning(f"{n_bad}/{samples} samples of {expression.to_string()} are not finite")
  return xs, ys


def to_screen_coordinates(xs: np.ndarray, ys: np.ndarray, max_x: float, max_y: float,
                          width: int, height: int) -> Tuple[np.ndarray, np.ndarray]:
  """Map domain points to window pixels, origin in the centre and y growing downwards."""
  ratio_x = width / (2.0 * max_x)
  ratio_y = height / (2.0 * max_y)
  with np.errstate(all='ignore'):
    px = (xs + max_x) * ratio_x
    py = height - (ys + max_y) * ratio_y
  return px, py


def draw_function(expression: Expression, max_x: float, max_y: float, samples: int = 600,
                  output: Optional[str] = None):
  """Draw axes and the curve; save to `output` if given, otherwise open a window."""
  xs, ys = sample_function(expression, max_x, samples)
  ys = np.where(np.isfinite(ys), ys, np.nan)

  if output is not None:
    # off-screen canvas, leaves the pyplot backend alone
    from matplotlib.figure import Figure
    from matplotlib.backends.backend_agg import FigureCanvasAgg
    fig = Figure(figsize=(6, 6))
    FigureCanvasAgg(fig)
    ax = fig.add_subplot()
  else:
    import matplotlib.pyplot as plt
    fig, ax = plt.subplots(figsize=(6, 6))

  ax.axhline(0.0, color='black', linewidth=0.8)
  ax.axvline(0.0, color='black', linewidth=0.8)
  ax.plot(xs, ys, color='red')
  ax.set_xlim(-max_x, max_x)
  ax.set_ylim(-max_y, max_y)
  ax.set_title(expression.to_string())

  if output is not None:
    fig.savefig(output, dpi=100, bbox_inches='tight')
    log_milestone(f"Plot saved to {output}")
  else:
    plt.show()
  return fig
