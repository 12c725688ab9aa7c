import matplotlib
import numpy as np
from matplotlib.backends.backend_agg import FigureCanvasAgg

from function_drawer import parse_expression
from function_drawer.sampling import sample_function, to_screen_coordinates, draw_function


def test_sample_identity():
    xs, ys = sample_function(parse_expression("X"), 2.0, 5)
    np.testing.assert_allclose(xs, [-2.0, -1.0, 0.0, 1.0, 2.0])
    np.testing.assert_allclose(ys, xs)


def test_sample_constant_expression():
    xs, ys = sample_function(parse_expression("3"), 1.0, 4)
    assert ys.shape == xs.shape
    np.testing.assert_allclose(ys, 3.0)


def test_pole_is_kept_as_non_finite():
    xs, ys = sample_function(parse_expression("1/X"), 2.0, 5)
    assert np.isinf(ys[2])
    assert np.isfinite(np.delete(ys, 2)).all()


def test_screen_mapping():
    px, py = to_screen_coordinates(np.array([-10.0, 0.0, 10.0]), np.array([-10.0, 0.0, 10.0]),
                                   10.0, 10.0, 600, 600)
    np.testing.assert_allclose(px, [0.0, 300.0, 600.0])
    np.testing.assert_allclose(py, [600.0, 300.0, 0.0])


def test_draw_to_file(tmp_path):
    output = tmp_path / "plot.png"
    draw_function(parse_expression("abs(sin(X))/X"), 5.0, 2.0, samples=101, output=str(output))
    assert output.exists()
    assert output.stat().st_size > 0


def test_draw_to_file_keeps_backend(tmp_path):
    backend = matplotlib.get_backend()
    fig = draw_function(parse_expression("X^2"), 3.0, 9.0, samples=31, output=str(tmp_path / "square.png"))
    assert isinstance(fig.canvas, FigureCanvasAgg)
    assert matplotlib.get_backend() == backend
