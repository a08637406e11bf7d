import pytest

from polyshrink import InvalidArgumentError, SimplifyConfig
from polyshrink.config import DEFAULT_MAX_ERROR, DEFAULT_MAX_VERTICES, DEFAULT_MIN_VERTICES


class TestSimplifyConfig:
    """Tests for simplification settings."""

    def test_defaults(self):
        config = SimplifyConfig()
        assert config.max_vertices == DEFAULT_MAX_VERTICES == 200
        assert config.min_vertices == DEFAULT_MIN_VERTICES == 30
        assert config.max_error == DEFAULT_MAX_ERROR == 0.05
        assert config.fix_intersections is False
        assert config.max_repair_iterations is None

    def test_defaults_are_valid(self):
        SimplifyConfig().validate()

    def test_max_vertices_below_min_vertices_is_allowed(self):
        SimplifyConfig(max_vertices=3, min_vertices=50).validate()

    def test_error_bounds_are_inclusive(self):
        SimplifyConfig(max_error=0).validate()
        SimplifyConfig(max_error=1).validate()

    @pytest.mark.parametrize('options, message', [
        ({'max_vertices': 2}, 'max_vertices must be at least 3'),
        ({'min_vertices': -5}, 'min_vertices must not be negative'),
        ({'max_error': 1.01}, 'max_error must be between 0 and 1'),
        ({'max_error': -0.01}, 'max_error must be between 0 and 1'),
        ({'max_repair_iterations': 0}, 'max_repair_iterations must be positive'),
    ])
    def test_invalid(self, options, message):
        with pytest.raises(InvalidArgumentError, match=message):
            SimplifyConfig(**options).validate()

    def test_simplify_options(self):
        config = SimplifyConfig(max_vertices=10, min_vertices=4, max_error=0.1, fix_intersections=True)
        assert config.simplify_options() == {
            'max_vertices': 10,
            'min_vertices': 4,
            'max_error': 0.1,
        }
