"""
Smoke tests to verify package imports and basic functionality.

These tests run quickly and verify that the package is correctly installed.
"""

import pytest


class TestPackageImports:
    """Test that all package components can be imported."""

    def test_import_package(self):
        """Package should be importable."""
        import eulerode  # noqa: PLC0415

        assert hasattr(eulerode, "__version__")

    def test_import_integrators(self):
        """Integrators should be importable."""
        from eulerode import derive_step_size, euler_iterate, euler_step  # noqa: PLC0415

        assert callable(euler_step)
        assert callable(euler_iterate)
        assert callable(derive_step_size)

    def test_import_expression(self):
        """Expression helpers should be importable."""
        from eulerode import bind, parse_expression  # noqa: PLC0415

        assert callable(parse_expression)
        assert callable(bind)

    def test_import_cli(self):
        """Command line entry point should be importable."""
        from eulerode.cli import main  # noqa: PLC0415

        assert callable(main)


class TestBasicFunctionality:
    """Quick tests for basic functionality."""

    def test_version_string(self):
        """Version should be a valid string."""
        import eulerode  # noqa: PLC0415

        assert isinstance(eulerode.__version__, str)
        assert len(eulerode.__version__) > 0

    def test_euler_step_runs(self):
        """Euler step should run without error."""
        from eulerode import euler_step  # noqa: PLC0415

        assert euler_step(lambda x, y: -y, 0.0, 1.0, 0.1) == pytest.approx(0.9)

    def test_parse_and_bind(self):
        """A typed expression should evaluate like the formula it spells."""
        from eulerode import bind, parse_expression  # noqa: PLC0415

        f = bind(parse_expression("x + y"))
        assert f(1.0, 2.0) == 3.0


class TestErrorHandling:
    """Test that errors are raised appropriately."""

    def test_errors_share_base_class(self):
        """Both error kinds should derive from EulerError."""
        from eulerode import EulerError, InvalidDataError, InvalidInputError  # noqa: PLC0415

        assert issubclass(InvalidDataError, EulerError)
        assert issubclass(InvalidInputError, EulerError)

    def test_invalid_data_is_value_error(self):
        """Invalid data should still be catchable as ValueError."""
        from eulerode import InvalidDataError, parse_expression  # noqa: PLC0415

        assert issubclass(InvalidDataError, ValueError)
        with pytest.raises(ValueError):
            parse_expression("(")


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
