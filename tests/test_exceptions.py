"""Tests for exception classes."""

from permalink_distiller import ConfigurationError, ConsistencyError, DistillerError


class TestDistillerError:
    """Tests for the base DistillerError exception."""

    def test_instantiation_with_message(self):
        """DistillerError stores the error message."""
        error = DistillerError("Something went wrong")

        assert error.message == "Something went wrong"
        assert str(error) == "Something went wrong"

    def test_inheritance(self):
        """DistillerError is an Exception."""
        assert isinstance(DistillerError("test"), Exception)


class TestConfigurationError:
    """Tests for ConfigurationError exception."""

    def test_instantiation(self):
        """ConfigurationError stores template and field."""
        error = ConfigurationError("bad", template=":year/:category", field="category")

        assert error.message == "bad"
        assert error.template == ":year/:category"
        assert error.field == "category"

    def test_defaults(self):
        """ConfigurationError template and field are optional."""
        error = ConfigurationError("bad")

        assert error.template is None
        assert error.field is None

    def test_inheritance(self):
        """ConfigurationError inherits from DistillerError."""
        assert isinstance(ConfigurationError("test"), DistillerError)


class TestConsistencyError:
    """Tests for ConsistencyError exception."""

    def test_instantiation(self):
        """ConsistencyError stores both paths."""
        error = ConsistencyError(
            "missing", resource_path="a/cover.jpg", owner_path="a.html"
        )

        assert error.message == "missing"
        assert error.resource_path == "a/cover.jpg"
        assert error.owner_path == "a.html"

    def test_inheritance(self):
        """ConsistencyError inherits from DistillerError."""
        error = ConsistencyError("test", resource_path="x", owner_path="y")

        assert isinstance(error, DistillerError)
        assert not isinstance(error, ConfigurationError)
