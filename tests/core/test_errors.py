"""
Tests for ratioscale exceptions.
"""

from ratioscale.core.errors import ScaleConfigError, ScaleError, UnknownScaleTypeError


class TestScaleErrors:
    def test_to_dict_without_details(self):
        err = ScaleError("boom")

        assert err.to_dict() == {"error": "scale_error", "message": "boom"}
        assert str(err) == "boom"

    def test_config_error_details(self):
        err = ScaleConfigError("bad spec", details={"spec": "linear:x"})

        assert err.to_dict() == {
            "error": "invalid_scale_config",
            "message": "bad spec",
            "details": {"spec": "linear:x"},
        }

    def test_unknown_type_lists_known_types(self):
        err = UnknownScaleTypeError("cubic", ["log", "linear"])

        assert isinstance(err, ScaleConfigError)
        assert err.type_name == "cubic"
        assert err.to_dict()["error"] == "unknown_scale_type"
        assert err.details["known_types"] == ["linear", "log"]
