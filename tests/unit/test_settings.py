"""Unit tests for global settings resolution."""

from cabinetry.domain import GlobalSetting
from cabinetry.domain.services import (
    DEFAULT_GST_RATE,
    DEFAULT_HARDWARE_BASE_COST,
    DEFAULT_MATERIAL_RATE,
    PricingSettings,
    parse_global_settings,
)


class TestParseGlobalSettings:
    """Tests for parse_global_settings."""

    def test_no_rows_gives_defaults(self) -> None:
        """Absent input should yield an all-default settings value."""
        settings = parse_global_settings(None)
        assert settings == PricingSettings(
            material_rate=DEFAULT_MATERIAL_RATE,
            gst_rate=DEFAULT_GST_RATE,
            hardware_base_cost=DEFAULT_HARDWARE_BASE_COST,
        )

    def test_empty_rows_give_defaults(self) -> None:
        assert parse_global_settings([]) == PricingSettings()

    def test_recognised_keys_are_parsed(self) -> None:
        settings = parse_global_settings(
            [
                GlobalSetting("hmr_rate_per_sqm", "92.5"),
                GlobalSetting("gst_rate", "0.15"),
                GlobalSetting("hardware_base_cost", "60"),
            ]
        )
        assert settings.material_rate == 92.5
        assert settings.gst_rate == 0.15
        assert settings.hardware_base_cost == 60.0

    def test_unknown_keys_are_ignored(self) -> None:
        settings = parse_global_settings([GlobalSetting("company_name", "Acme")])
        assert settings == PricingSettings()

    def test_unparsable_value_keeps_default(self) -> None:
        settings = parse_global_settings(
            [
                GlobalSetting("hmr_rate_per_sqm", "eighty"),
                GlobalSetting("gst_rate", None),
                GlobalSetting("hardware_base_cost", "  "),
            ]
        )
        assert settings == PricingSettings()

    def test_non_finite_value_keeps_default(self) -> None:
        settings = parse_global_settings([GlobalSetting("gst_rate", "nan")])
        assert settings.gst_rate == DEFAULT_GST_RATE

    def test_explicit_zero_is_honoured(self) -> None:
        """A zero GST rate is a valid tax-exempt setting, not a missing one."""
        settings = parse_global_settings([GlobalSetting("gst_rate", "0")])
        assert settings.gst_rate == 0.0

    def test_last_row_wins(self) -> None:
        settings = parse_global_settings(
            [
                GlobalSetting("hmr_rate_per_sqm", "80"),
                GlobalSetting("hmr_rate_per_sqm", "90"),
            ]
        )
        assert settings.material_rate == 90.0
