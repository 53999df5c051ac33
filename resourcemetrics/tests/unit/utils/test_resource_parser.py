"""Tests for resource parser utilities."""

from __future__ import annotations

from decimal import Decimal

import pytest

from resourcemetrics.constants.enums import QuantityFormat
from resourcemetrics.utils.resource_parser import (
    format_quantity,
    format_resource_list,
    from_milli_value,
    milli_value,
    parse_quantity,
)


class TestParseQuantity:
    """Tests for parse_quantity function."""

    def test_parse_millicores(self) -> None:
        """Test parsing CPU in millicores."""
        assert parse_quantity("100m") == Decimal("0.1")
        assert parse_quantity("500m") == Decimal("0.5")
        assert parse_quantity("1000m") == Decimal(1)

    def test_parse_micro_and_nano(self) -> None:
        """Test parsing microcore/nanocore units."""
        assert parse_quantity("500000u") == Decimal("0.5")
        assert parse_quantity("500000000n") == Decimal("0.5")

    def test_parse_binary_suffixes(self) -> None:
        """Test parsing binary SI memory suffixes."""
        assert parse_quantity("1Ki") == 1024
        assert parse_quantity("512Mi") == 512 * 1024**2
        assert parse_quantity("1Gi") == 1024**3
        assert parse_quantity("1.5Gi") == Decimal(3 * 512 * 1024**2)

    def test_parse_decimal_suffixes(self) -> None:
        """Test parsing decimal SI suffixes."""
        assert parse_quantity("2k") == 2000
        assert parse_quantity("1M") == 10**6
        assert parse_quantity("1G") == 10**9
        assert parse_quantity("1E") == 10**18

    def test_parse_exponent(self) -> None:
        """Test parsing exponent notation."""
        assert parse_quantity("1e3") == 1000
        assert parse_quantity("12E2") == 1200

    def test_parse_plain_numbers(self) -> None:
        """Test parsing plain numbers and numeric strings."""
        assert parse_quantity("2") == 2
        assert parse_quantity("1.5") == Decimal("1.5")
        assert parse_quantity(3) == 3
        assert parse_quantity(0.25) == Decimal("0.25")
        assert parse_quantity(Decimal("7")) == 7

    def test_parse_with_whitespace(self) -> None:
        """Test parsing quantity with surrounding whitespace."""
        assert parse_quantity(" 100m ") == Decimal("0.1")

    @pytest.mark.parametrize("value", ["", "abc", "1Gb", "Mi", "1e", "--1"])
    def test_parse_invalid_string(self, value: str) -> None:
        """Test invalid strings raise instead of defaulting to zero."""
        with pytest.raises(ValueError):
            parse_quantity(value)

    def test_parse_negative(self) -> None:
        """Test negative quantities are rejected."""
        with pytest.raises(ValueError, match="negative"):
            parse_quantity("-1")

    def test_parse_bool_and_none(self) -> None:
        """Test non-quantity types are rejected."""
        with pytest.raises(ValueError):
            parse_quantity(True)  # type: ignore[arg-type]
        with pytest.raises(ValueError):
            parse_quantity(None)  # type: ignore[arg-type]

    def test_parse_infinity(self) -> None:
        """Test infinite floats are rejected."""
        with pytest.raises(ValueError, match="finite"):
            parse_quantity(float("inf"))


class TestMilliValue:
    """Tests for milli_value and from_milli_value."""

    def test_milli_value_exact(self) -> None:
        assert milli_value(Decimal("0.25")) == 250
        assert milli_value(Decimal(2)) == 2000

    def test_milli_value_rounds_up(self) -> None:
        """Test sub-milli quantities round up."""
        assert milli_value(Decimal("0.0001")) == 1
        assert milli_value(Decimal("1.0005")) == 1001

    def test_from_milli_value(self) -> None:
        assert from_milli_value(1500) == Decimal("1.5")
        assert from_milli_value(0) == 0


class TestFormatQuantity:
    """Tests for format_quantity function."""

    def test_format_cpu(self) -> None:
        """Test DecimalSI formatting."""
        assert format_quantity(Decimal("1.5")) == "1500m"
        assert format_quantity(Decimal(2)) == "2"
        assert format_quantity(Decimal("0.05")) == "50m"

    def test_format_memory(self) -> None:
        """Test BinarySI formatting."""
        assert format_quantity(Decimal(3 * 1024**3), QuantityFormat.BINARY_SI) == "3Gi"
        assert format_quantity(Decimal(1536 * 1024**2), QuantityFormat.BINARY_SI) == "1536Mi"
        assert format_quantity(Decimal(1000), QuantityFormat.BINARY_SI) == "1000"

    def test_format_zero(self) -> None:
        assert format_quantity(Decimal(0), QuantityFormat.BINARY_SI) == "0"

    def test_format_sub_milli(self) -> None:
        """Test values finer than milli fall back to a plain decimal."""
        assert format_quantity(Decimal("0.0001")) == "0.0001"


class TestFormatResourceList:
    """Tests for format_resource_list function."""

    def test_cpu_decimal_rest_binary(self) -> None:
        rl = {
            "cpu": Decimal("1.5"),
            "memory": Decimal(3 * 1024**3),
            "storage": Decimal(1536 * 1024**2),
        }
        assert format_resource_list(rl) == {"cpu": "1500m", "memory": "3Gi", "storage": "1536Mi"}

    def test_empty(self) -> None:
        assert format_resource_list({}) == {}
