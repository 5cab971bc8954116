"""
Money value object tests.
"""
from decimal import Decimal

import pytest

from apps.cart.domain.value_objects import Money


class TestMoneyArithmetic:
    def test_add_and_subtract_stay_in_minor_units(self):
        total = Money(1999).add(Money(1)).subtract(Money(500))
        assert total == Money(1500)

    def test_multiply_by_quantity(self):
        assert Money(333).multiply_by_quantity(3) == Money(999)

    def test_rejects_float_amounts(self):
        with pytest.raises(TypeError):
            Money(10.5)

    def test_rejects_mixed_currencies(self):
        with pytest.raises(ValueError):
            Money(100, 'CNY').add(Money(100, 'AUD'))

    def test_total_of_nothing_is_zero(self):
        assert Money.total([], currency='AUD') == Money.zero('AUD')


class TestApplyPercentage:
    def test_floors_to_whole_minor_unit(self):
        assert Money(999).apply_percentage(Decimal('0.10')) == Money(99)

    def test_float_fraction_does_not_lose_a_unit(self):
        # 0.07 * 100 is 7.000000000000001 in binary floating point
        assert Money(100).apply_percentage(0.07) == Money(7)
        # 0.29 * 100 is 28.999999999999996
        assert Money(100).apply_percentage(0.29) == Money(29)

    @pytest.mark.parametrize('fraction', ['-0.1', '1.5'])
    def test_rejects_fraction_outside_unit_interval(self, fraction):
        with pytest.raises(ValueError):
            Money(100).apply_percentage(fraction)


class TestDisplay:
    def test_default_currency_uses_yuan_symbol(self):
        assert Money(123450).to_display_string() == '¥1,234.50'

    def test_explicit_currency_code(self):
        assert Money(5).to_display_string('AUD') == '$0.05'

    def test_unknown_currency_uses_code(self):
        assert Money(1000, 'JPY').to_display_string() == 'JPY 10.00'

    def test_negative_amount(self):
        assert Money(-250).to_display_string() == '-¥2.50'
