"""
Тесты Money / Currency / CurrencyExchangeRate / Price

Проверяет:
1. Арифметику только в одной валюте
2. Форматирование с точностью валюты
3. Явную конверсию по курсу и обратимость
4. Валидацию курса
5. Цену за количество: price * q, money / price
"""

import math

import pytest

from dimcalc import (
    Currency,
    CurrencyExchangeRate,
    CurrencyMismatchError,
    DimensionMismatchError,
    Energy,
    InvalidExchangeRateError,
    Length,
    LengthUnit,
    Mass,
    Money,
    Price,
    QuantityOverflowError,
    Temperature,
    Time,
    UndefinedRatioError,
    UnitParseError,
    attempt,
    convert_money,
)

# =============================================================================
# FIXTURES
# =============================================================================


@pytest.fixture
def usd_eur() -> CurrencyExchangeRate:
    """1 USD = 0.85 EUR"""
    return CurrencyExchangeRate(Currency.USD, Currency.EUR, 0.85)


@pytest.fixture
def cable_price() -> Price:
    """$10 за 2 метра"""
    return Price(Money.usd(10), Length.meters(2))


# =============================================================================
# CURRENCY
# =============================================================================


class TestCurrency:
    def test_properties(self) -> None:
        assert Currency.USD.code == "USD"
        assert Currency.USD.symbol == "$"
        assert Currency.EUR.display_name == "Euro"
        assert Currency.JPY.decimals == 0
        assert Currency.BTC.decimals == 8
        assert str(Currency.GBP) == "GBP"

    def test_from_code(self) -> None:
        assert Currency.from_code("USD") is Currency.USD
        assert Currency.from_code(" chf ") is Currency.CHF

    def test_unknown_code(self) -> None:
        with pytest.raises(UnitParseError, match="unknown currency code"):
            Currency.from_code("XYZ")

    def test_closed_set(self) -> None:
        assert len(Currency) == 10


# =============================================================================
# MONEY
# =============================================================================


class TestMoneyArithmetic:
    def test_same_currency(self) -> None:
        assert Money.usd(10) + Money.usd(5) == Money.usd(15)
        assert Money.eur(10) - Money.eur(2.5) == Money.eur(7.5)

    def test_currency_mismatch(self) -> None:
        with pytest.raises(CurrencyMismatchError, match="USD and EUR"):
            Money.usd(10) + Money.eur(10)
        with pytest.raises(CurrencyMismatchError):
            Money.usd(10) - Money.gbp(1)

    def test_add_number_rejected(self) -> None:
        with pytest.raises(DimensionMismatchError):
            Money.usd(10) + 5

    def test_scalar(self) -> None:
        assert Money.usd(10) * 3 == Money.usd(30)
        assert 3 * Money.usd(10) == Money.usd(30)
        assert Money.usd(10) / 4 == Money.usd(2.5)
        assert -Money.usd(10) == Money.usd(-10)
        assert abs(Money.usd(-10)) == Money.usd(10)

    def test_division_by_zero(self) -> None:
        with pytest.raises(UndefinedRatioError):
            Money.usd(10) / 0

    def test_money_ratio(self) -> None:
        assert Money.usd(10) / Money.usd(4) == 2.5
        with pytest.raises(UndefinedRatioError):
            Money.usd(10) / Money.usd(0)
        with pytest.raises(CurrencyMismatchError):
            Money.usd(10) / Money.eur(5)

    def test_invalid_amount(self) -> None:
        with pytest.raises(ValueError, match="NaN/Inf"):
            Money.usd(math.nan)

    def test_overflow(self) -> None:
        """Переполнение суммы: QuantityOverflowError, а не ошибка ввода"""
        with pytest.raises(QuantityOverflowError, match="USD arithmetic overflowed"):
            Money.usd(1e308) * 10
        with pytest.raises(QuantityOverflowError):
            Money.usd(1e308) + Money.usd(1e308)
        assert isinstance(attempt(lambda: Money.usd(1e308) * 10).error, QuantityOverflowError)

    def test_currency_code_accepted(self) -> None:
        assert Money(5, "eur") == Money.eur(5)


class TestMoneyComparison:
    def test_equality(self) -> None:
        assert Money.usd(10) == Money.usd(10.0)
        assert Money.usd(10) != Money.eur(10)
        assert hash(Money.usd(10)) == hash(Money.usd(10.0))

    def test_ordering(self) -> None:
        assert Money.usd(1) < Money.usd(2)
        assert max(Money.jpy(100), Money.jpy(300), Money.jpy(200)) == Money.jpy(300)

    def test_ordering_across_currencies_rejected(self) -> None:
        with pytest.raises(CurrencyMismatchError):
            Money.usd(1) < Money.eur(2)


class TestMoneyDisplay:
    def test_formatted(self) -> None:
        assert Money.usd(29.99).to_formatted_string() == "$29.99"
        assert Money.jpy(1000).to_formatted_string() == "¥1000"
        assert Money.btc(0.5).to_formatted_string() == "₿0.50000000"
        assert Money.eur(-5).to_formatted_string() == "-€5.00"

    def test_str_and_repr(self) -> None:
        assert str(Money.usd(29.99)) == "29.99 USD"
        assert repr(Money.eur(1)) == "Money(1.0, 'EUR')"

    def test_parse(self) -> None:
        assert Money.parse("100 USD") == Money.usd(100)
        assert Money.parse("29.99 eur") == Money.eur(29.99)

    def test_parse_errors(self) -> None:
        with pytest.raises(UnitParseError, match="unknown currency code") as exc_info:
            Money.parse("100 XYZ")
        assert exc_info.value.dimension == "Money"

        with pytest.raises(UnitParseError, match="malformed number"):
            Money.parse("USD 100")


# =============================================================================
# EXCHANGE RATE
# =============================================================================


class TestExchangeRate:
    def test_base_to_counter(self, usd_eur: CurrencyExchangeRate) -> None:
        euros = usd_eur.convert(Money.usd(100))
        assert euros.currency is Currency.EUR
        assert euros.amount == pytest.approx(85.0)

    def test_counter_to_base(self, usd_eur: CurrencyExchangeRate) -> None:
        dollars = usd_eur.convert(Money.eur(85))
        assert dollars.currency is Currency.USD
        assert dollars.amount == pytest.approx(100.0)

    def test_unrelated_currency(self, usd_eur: CurrencyExchangeRate) -> None:
        with pytest.raises(CurrencyMismatchError, match="does not match"):
            usd_eur.convert(Money.gbp(10))

    def test_inverse(self, usd_eur: CurrencyExchangeRate) -> None:
        inverse = usd_eur.inverse()
        assert inverse.base is Currency.EUR
        assert inverse.counter is Currency.USD
        assert inverse.rate == pytest.approx(1.0 / 0.85)

    def test_round_trip(self, usd_eur: CurrencyExchangeRate) -> None:
        """Инвариант: конверсия туда и обратно сохраняет сумму"""
        original = Money.usd(123.45)
        back = usd_eur.inverse().convert(usd_eur.convert(original))
        assert back.currency is Currency.USD
        assert back.amount == pytest.approx(original.amount, abs=1e-10)

    def test_str(self, usd_eur: CurrencyExchangeRate) -> None:
        assert str(usd_eur) == "USD/EUR 0.85"

    def test_usd_eur_round_trip_at_0_92(self) -> None:
        """100 USD → 92 EUR → 100 USD"""
        rate = CurrencyExchangeRate(Currency.USD, Currency.EUR, 0.92)
        euros = rate.convert(Money.usd(100))
        assert euros.currency is Currency.EUR
        assert euros.amount == pytest.approx(92.0)
        back = rate.convert(euros)
        assert back.currency is Currency.USD
        assert back.amount == pytest.approx(100.0)

    def test_conversion_overflow(self) -> None:
        rate = CurrencyExchangeRate(Currency.USD, Currency.JPY, 150.0)
        with pytest.raises(QuantityOverflowError, match="USD/JPY"):
            rate.convert(Money.usd(1e307))

    @pytest.mark.parametrize(
        "base, counter, rate",
        [
            (Currency.USD, Currency.USD, 1.0),
            (Currency.USD, Currency.EUR, 0.0),
            (Currency.USD, Currency.EUR, -1.0),
            (Currency.USD, Currency.EUR, math.inf),
            (Currency.USD, Currency.EUR, math.nan),
        ],
    )
    def test_invalid_rates(self, base: Currency, counter: Currency, rate: float) -> None:
        with pytest.raises(InvalidExchangeRateError):
            CurrencyExchangeRate(base, counter, rate)

    def test_invalid_rate_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            CurrencyExchangeRate(Currency.USD, Currency.EUR, 0)


class TestConvertMoney:
    def test_same_currency_unchanged(self, usd_eur: CurrencyExchangeRate) -> None:
        money = Money.usd(10)
        assert convert_money(money, Currency.USD, [usd_eur]) is money

    def test_direct_and_inverse_direction(self, usd_eur: CurrencyExchangeRate) -> None:
        assert convert_money(Money.usd(100), Currency.EUR, [usd_eur]).amount == pytest.approx(85.0)
        assert convert_money(Money.eur(85), Currency.USD, [usd_eur]).amount == pytest.approx(100.0)

    def test_picks_matching_rate(self, usd_eur: CurrencyExchangeRate) -> None:
        usd_jpy = CurrencyExchangeRate(Currency.USD, Currency.JPY, 150.0)
        yen = convert_money(Money.usd(2), Currency.JPY, [usd_eur, usd_jpy])
        assert yen == Money.jpy(300)

    def test_no_rate(self, usd_eur: CurrencyExchangeRate) -> None:
        """Кросс-курсы не строятся"""
        with pytest.raises(CurrencyMismatchError, match="No exchange rate"):
            convert_money(Money.eur(10), Currency.GBP, [usd_eur])


# =============================================================================
# PRICE
# =============================================================================


class TestPrice:
    def test_per_unit_amount(self, cable_price: Price) -> None:
        assert cable_price.per_unit_amount() == 5.0

    def test_electricity_bill(self) -> None:
        """$0.12 за kWh, 900 kWh → $108"""
        tariff = Price(Money.usd(0.12), Energy.kilowatt_hours(1))
        bill = tariff * Energy.kilowatt_hours(900)
        assert bill.currency is Currency.USD
        assert bill.amount == pytest.approx(108.0)

    def test_price_times_quantity(self, cable_price: Price) -> None:
        assert cable_price * Length.meters(5) == Money.usd(25)
        assert Length.meters(5) * cable_price == Money.usd(25)

    def test_price_converts_quantity_unit(self, cable_price: Price) -> None:
        assert (cable_price * Length.kilometers(1)).amount == pytest.approx(5000.0)
        assert (cable_price * Length.feet(10)).amount == pytest.approx(15.24)

    def test_other_dimension_rejected(self, cable_price: Price) -> None:
        with pytest.raises(DimensionMismatchError, match="Price per Length"):
            cable_price * Time.seconds(1)

    def test_scale_price(self, cable_price: Price) -> None:
        assert cable_price * 2 == Price(Money.usd(20), Length.meters(2))
        assert 2 * cable_price == Price(Money.usd(20), Length.meters(2))
        assert cable_price / 2 == Price(Money.usd(5), Length.meters(2))

    def test_quantity_for_budget(self, cable_price: Price) -> None:
        length = cable_price.quantity_for(Money.usd(25))
        assert isinstance(length, Length)
        assert length.unit is LengthUnit.METERS
        assert length.value == pytest.approx(5.0)
        assert Money.usd(25) / cable_price == Length.meters(5)

    def test_quantity_for_other_currency(self, cable_price: Price) -> None:
        with pytest.raises(CurrencyMismatchError):
            cable_price.quantity_for(Money.eur(25))

    def test_money_over_quantity_is_price(self) -> None:
        price = Money.usd(12) / Mass.kilograms(3)
        assert isinstance(price, Price)
        assert price.per_unit_amount() == 4.0

    def test_zero_unit_quantity_rejected(self) -> None:
        with pytest.raises(UndefinedRatioError):
            Price(Money.usd(10), Length.meters(0))
        with pytest.raises(UndefinedRatioError):
            Money.usd(10) / Length.meters(0)

    def test_non_quantity_rejected(self) -> None:
        with pytest.raises(DimensionMismatchError):
            Price(Money.usd(10), Temperature.celsius(1))
        with pytest.raises(DimensionMismatchError):
            Price(Money.usd(10), 5)

    def test_convert(self, cable_price: Price, usd_eur: CurrencyExchangeRate) -> None:
        converted = cable_price.convert(usd_eur)
        assert converted.money.currency is Currency.EUR
        assert converted.money.amount == pytest.approx(8.5)
        assert converted.unit_quantity == Length.meters(2)

    def test_str(self, cable_price: Price) -> None:
        assert str(cable_price) == "10.0 USD/2.0 m"
