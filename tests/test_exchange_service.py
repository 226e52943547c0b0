# tests/test_exchange_service.py
"""
Exchange Service Tests - Unit Tests for Conversion and Randomization

This module contains unit tests for ExchangeService: typed conversion
results, truncation policy, delegation to the rate graph and the
configured perturbation bound.

Files that USE this module:
- pytest (test runner executes these tests)

Files that this module USES:
- fxgraph.application.exchange_service (ExchangeService)
- fxgraph.adapters.formatting.fixed_point (parse, render, from_whole)
- fxgraph.domain (Currency, ExactRational, errors)
- unittest.mock (Mock random source)
- pytest (testing framework)
"""
import random

import pytest  # Testing framework for writing and running tests

from unittest.mock import Mock  # Stub random source

from fxgraph.adapters.formatting.fixed_point import from_whole, parse, render
from fxgraph.application.exchange_service import DEFAULT_MAX_PERCENT, ExchangeService
from fxgraph.domain.errors import InvalidArgumentError, NoRouteError
from fxgraph.domain.models import Currency
from fxgraph.domain.rational import ExactRational

USD, EUR, RUB, BTC, ETH = Currency.USD, Currency.EUR, Currency.RUB, Currency.BTC, Currency.ETH


def _initial():
    return {
        (USD, EUR): ExactRational.of(91, 100),
        (USD, RUB): ExactRational.of(75, 1),
        (USD, BTC): ExactRational.of(1, 50_000),
        (BTC, ETH): ExactRational.of(13, 1),
    }


@pytest.fixture()
def service():
    svc = ExchangeService(_initial(), rng=random.Random(42))
    svc.complete_inverses()
    return svc


class TestInit:
    def test_defaults(self):
        svc = ExchangeService(_initial())
        assert svc.max_percent == DEFAULT_MAX_PERCENT == 5
        assert isinstance(svc.rng, random.Random)
        assert len(svc.graph) == 4

    def test_initial_table_is_copied(self):
        table = _initial()
        svc = ExchangeService(table)
        table[(USD, EUR)] = ExactRational.of(2, 1)
        assert svc.rate(USD, EUR) == ExactRational(91, 100)

    def test_negative_bound_rejected(self):
        with pytest.raises(InvalidArgumentError):
            ExchangeService(_initial(), max_percent=-1)


class TestConvert:
    def test_whole_rate(self, service):
        result = service.convert(parse("1000"), USD, RUB)
        assert result.ok
        assert result.unwrap() == from_whole(75_000)
        assert render(result.amount) == "75000.00000000"

    def test_truncates_remainder(self):
        svc = ExchangeService({(USD, EUR): ExactRational.of(1, 3)})
        result = svc.convert(parse("100.00000000"), USD, EUR)
        assert result.amount == 3_333_333_333
        assert render(result.amount) == "33.33333333"

    def test_derived_rate(self, service):
        result = service.convert(from_whole(1), ETH, EUR)
        assert result.amount == from_whole(3500)

    def test_same_currency(self, service):
        assert service.convert(parse("12.34"), EUR, EUR).amount == parse("12.34")

    @pytest.mark.parametrize("amount", [0, -1, -from_whole(5)])
    def test_non_positive_amount(self, service, amount):
        result = service.convert(amount, USD, EUR)
        assert not result.ok
        assert result.amount is None
        assert isinstance(result.error, InvalidArgumentError)
        with pytest.raises(InvalidArgumentError):
            result.unwrap()

    def test_no_route(self):
        svc = ExchangeService({(USD, EUR): ExactRational.of(91, 100)})
        result = svc.convert(from_whole(1), RUB, USD)
        assert isinstance(result.error, NoRouteError)
        assert result.error.from_currency is RUB
        assert result.error.to_currency is USD
        assert "RUB" in str(result.error)

    def test_convert_does_not_touch_graph(self, service):
        before = service.dump()
        service.convert(from_whole(10), RUB, ETH)
        service.convert(0, RUB, ETH)
        assert service.dump() == before


class TestPerturb:
    def test_uses_configured_bound(self):
        rng = Mock()
        rng.randint.return_value = 0
        svc = ExchangeService(_initial(), rng=rng, max_percent=3)
        assert svc.perturb() == 4
        rng.randint.assert_called_with(-3, 3)

    def test_explicit_bound(self):
        rng = Mock()
        rng.randint.return_value = 2
        svc = ExchangeService({(USD, RUB): ExactRational.of(75, 1)}, rng=rng)
        svc.perturb(2)
        rng.randint.assert_called_once_with(-2, 2)
        assert svc.rate(USD, RUB) == ExactRational(153, 2)
        assert svc.rate(RUB, USD) == ExactRational(2, 153)

    def test_seeded_services_agree(self):
        a = ExchangeService(_initial(), rng=random.Random(7))
        b = ExchangeService(_initial(), rng=random.Random(7))
        a.perturb()
        b.perturb()
        assert a.dump() == b.dump()


class TestReporting:
    def test_dump_matches_graph(self, service):
        assert service.dump() == service.graph.dump()

    def test_show_rates(self, service):
        lines = service.show_rates().splitlines()
        assert len(lines) == 8
        assert lines[0] == "BTC -> ETH : 13.00000000"
        assert "USD -> EUR : 0.91000000" in lines
        assert service.show_rates().endswith("\n")
