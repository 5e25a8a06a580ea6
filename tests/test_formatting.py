import pytest

from moneymentor.formatting import format_currency, format_percentage, group_indian, round_half_up


@pytest.mark.parametrize('digits, expected', [
    ('0', '0'),
    ('999', '999'),
    ('1000', '1,000'),
    ('100000', '1,00,000'),
    ('1234567', '12,34,567'),
    ('123456789', '12,34,56,789'),
])
def test_group_indian(digits, expected):
    assert group_indian(digits) == expected


@pytest.mark.parametrize('amount, kwargs, expected', [
    (0, {}, '₹0'),
    (1000, {}, '₹1,000'),
    (123456.5, {}, '₹1,23,456.5'),
    (99.999, {}, '₹100'),
    (-50, {}, '-₹50'),
    (-0.001, {}, '₹0'),
    (2500, {'include_sign': False}, '2,500'),
    (33.3333, {'decimals': 0}, '₹33'),
])
def test_format_currency(amount, kwargs, expected):
    assert format_currency(amount, **kwargs) == expected


def test_format_percentage():
    assert format_percentage(82.456) == '82.5%'
    assert format_percentage(100, decimals=0) == '100%'


@pytest.mark.parametrize('value, expected', [
    (32.5, 33),
    (32.4, 32),
    (0.5, 1),
    (0, 0),
    (-0.5, 0),
])
def test_round_half_up(value, expected):
    assert round_half_up(value) == expected
