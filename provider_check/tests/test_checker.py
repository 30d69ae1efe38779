"""Tests for ProviderChecker matching."""

import pytest

from provider_check import check, match, normalize
from provider_check.checker import ProviderChecker
from provider_check.config import Config
from provider_check.models import CheckResult, Match, REASONS
from provider_check.prefix_table import DEFAULT_PROVIDER_PREFIXES, ProviderTable


@pytest.fixture
def checker():
    return ProviderChecker(Config(), ProviderTable.default())


# ============================================================
# Exact matches
# ============================================================

def test_exact_telkomsel(checker):
    r = checker.match("08520098374")
    assert r.normalized == "08520098374"
    assert Match(prefix="0852", provider="Telkomsel", partial=False) in r.matches
    assert r.reason == "found"
    assert r.found


@pytest.mark.parametrize("raw,provider", [
    ("+62 817 1234 5678", "XL Axiata"),
    ("6281512345678", "Indosat Ooredoo"),
    ("0896-1234-5678", "Three (3)"),
    ("(0838) 123 4567", "Axis"),
    ("088112345678", "Smartfren"),
])
def test_exact_each_provider(checker, raw, provider):
    r = checker.match(raw)
    assert r.reason == "found"
    assert [m.provider for m in r.matches] == [provider]
    assert not r.matches[0].partial


def test_exact_three_and_four_digit_both_reported():
    table = ProviderTable({"Empat": ["0812"], "Tiga": ["081"]})
    r = ProviderChecker(Config(), table).match("0812345678")
    assert r.matches == [
        Match(prefix="0812", provider="Empat"),
        Match(prefix="081", provider="Tiga"),
    ]


def test_three_digit_input_not_reported_twice():
    table = ProviderTable({"Tiga": ["081"]})
    r = ProviderChecker(Config(), table).match("081")
    assert r.matches == [Match(prefix="081", provider="Tiga")]


def test_same_provider_not_deduplicated():
    table = ProviderTable({"Satu": ["0812", "081"]})
    r = ProviderChecker(Config(), table).match("08129999")
    assert [m.prefix for m in r.matches] == ["0812", "081"]
    assert r.providers == ["Satu"]


def test_exact_prefix_is_unique_per_provider(checker):
    for prefix, provider in checker.table.index.items():
        r = checker.match(prefix + "1234567")
        exact = [m for m in r.matches if m.prefix == prefix]
        assert exact == [Match(prefix=prefix, provider=provider)]


# ============================================================
# Rejections
# ============================================================

def test_empty(checker):
    r = checker.match("")
    assert r == CheckResult(normalized="", matches=[], reason="empty input")


def test_letters_are_empty(checker):
    assert checker.match("abc def").reason == "empty input"


def test_not_leading_zero(checker):
    r = checker.match("1234")
    assert r.reason == "unrecognized format"
    assert r.matches == []
    assert r.normalized == "1234"


def test_foreign_number_unrecognized(checker):
    r = checker.match("+1 555 0100")
    assert r.normalized == "+15550100"
    assert r.reason == "unrecognized format"


def test_lone_zero_unrecognized(checker):
    assert checker.match("+62").reason == "unrecognized format"


def test_no_matching_prefix(checker):
    r = checker.match("0211234567")
    assert r.normalized == "0211234567"
    assert r.matches == []
    assert r.reason == "no matching prefix"
    assert not r.found


# ============================================================
# Partial (fallback) matches
# ============================================================

def test_two_digits_unrecognized_by_default(checker):
    r = checker.match("08")
    assert r.normalized == "08"
    assert r.matches == []
    assert r.reason == "unrecognized format"
    assert checker.match("089").reason == "found"


def test_relaxed_shape_two_digits_partial():
    relaxed = ProviderChecker(Config(min_local_digits=1), ProviderTable.default())
    r = relaxed.match("08")
    expected = [p for prefixes in DEFAULT_PROVIDER_PREFIXES.values() for p in prefixes if p.startswith("08")]
    assert r.reason == "found"
    assert [m.prefix for m in r.matches] == expected
    assert all(m.partial for m in r.matches)


def test_partial_three_digits(checker):
    r = checker.match("089")
    assert [m.prefix for m in r.matches] == ["0896", "0897", "0898", "0899"]
    assert {m.provider for m in r.matches} == {"Three (3)"}
    assert all(m.partial for m in r.matches)


def test_partial_follows_table_order(checker):
    r = checker.match("081")
    assert [m.provider for m in r.matches][:5] == ["Telkomsel"] * 3 + ["XL Axiata"] * 2


def test_partial_only_when_no_exact(checker):
    r = checker.match("0852")
    assert r.matches == [Match(prefix="0852", provider="Telkomsel")]


def test_exact_hit_with_empty_provider_name_is_not_partial():
    checker = ProviderChecker(Config(), ProviderTable({"": ["0852"]}))
    r = checker.match("08520098374")
    assert r.matches == [Match(prefix="0852", provider="", partial=False)]
    assert r.reason == "found"


# ============================================================
# Result contract
# ============================================================

@pytest.mark.parametrize("raw", ["", "abc", "1234", "08", "0211", "08520098374", "+62", "++62812", None])
def test_total_and_closed_reasons(checker, raw):
    r = checker.match(raw)
    assert isinstance(r, CheckResult)
    assert r.reason in REASONS


def test_result_is_immutable(checker):
    r = checker.match("08520098374")
    with pytest.raises(AttributeError):
        r.reason = "other"


def test_to_dict(checker):
    d = checker.match("08520098374").to_dict()
    assert d == {
        "normalized": "08520098374",
        "matches": [{"prefix": "0852", "provider": "Telkomsel", "partial": False}],
        "reason": "found",
    }


def test_check_batch_keeps_order(checker):
    results = checker.check_batch(["08520098374", "", "1234"])
    assert [r.reason for r in results] == ["found", "empty input", "unrecognized format"]


def test_fresh_result_each_call(checker):
    a = checker.check("08520098374")
    b = checker.check("08520098374")
    assert a == b
    assert a is not b


def test_module_level_functions():
    assert normalize("+6285200983740") == "085200983740"
    assert match("08520098374").matches[0].provider == "Telkomsel"
    assert check("").reason == "empty input"
