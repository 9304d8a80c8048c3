"""Tests for IBANEngine."""

from __future__ import annotations

import re

import pytest

from testnumbers.core.exceptions import InvalidBankCodeError
from testnumbers.engines.iban import DUTCH_BANK_CODES, IBANEngine, normalize_iban, resolve_bank_code
from tests.fakes import ScriptedRandomSource

IBAN_RE = re.compile(r"NL[0-9]{2}[A-Z]{4}[0-9]{10}")


@pytest.fixture
def engine(settings):
    return IBANEngine(settings=settings)


class TestValidate:
    @pytest.mark.parametrize(
        "value",
        ["NL91ABNA0417164300", "NL20INGB0001234567", "NL91 ABNA 0417 1643 00", "nl91abna0417164300", " NL91\tABNA0417164300 "],
    )
    def test_accepts_known_valid(self, engine, value):
        assert engine.validate(value) is True

    @pytest.mark.parametrize("value", ["NL00ABNA0417164300", "NL91ABNA0000000000", "DE91ABNA0417164300"])
    def test_rejects_bad_checksum(self, engine, value):
        assert engine.validate(value) is False

    @pytest.mark.parametrize(
        "value", ["", "NLABNA0417164300", "NL91ABNA041716430", "NL91ABNA04171643000", "NL91AB1A0417164300", "NL9IABNA0417164300"]
    )
    def test_rejects_malformed(self, engine, value):
        assert engine.validate(value) is False

    def test_non_string_is_invalid(self, engine):
        assert engine.validate(None) is False
        assert engine.validate(b"NL91ABNA0417164300") is False


class TestFormat:
    def test_groups_of_four(self, engine):
        assert engine.format("NL91ABNA0417164300") == "NL91 ABNA 0417 1643 00"

    def test_reformats_spaced_input(self, engine):
        assert engine.format("nl91 abna0417 164300") == "NL91 ABNA 0417 1643 00"

    def test_normalize(self):
        assert normalize_iban(" nl91 abna\n0417164300 ") == "NL91ABNA0417164300"


class TestGenerate:
    def test_closed_loop(self, engine):
        for _ in range(500):
            iban = engine.generate()
            assert IBAN_RE.fullmatch(iban)
            assert iban[4:8] in DUTCH_BANK_CODES
            assert engine.validate(iban)

    def test_with_bank_code(self, engine):
        for _ in range(50):
            iban = engine.generate("INGB")
            assert iban[4:8] == "INGB"
            assert engine.validate(iban)

    def test_bank_code_is_case_insensitive(self, engine):
        assert engine.generate("rabo")[4:8] == "RABO"

    def test_scripted(self, settings):
        source = ScriptedRandomSource([0, 0, 4, 1, 7, 1, 6, 4, 3, 0, 0])
        assert IBANEngine(settings=settings, rng=source).generate() == "NL91ABNA0417164300"

    def test_scripted_with_bank(self, settings):
        source = ScriptedRandomSource([0, 0, 0, 1, 2, 3, 4, 5, 6, 7])
        assert IBANEngine(settings=settings, rng=source).generate("INGB") == "NL20INGB0001234567"

    def test_unknown_bank_raises(self, engine):
        with pytest.raises(InvalidBankCodeError) as exc_info:
            engine.generate("XXXX")
        assert exc_info.value.bank_code == "XXXX"
        assert "ABNA" in str(exc_info.value)


class TestGenerateMany:
    def test_returns_requested_count(self, engine):
        ibans = engine.generate_many(5)
        assert len(ibans) == 5
        assert all(engine.validate(i) for i in ibans)

    def test_with_bank_code(self, engine):
        ibans = engine.generate_many(5, "RABO")
        assert all(i[4:8] == "RABO" for i in ibans)

    def test_unknown_bank_generates_nothing(self, settings):
        source = ScriptedRandomSource([])
        with pytest.raises(InvalidBankCodeError):
            IBANEngine(settings=settings, rng=source).generate_many(3, "NOPE")
        assert source.consumed == 0


class TestResolveBankCode:
    def test_none_passes_through(self):
        assert resolve_bank_code(None) is None

    def test_normalizes(self):
        assert resolve_bank_code(" bunq ") == "BUNQ"

    def test_known_codes(self):
        assert set(DUTCH_BANK_CODES) == {"ABNA", "INGB", "RABO", "SNSB", "TRIO", "KNAB", "BUNQ", "ASNB"}
