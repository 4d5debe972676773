import pytest

from loan_portal.normalization import build_payload, is_numeric, strip_non_digits, to_number


@pytest.mark.parametrize(
    "raw,expected",
    [
        ("555-111-2222", "5551112222"),
        ("(555) 111 2222", "5551112222"),
        ("5551112222", "5551112222"),
        ("abc", ""),
        ("", ""),
        (None, ""),
    ],
)
def test_strip_non_digits(raw, expected):
    assert strip_non_digits(raw) == expected


@pytest.mark.parametrize("raw", ["123-45-6789", " +1 (555) 111-2222 ", "x9y8z7", "----"])
def test_strip_non_digits_is_idempotent(raw):
    once = strip_non_digits(raw)
    assert strip_non_digits(once) == once


def test_to_number_keeps_whole_numbers_as_int():
    assert to_number("25000") == 25000
    assert isinstance(to_number("25000"), int)
    assert to_number(" 5000 ") == 5000


def test_to_number_parses_decimals():
    assert to_number("1080.50") == pytest.approx(1080.5)
    assert to_number(".5") == pytest.approx(0.5)
    assert to_number("1e3") == pytest.approx(1000.0)


@pytest.mark.parametrize("raw", ["", "   ", "abc", "12abc", "1,000"])
def test_to_number_rejects_non_numeric_text(raw):
    with pytest.raises(ValueError):
        to_number(raw)


def test_is_numeric():
    assert is_numeric("25000")
    assert is_numeric("-3.5")
    assert not is_numeric("")
    assert not is_numeric("twenty")


def test_build_payload_strips_and_coerces_without_mutating_form():
    form = {
        "name": "Jane",
        "address": "123 Main",
        "email": "jane@example.com",
        "phone": "555-111-2222",
        "ssn": "123-456-6789",
        "requestedAmount": "25000",
        "monthlyIncome": "5000",
        "existingDebt": "2000",
        "employmentStatus": "EMPLOYED",
    }
    original = dict(form)

    payload = build_payload(form)

    assert payload == {
        "name": "Jane",
        "address": "123 Main",
        "email": "jane@example.com",
        "phone": "5551112222",
        "ssn": "1234566789",
        "requestedAmount": 25000,
        "monthlyIncome": 5000,
        "existingDebt": 2000,
        "employmentStatus": "EMPLOYED",
    }
    assert form == original
    assert payload is not form


def test_build_payload_only_coerces_numeric_fields_that_are_present():
    payload = build_payload({"phone": "5551112222", "ssn": "123456789", "requestedAmount": "10"})
    assert "monthlyIncome" not in payload
    assert "existingDebt" not in payload


@pytest.mark.parametrize("raw", ["1e400", "9" * 400, "-1e309"])
def test_out_of_range_numbers_are_rejected(raw):
    assert not is_numeric(raw)
    with pytest.raises(ValueError):
        to_number(raw)
