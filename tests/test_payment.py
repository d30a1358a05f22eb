import pytest

from stargate_gql.payment import Payment


def test_from_dict_reads_camel_case():
    payment = Payment.from_dict({"onAccepted": 1000, "onFulfilled": 5000})
    assert payment.on_accepted == 1000
    assert payment.on_fulfilled == 5000


def test_round_trip():
    data = {"onAccepted": 12, "onFulfilled": 34}
    assert Payment.from_dict(data).to_dict() == data


def test_extra_keys_ignored():
    payment = Payment.from_dict({"onAccepted": 1, "onFulfilled": 2, "other": 3})
    assert payment == Payment(on_accepted=1, on_fulfilled=2)


def test_missing_field_raises():
    with pytest.raises(KeyError):
        Payment.from_dict({"onAccepted": 1})